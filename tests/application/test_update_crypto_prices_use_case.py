"""Tests for UpdateCryptoPricesUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.update_crypto_prices import (
    UpdateCryptoPricesUseCase,
)
from src.domain.errors import PriceUnavailableError
from src.domain.models import Investment


def _investment(investment_id, symbol):
    return Investment(
        investment_id,
        "u1",
        investment_id,
        "crypto",
        symbol,
        Decimal("1"),
        Decimal("10"),
        Decimal("10"),
        date(2024, 1, 1),
    )


class _PriceSource:
    def __init__(self, prices):
        self.prices = prices
        self.requested: list[str] = []

    def fetch_price(self, symbol):
        self.requested.append(symbol)
        price = self.prices[symbol]
        if isinstance(price, Exception):
            raise price
        return price


def _use_case(investments, prices, writer=None):
    reader = MagicMock()
    reader.fetch_investments.return_value = investments
    current_user = MagicMock()
    current_user.get_current_user_id.return_value = "u1"
    source = _PriceSource(prices)
    writer = writer or MagicMock()
    use_case = UpdateCryptoPricesUseCase(
        reader,
        writer,
        source,
        current_user,
        logger=MagicMock(),
        max_workers=2,
    )
    return use_case, reader, writer, source


def test_failing_symbol_does_not_block_others():
    use_case, reader, writer, _source = _use_case(
        [_investment("i1", "BTC"), _investment("i2", "ETH")],
        {
            "BTC": Decimal("350000"),
            "ETH": PriceUnavailableError("ETH", "not listed"),
        },
    )

    result = use_case.execute()

    reader.fetch_investments.assert_called_once_with(
        "u1",
        investment_type="crypto",
    )
    writer.update_investment_price.assert_called_once_with(
        "u1",
        "i1",
        Decimal("350000"),
    )
    assert result.updated == ["BTC"]
    assert result.failed == ["ETH"]
    assert result.is_partial


def test_symbol_is_fetched_once_for_several_positions():
    use_case, _reader, writer, source = _use_case(
        [_investment("i1", "btc"), _investment("i2", "BTC")],
        {"BTC": Decimal("100")},
    )

    result = use_case.execute()

    assert source.requested == ["BTC"]
    assert writer.update_investment_price.call_count == 2
    assert result.updated == ["BTC"]
    assert not result.is_partial


def test_positions_without_symbol_are_skipped():
    use_case, _reader, writer, source = _use_case(
        [_investment("i1", None), _investment("i2", " ")],
        {},
    )

    result = use_case.execute()

    assert result.skipped == ["i1", "i2"]
    assert source.requested == []
    writer.update_investment_price.assert_not_called()


def test_non_positive_prices_are_not_written():
    use_case, _reader, writer, _source = _use_case(
        [_investment("i1", "DOGE")],
        {"DOGE": Decimal("0")},
    )

    result = use_case.execute()

    writer.update_investment_price.assert_not_called()
    assert result.failed == ["DOGE"]


def test_unexpected_errors_are_isolated():
    writer = MagicMock()
    writer.update_investment_price.side_effect = [RuntimeError("db"), None]
    use_case, _reader, _writer, _source = _use_case(
        [_investment("i1", "ADA"), _investment("i2", "SOL")],
        {"ADA": Decimal("2"), "SOL": Decimal("700")},
        writer=writer,
    )

    result = use_case.execute()

    assert result.failed == ["ADA"]
    assert result.updated == ["SOL"]
