"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.check_card_balances import (
    CheckCardBalancesUseCase,
)
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.manage_card_purchases import (
    CreateCardPurchaseUseCase,
)
from src.application.use_cases.update_crypto_prices import (
    UpdateCryptoPricesUseCase,
)
from src.infrastructure import container
from src.infrastructure.binance_price_source import BinancePriceQuoteSource
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.settings import DashboardSettings

SETTINGS = DashboardSettings(
    user_id="u1",
    currency_code="USD",
    quote_currency="USD",
    summary_max_workers=3,
)


def test_build_ledger_repository_uses_given_port() -> None:
    db_port = MagicMock()

    repository = container.build_ledger_repository(db_port=db_port)

    assert isinstance(repository, SqlAlchemyLedgerRepository)


def test_build_current_user_uses_settings() -> None:
    current_user = container.build_current_user(SETTINGS)

    assert current_user.get_current_user_id() == "u1"


def test_build_price_source_uses_quote_currency() -> None:
    source = container.build_price_source(SETTINGS)

    assert isinstance(source, BinancePriceQuoteSource)


def test_use_case_builders_wire_settings() -> None:
    db_port = MagicMock()

    summary = container.build_financial_summary_use_case(db_port, SETTINGS)
    prices = container.build_update_crypto_prices_use_case(db_port, SETTINGS)
    balances = container.build_check_card_balances_use_case(db_port, SETTINGS)
    create, _delete, _list = container.build_card_purchase_use_cases(
        db_port,
        SETTINGS,
    )

    assert isinstance(summary, GetFinancialSummaryUseCase)
    assert summary._currency_code == "USD"
    assert summary._max_workers == 3
    assert isinstance(prices, UpdateCryptoPricesUseCase)
    assert isinstance(balances, CheckCardBalancesUseCase)
    assert isinstance(create, CreateCardPurchaseUseCase)
