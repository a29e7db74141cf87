"""Tests for BinancePriceQuoteSource with a fake HTTP session."""

from decimal import Decimal

import pytest
import requests

from src.domain.errors import PriceUnavailableError
from src.infrastructure.binance_price_source import BinancePriceQuoteSource


class _Response:
    def __init__(self, payload=None, status_code=200) -> None:
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _Session:
    def __init__(self, tickers) -> None:
        self.tickers = tickers
        self.calls: list[str] = []

    def get(self, url, params=None, timeout=None):
        pair = params["symbol"]
        self.calls.append(pair)
        value = self.tickers.get(pair)
        if isinstance(value, Exception) and not isinstance(value, ValueError):
            raise value
        if value is None:
            return _Response({"code": -1121, "msg": "Invalid symbol."}, 400)
        if isinstance(value, ValueError):
            return _Response(value)
        return _Response({"symbol": pair, "price": value})


def _source(tickers, quote="BRL"):
    session = _Session(tickers)
    return BinancePriceQuoteSource(quote_currency=quote, session=session), session


def test_price_is_bridged_through_usdt():
    source, session = _source({"USDTBRL": "5.00", "BTCUSDT": "60000.00"})

    assert source.fetch_price("btc") == Decimal("300000.0000")
    assert session.calls == ["USDTBRL", "BTCUSDT"]


def test_usdt_uses_bridge_rate_directly():
    source, _session = _source({"USDTBRL": "5.10"})

    assert source.fetch_price("USDT") == Decimal("5.10")


def test_bridge_rate_is_fetched_once():
    source, session = _source(
        {"USDTBRL": "5", "BTCUSDT": "2", "ETHUSDT": "3"}
    )

    source.fetch_price("BTC")
    source.fetch_price("ETH")

    assert session.calls.count("USDTBRL") == 1


def test_direct_pair_is_used_when_usdt_pair_is_missing():
    source, session = _source({"USDTBRL": "5", "XYZBRL": "12.5"})

    assert source.fetch_price("XYZ") == Decimal("12.5")
    assert session.calls[-2:] == ["XYZUSDT", "XYZBRL"]


def test_quote_currency_symbol_is_one():
    source, session = _source({})

    assert source.fetch_price("brl") == Decimal("1")
    assert session.calls == []


def test_missing_pairs_raise_price_unavailable():
    source, _session = _source({"USDTBRL": "5"})

    with pytest.raises(PriceUnavailableError) as excinfo:
        source.fetch_price("NOPE")
    assert excinfo.value.symbol == "NOPE"


def test_missing_bridge_rate_raises():
    source, _session = _source({"BTCUSDT": "60000"})

    with pytest.raises(PriceUnavailableError):
        source.fetch_price("BTC")


def test_non_positive_price_counts_as_unavailable():
    source, _session = _source({"USDTBRL": "5", "DEADUSDT": "0"})

    with pytest.raises(PriceUnavailableError):
        source.fetch_price("DEAD")


def test_connection_errors_are_translated():
    source, _session = _source(
        {"USDTBRL": requests.ConnectionError("offline")}
    )

    with pytest.raises(PriceUnavailableError, match="offline"):
        source.fetch_price("BTC")


def test_malformed_payload_is_translated():
    source, _session = _source({"USDTBRL": ValueError("not json")})

    with pytest.raises(PriceUnavailableError, match="malformed"):
        source.fetch_price("BTC")
