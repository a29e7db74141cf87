"""Tests for infrastructure settings and identity."""

from unittest.mock import MagicMock

import pytest

from src.domain.errors import NotAuthenticatedError
from src.infrastructure import settings as settings_module
from src.infrastructure.identity import StaticCurrentUser
from src.infrastructure.settings import DEFAULT_PRICE_API_URL, DashboardSettings

_ENV_NAMES = (
    "FINANCE_USER_ID",
    "FINANCE_CURRENCY",
    "PRICE_QUOTE_CURRENCY",
    "PRICE_API_URL",
    "PRICE_TIMEOUT_SECONDS",
    "PRICE_MAX_WORKERS",
    "SUMMARY_MAX_WORKERS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    """Missing variables should fall back to defaults."""
    settings = DashboardSettings.from_env()

    assert settings.user_id is None
    assert settings.currency_code == "BRL"
    assert settings.quote_currency == "BRL"
    assert settings.price_api_url == DEFAULT_PRICE_API_URL
    assert settings.price_timeout == 10.0
    assert settings.price_max_workers == 4
    assert settings.summary_max_workers == 7


def test_from_env_reads_values(monkeypatch) -> None:
    monkeypatch.setenv("FINANCE_USER_ID", " user-1 ")
    monkeypatch.setenv("FINANCE_CURRENCY", "usd")
    monkeypatch.setenv("PRICE_QUOTE_CURRENCY", "eur")
    monkeypatch.setenv("PRICE_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("PRICE_MAX_WORKERS", "8")

    settings = DashboardSettings.from_env()

    assert settings.user_id == "user-1"
    assert settings.currency_code == "USD"
    assert settings.quote_currency == "EUR"
    assert settings.price_timeout == 2.5
    assert settings.price_max_workers == 8


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_numbers_fall_back_to_default(monkeypatch, raw) -> None:
    monkeypatch.setenv("SUMMARY_MAX_WORKERS", raw)

    settings = DashboardSettings.from_env()

    assert settings.summary_max_workers == 7


def test_static_current_user_requires_id() -> None:
    assert StaticCurrentUser("u1").get_current_user_id() == "u1"
    with pytest.raises(NotAuthenticatedError):
        StaticCurrentUser(None).get_current_user_id()
