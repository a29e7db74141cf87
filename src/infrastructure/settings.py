"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_PRICE_API_URL = "https://api.binance.com/api/v3/ticker/price"


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the finance dashboard.

    Attributes:
        user_id: Identity of the current user, if configured.
        currency_code: Display currency of the ledger amounts.
        quote_currency: Currency prices are converted into.
        price_api_url: Ticker endpoint of the price source.
        price_timeout: Timeout in seconds for a single quote request.
        price_max_workers: Concurrent quote lookups.
        summary_max_workers: Concurrent ledger reads for the summary.
    """

    user_id: Optional[str] = None
    currency_code: str = "BRL"
    quote_currency: str = "BRL"
    price_api_url: str = DEFAULT_PRICE_API_URL
    price_timeout: float = 10.0
    price_max_workers: int = 4
    summary_max_workers: int = 7

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        user_id = (os.getenv("FINANCE_USER_ID") or "").strip() or None
        currency_code = (
            os.getenv("FINANCE_CURRENCY", cls.currency_code).strip().upper()
        )
        quote_currency = (
            os.getenv("PRICE_QUOTE_CURRENCY", cls.quote_currency)
            .strip()
            .upper()
        )
        price_api_url = os.getenv("PRICE_API_URL", cls.price_api_url).strip()
        return cls(
            user_id=user_id,
            currency_code=currency_code,
            quote_currency=quote_currency,
            price_api_url=price_api_url,
            price_timeout=cls._read_number(
                "PRICE_TIMEOUT_SECONDS",
                cls.price_timeout,
                float,
                logger,
            ),
            price_max_workers=cls._read_number(
                "PRICE_MAX_WORKERS",
                cls.price_max_workers,
                int,
                logger,
            ),
            summary_max_workers=cls._read_number(
                "SUMMARY_MAX_WORKERS",
                cls.summary_max_workers,
                int,
                logger,
            ),
        )

    @staticmethod
    def _read_number(name: str, default, cast, logger):
        """Read a positive number from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is missing or invalid.
            cast: Numeric type to convert into.
            logger: Logger used for warnings.

        Returns:
            The parsed value, or ``default``.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive; using {default}")
            return default
        return value


__all__ = ["DashboardSettings", "DEFAULT_PRICE_API_URL"]
