"""Use case to refresh crypto investment prices from a quote source."""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from src.application.ports.identity import CurrentUserPort
from src.application.ports.ledger_repository import (
    LedgerReaderPort,
    LedgerWriterPort,
)
from src.application.ports.price_quotes import PriceQuotePort
from src.domain.errors import PriceUnavailableError
from src.domain.models import Investment, PriceUpdateResult
from src.domain.services.normalization import normalize_symbol
from src.infrastructure.logging.logger import get_app_logger

CRYPTO_TYPE = "crypto"


class UpdateCryptoPricesUseCase:
    """Mark crypto investments to market.

    Quotes are fetched concurrently, one request chain per distinct symbol.
    A failing symbol is logged and reported without affecting the others;
    only positive prices are written.
    """

    def __init__(
        self,
        ledger_reader: LedgerReaderPort,
        ledger_writer: LedgerWriterPort,
        price_source: PriceQuotePort,
        current_user: CurrentUserPort,
        logger=None,
        max_workers: int = 4,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_reader: Port providing user-scoped ledger reads.
            ledger_writer: Port persisting the new prices.
            price_source: Port returning unit prices per symbol.
            current_user: Port resolving the requesting user.
            logger: Optional logger compatible with logging.Logger-like API.
            max_workers: Concurrent quote requests.
        """
        self._ledger_reader = ledger_reader
        self._ledger_writer = ledger_writer
        self._price_source = price_source
        self._current_user = current_user
        self._logger = logger or get_app_logger()
        self._max_workers = max_workers

    def execute(self) -> PriceUpdateResult:
        """Refresh prices and return which symbols were updated.

        Returns:
            PriceUpdateResult: Updated and failed symbols, skipped ids.
        """
        user_id = self._current_user.get_current_user_id()
        investments = self._ledger_reader.fetch_investments(
            user_id,
            investment_type=CRYPTO_TYPE,
        )
        by_symbol, skipped = self._group_by_symbol(investments)
        if skipped:
            self._logger.info(
                f"Skipping {len(skipped)} crypto investments without symbol"
            )
        if not by_symbol:
            self._logger.info("No crypto symbols to refresh")
            return PriceUpdateResult(skipped=skipped)

        symbols = sorted(by_symbol)
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            prices = list(executor.map(self._fetch_price, symbols))

        updated: list[str] = []
        failed: list[str] = []
        for symbol, price in zip(symbols, prices):
            if price is None:
                failed.append(symbol)
                continue
            if self._store_price(user_id, symbol, by_symbol[symbol], price):
                updated.append(symbol)
            else:
                failed.append(symbol)

        self._logger.info(
            f"Crypto price refresh: updated={len(updated)}, "
            f"failed={len(failed)}, skipped={len(skipped)}"
        )
        return PriceUpdateResult(
            updated=updated,
            failed=failed,
            skipped=skipped,
        )

    @staticmethod
    def _group_by_symbol(
        investments: list[Investment],
    ) -> tuple[dict[str, list[Investment]], list[str]]:
        grouped: dict[str, list[Investment]] = {}
        skipped: list[str] = []
        for investment in investments:
            symbol = normalize_symbol(investment.symbol)
            if symbol is None:
                skipped.append(investment.id)
                continue
            grouped.setdefault(symbol, []).append(investment)
        return grouped, skipped

    def _fetch_price(self, symbol: str) -> Decimal | None:
        try:
            price = self._price_source.fetch_price(symbol)
        except PriceUnavailableError as exc:
            self._logger.warning(str(exc))
            return None
        except Exception as exc:
            self._logger.error(f"Unexpected error fetching {symbol}: {exc}")
            return None
        if price is None or price <= 0:
            self._logger.warning(f"Ignoring non-positive price for {symbol}")
            return None
        return price

    def _store_price(
        self,
        user_id: str,
        symbol: str,
        investments: list[Investment],
        price: Decimal,
    ) -> bool:
        try:
            for investment in investments:
                self._ledger_writer.update_investment_price(
                    user_id,
                    investment.id,
                    price,
                )
        except Exception as exc:
            self._logger.error(f"Failed to store price for {symbol}: {exc}")
            return False
        self._logger.info(
            f"Updated {len(investments)} investments of {symbol} to {price}"
        )
        return True


__all__ = ["UpdateCryptoPricesUseCase", "CRYPTO_TYPE"]
