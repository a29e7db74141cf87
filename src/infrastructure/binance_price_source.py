"""Price quotes from the Binance public ticker endpoint."""

from decimal import Decimal, InvalidOperation
import threading

import requests

from src.application.ports.price_quotes import PriceQuotePort
from src.domain.errors import PriceUnavailableError
from src.infrastructure.settings import DEFAULT_PRICE_API_URL

BRIDGE_ASSET = "USDT"


class BinancePriceQuoteSource(PriceQuotePort):
    """Quote source converting Binance prices into a quote currency.

    Prices are looked up as ``<SYMBOL>USDT`` and converted with the
    ``USDT<QUOTE>`` rate. Symbols without a USDT pair fall back to a direct
    ``<SYMBOL><QUOTE>`` pair. The bridge rate is fetched once per source
    instance.
    """

    def __init__(
        self,
        quote_currency: str = "BRL",
        api_url: str = DEFAULT_PRICE_API_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            quote_currency: Currency prices are returned in.
            api_url: Ticker price endpoint.
            timeout: Timeout in seconds per HTTP request.
            session: Optional HTTP session, mainly for tests.
        """
        self._quote_currency = quote_currency.upper()
        self._api_url = api_url
        self._timeout = timeout
        self._session = session or requests.Session()
        self._bridge_rate: Decimal | None = None
        self._bridge_lock = threading.Lock()

    def fetch_price(self, symbol: str) -> Decimal:
        """Return the unit price of ``symbol`` in the quote currency.

        Raises:
            PriceUnavailableError: If neither pair yields a price.
        """
        symbol = symbol.upper()
        if symbol == self._quote_currency:
            return Decimal("1")
        bridge_rate = self.fetch_bridge_rate()
        if symbol == BRIDGE_ASSET:
            return bridge_rate
        bridged = self._fetch_ticker(f"{symbol}{BRIDGE_ASSET}")
        if bridged is not None:
            return bridged * bridge_rate
        direct = self._fetch_ticker(f"{symbol}{self._quote_currency}")
        if direct is not None:
            return direct
        raise PriceUnavailableError(
            symbol,
            f"no {BRIDGE_ASSET} or {self._quote_currency} pair",
        )

    def fetch_bridge_rate(self) -> Decimal:
        """Return the USDT rate in the quote currency, cached once fetched.

        Raises:
            PriceUnavailableError: If the bridge pair has no price.
        """
        with self._bridge_lock:
            if self._bridge_rate is None:
                pair = f"{BRIDGE_ASSET}{self._quote_currency}"
                rate = self._fetch_ticker(pair)
                if rate is None:
                    raise PriceUnavailableError(
                        BRIDGE_ASSET,
                        f"pair {pair} not available",
                    )
                self._bridge_rate = rate
            return self._bridge_rate

    def _fetch_ticker(self, pair: str) -> Decimal | None:
        """Return the price of a trading pair, or None when not listed.

        Raises:
            PriceUnavailableError: On connection errors or bad payloads.
        """
        try:
            response = self._session.get(
                self._api_url,
                params={"symbol": pair},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise PriceUnavailableError(pair, str(exc)) from exc
        if not response.ok:
            return None
        try:
            price = Decimal(str(response.json()["price"]))
        except (ValueError, KeyError, TypeError, InvalidOperation) as exc:
            raise PriceUnavailableError(pair, "malformed ticker payload") from exc
        return price if price > 0 else None


__all__ = ["BinancePriceQuoteSource", "BRIDGE_ASSET"]
