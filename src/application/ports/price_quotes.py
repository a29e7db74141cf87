"""Port for external price quotes."""

from decimal import Decimal
from typing import Protocol


class PriceQuotePort(Protocol):
    """Port exposing unit prices in the reference currency."""

    def fetch_price(self, symbol: str) -> Decimal:
        """Return the current unit price of ``symbol``.

        Raises:
            PriceUnavailableError: If no quote can be obtained.
        """


__all__ = ["PriceQuotePort"]
