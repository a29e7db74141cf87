"""Application ports package."""

from .database import DatabaseEnginePort
from .identity import CurrentUserPort
from .ledger_repository import LedgerReaderPort, LedgerWriterPort
from .price_quotes import PriceQuotePort

__all__ = [
    "DatabaseEnginePort",
    "CurrentUserPort",
    "LedgerReaderPort",
    "LedgerWriterPort",
    "PriceQuotePort",
]
