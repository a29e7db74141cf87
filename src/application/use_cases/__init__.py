"""Application use cases package."""

from .check_card_balances import CheckCardBalancesUseCase
from .get_financial_summary import GetFinancialSummaryUseCase
from .manage_card_purchases import (
    CreateCardPurchaseUseCase,
    DeleteCardPurchaseUseCase,
    ListCardPurchasesUseCase,
)
from .manage_ledger_entries import ManageLedgerEntriesUseCase
from .update_crypto_prices import UpdateCryptoPricesUseCase

__all__ = [
    "CheckCardBalancesUseCase",
    "GetFinancialSummaryUseCase",
    "CreateCardPurchaseUseCase",
    "DeleteCardPurchaseUseCase",
    "ListCardPurchasesUseCase",
    "ManageLedgerEntriesUseCase",
    "UpdateCryptoPricesUseCase",
]
