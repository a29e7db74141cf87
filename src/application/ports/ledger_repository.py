"""Ports for reading and writing user-scoped ledger records."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models import (
    CardPurchase,
    CardPurchaseInput,
    CreditCard,
    CreditCardInput,
    ExtraExpense,
    ExtraExpenseInput,
    FixedExpense,
    FixedExpenseInput,
    IncomeHistory,
    IncomeHistoryInput,
    IncomeSource,
    IncomeSourceInput,
    Investment,
    InvestmentInput,
)


class LedgerReaderPort(Protocol):
    """Port exposing read access to a user's ledger."""

    def fetch_credit_cards(
        self,
        user_id: str,
        include_purchases: bool = True,
    ) -> list[CreditCard]:
        """Return the user's cards, joined with their purchases."""

    def fetch_card_purchases(
        self,
        user_id: str,
        card_id: str | None = None,
        since: date | None = None,
    ) -> list[CardPurchase]:
        """Return purchases, optionally for one card or from a date on."""

    def fetch_card_purchase(
        self,
        user_id: str,
        purchase_id: str,
    ) -> CardPurchase | None:
        """Return a single purchase, or None when missing."""

    def fetch_fixed_expenses(self, user_id: str) -> list[FixedExpense]:
        """Return the user's fixed expenses."""

    def fetch_extra_expenses(
        self,
        user_id: str,
        since: date | None = None,
    ) -> list[ExtraExpense]:
        """Return extra expenses, optionally from a date on."""

    def fetch_investments(
        self,
        user_id: str,
        investment_type: str | None = None,
    ) -> list[Investment]:
        """Return investments, optionally of a single type."""

    def fetch_income_sources(self, user_id: str) -> list[IncomeSource]:
        """Return the user's income sources."""

    def fetch_income_history(
        self,
        user_id: str,
        source_id: str | None = None,
        since: date | None = None,
    ) -> list[IncomeHistory]:
        """Return realized income, optionally filtered."""


class LedgerWriterPort(Protocol):
    """Port exposing write access to a user's ledger."""

    def create_credit_card(
        self,
        user_id: str,
        card: CreditCardInput,
    ) -> CreditCard:
        """Insert a credit card."""

    def update_credit_card(
        self,
        user_id: str,
        card_id: str,
        updates: Mapping[str, object],
    ) -> CreditCard:
        """Apply a partial update to a credit card."""

    def delete_credit_card(self, user_id: str, card_id: str) -> None:
        """Delete a credit card and its purchases."""

    def set_card_balance(
        self,
        user_id: str,
        card_id: str,
        balance: Decimal,
    ) -> None:
        """Overwrite a card balance."""

    def create_card_purchase(
        self,
        user_id: str,
        purchase: CardPurchaseInput,
    ) -> tuple[CardPurchase, bool]:
        """Insert a purchase and add its amount to the card balance.

        Both writes share one transaction. Returns the purchase and whether
        the card balance was adjusted.
        """

    def delete_card_purchase(
        self,
        user_id: str,
        purchase_id: str,
    ) -> tuple[CardPurchase, bool]:
        """Delete a purchase and subtract its amount from the card balance.

        Both writes share one transaction. Returns the deleted purchase and
        whether the card balance was adjusted.
        """

    def create_fixed_expense(
        self,
        user_id: str,
        expense: FixedExpenseInput,
    ) -> FixedExpense:
        """Insert a fixed expense."""

    def update_fixed_expense(
        self,
        user_id: str,
        expense_id: str,
        updates: Mapping[str, object],
    ) -> FixedExpense:
        """Apply a partial update to a fixed expense."""

    def delete_fixed_expense(self, user_id: str, expense_id: str) -> None:
        """Delete a fixed expense."""

    def create_extra_expense(
        self,
        user_id: str,
        expense: ExtraExpenseInput,
    ) -> ExtraExpense:
        """Insert an extra expense."""

    def delete_extra_expense(self, user_id: str, expense_id: str) -> None:
        """Delete an extra expense."""

    def create_investment(
        self,
        user_id: str,
        investment: InvestmentInput,
    ) -> Investment:
        """Insert an investment."""

    def update_investment(
        self,
        user_id: str,
        investment_id: str,
        updates: Mapping[str, object],
    ) -> Investment:
        """Apply a partial update to an investment."""

    def delete_investment(self, user_id: str, investment_id: str) -> None:
        """Delete an investment."""

    def update_investment_price(
        self,
        user_id: str,
        investment_id: str,
        current_price: Decimal,
    ) -> None:
        """Store a new mark-to-market price."""

    def create_income_source(
        self,
        user_id: str,
        source: IncomeSourceInput,
    ) -> IncomeSource:
        """Insert an income source."""

    def update_income_source(
        self,
        user_id: str,
        source_id: str,
        updates: Mapping[str, object],
    ) -> IncomeSource:
        """Apply a partial update to an income source."""

    def delete_income_source(self, user_id: str, source_id: str) -> None:
        """Delete an income source and its history."""

    def create_income_history(
        self,
        user_id: str,
        record: IncomeHistoryInput,
    ) -> IncomeHistory:
        """Insert a realized income record."""


__all__ = ["LedgerReaderPort", "LedgerWriterPort"]
