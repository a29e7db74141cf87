"""Domain models for raw ledger records."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CardPurchase:
    """Purchase charged to a credit card.

    Attributes:
        amount: Full purchase amount, not the per-installment share.
        is_installment: Whether the amount is billed across installments.
        total_installments: Installment count, None for one-time charges.
        current_installment: Installment currently being billed, if any.
    """

    id: str
    card_id: str
    user_id: str
    description: str
    amount: Decimal
    purchase_date: date
    category: str
    is_installment: bool = False
    total_installments: int | None = None
    current_installment: int | None = None


@dataclass(frozen=True)
class CreditCard:
    """Credit card with its incrementally maintained balance.

    Attributes:
        current_balance: Running total of attached purchase amounts.
        due_date: Day of month the bill is due.
        purchases: Attached purchases, filled by joined reads only.
    """

    id: str
    user_id: str
    name: str
    last_four: str
    credit_limit: Decimal
    current_balance: Decimal
    due_date: int
    color: str
    purchases: tuple[CardPurchase, ...] = field(default_factory=tuple)

    @property
    def available_limit(self) -> Decimal:
        """Return the unused part of the credit limit."""
        return self.credit_limit - self.current_balance


@dataclass(frozen=True)
class FixedExpense:
    """Recurring monthly obligation."""

    id: str
    user_id: str
    name: str
    amount: Decimal
    category: str
    due_day: int
    is_active: bool = True


@dataclass(frozen=True)
class ExtraExpense:
    """One-off expense."""

    id: str
    user_id: str
    description: str
    amount: Decimal
    category: str
    expense_date: date


@dataclass(frozen=True)
class Investment:
    """Investment position.

    Attributes:
        purchase_price: Cost basis per unit.
        current_price: Mark-to-market price per unit.
        symbol: Optional ticker used for external price lookups.
    """

    id: str
    user_id: str
    name: str
    type: str
    symbol: str | None
    quantity: Decimal
    purchase_price: Decimal
    current_price: Decimal
    purchase_date: date

    @property
    def cost_basis(self) -> Decimal:
        return self.quantity * self.purchase_price

    @property
    def market_value(self) -> Decimal:
        return self.quantity * self.current_price


@dataclass(frozen=True)
class IncomeSource:
    """Recurring income source."""

    id: str
    user_id: str
    name: str
    type: str
    amount: Decimal
    frequency: str
    source: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class IncomeHistory:
    """Realized income event tied to an income source."""

    id: str
    income_source_id: str
    user_id: str
    amount: Decimal
    date: date
    notes: str | None = None


@dataclass(frozen=True)
class CreditCardInput:
    name: str
    last_four: str
    credit_limit: Decimal
    due_date: int
    color: str
    current_balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class CardPurchaseInput:
    card_id: str
    description: str
    amount: Decimal
    purchase_date: date
    category: str
    is_installment: bool = False
    total_installments: int | None = None
    current_installment: int | None = None


@dataclass(frozen=True)
class FixedExpenseInput:
    name: str
    amount: Decimal
    category: str
    due_day: int
    is_active: bool = True


@dataclass(frozen=True)
class ExtraExpenseInput:
    description: str
    amount: Decimal
    category: str
    expense_date: date


@dataclass(frozen=True)
class InvestmentInput:
    name: str
    type: str
    symbol: str | None
    quantity: Decimal
    purchase_price: Decimal
    current_price: Decimal
    purchase_date: date


@dataclass(frozen=True)
class IncomeSourceInput:
    name: str
    type: str
    amount: Decimal
    frequency: str
    source: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class IncomeHistoryInput:
    income_source_id: str
    amount: Decimal
    date: date
    notes: str | None = None


# Fields accepted by partial updates, per table.
UPDATABLE_FIELDS = {
    "credit_cards": frozenset(
        {"name", "last_four", "credit_limit", "due_date", "color"}
    ),
    "fixed_expenses": frozenset(
        {"name", "amount", "category", "due_day", "is_active"}
    ),
    "investments": frozenset(
        {
            "name",
            "type",
            "symbol",
            "quantity",
            "purchase_price",
            "current_price",
            "purchase_date",
        }
    ),
    "income_sources": frozenset(
        {"name", "type", "amount", "frequency", "source", "is_active"}
    ),
}


__all__ = [
    "CardPurchase",
    "CreditCard",
    "FixedExpense",
    "ExtraExpense",
    "Investment",
    "IncomeSource",
    "IncomeHistory",
    "CreditCardInput",
    "CardPurchaseInput",
    "FixedExpenseInput",
    "ExtraExpenseInput",
    "InvestmentInput",
    "IncomeSourceInput",
    "IncomeHistoryInput",
    "UPDATABLE_FIELDS",
]
