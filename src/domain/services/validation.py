"""Domain validation helpers."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.constants import (
    INCOME_FREQUENCIES,
    INCOME_TYPES,
    INVESTMENT_TYPES,
)
from src.domain.models import (
    UPDATABLE_FIELDS,
    CardPurchaseInput,
    IncomeSourceInput,
    InvestmentInput,
)


def validate_positive_amount(name: str, value: Decimal) -> None:
    """Raise ValueError unless ``value`` is strictly positive."""
    if value is None or value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_choice(name: str, value: str, choices: Iterable[str]) -> None:
    """Raise ValueError unless ``value`` is one of ``choices``."""
    allowed = tuple(choices)
    if value not in allowed:
        raise ValueError(
            f"Invalid {name} '{value}'. Expected one of: {', '.join(allowed)}"
        )


def validate_card_purchase(purchase: CardPurchaseInput) -> None:
    """Check amount and installment fields of a new purchase.

    One-time purchases must not carry installment numbers. A non-positive
    installment count is accepted and billed as a one-time charge.

    Args:
        purchase: Purchase to validate.

    Raises:
        ValueError: If the purchase violates the installment invariant.
    """
    validate_positive_amount("amount", purchase.amount)
    if not purchase.is_installment:
        if (
            purchase.total_installments is not None
            or purchase.current_installment is not None
        ):
            raise ValueError(
                "One-time purchases cannot define installment numbers"
            )
        return
    if purchase.total_installments is None:
        raise ValueError("Installment purchases require total_installments")


def validate_income_source(source: IncomeSourceInput) -> None:
    validate_positive_amount("amount", source.amount)
    validate_choice("income type", source.type, INCOME_TYPES)
    validate_choice("frequency", source.frequency, INCOME_FREQUENCIES)


def validate_investment(investment: InvestmentInput) -> None:
    validate_choice("investment type", investment.type, INVESTMENT_TYPES)
    if investment.quantity < 0:
        raise ValueError(
            f"quantity cannot be negative, got {investment.quantity}"
        )


def validate_updates(table: str, updates: Mapping[str, object]) -> None:
    """Reject partial updates touching non-updatable fields.

    Args:
        table: Ledger table receiving the update.
        updates: Field names mapped to new values.

    Raises:
        ValueError: If the update is empty or contains unknown fields.
    """
    if not updates:
        raise ValueError("No fields to update")
    allowed = UPDATABLE_FIELDS[table]
    unknown = sorted(set(updates) - allowed)
    if unknown:
        raise ValueError(
            f"Fields cannot be updated on {table}: {', '.join(unknown)}"
        )
    if "type" in updates:
        choices = INCOME_TYPES if table == "income_sources" else INVESTMENT_TYPES
        validate_choice("type", updates["type"], choices)
    if "frequency" in updates:
        validate_choice("frequency", updates["frequency"], INCOME_FREQUENCIES)


__all__ = [
    "validate_positive_amount",
    "validate_choice",
    "validate_card_purchase",
    "validate_income_source",
    "validate_investment",
    "validate_updates",
]
