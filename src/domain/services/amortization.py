"""Installment amortization for card purchases."""

from decimal import Decimal

from src.domain.models import CardPurchase
from src.utils.decimal_utils import coerce_decimal


def monthly_contribution(
    amount,
    is_installment: bool,
    total_installments: int | None,
) -> Decimal:
    """Return the share of a purchase billed in one month.

    Installment purchases contribute ``amount / total_installments``. A
    one-time charge, or an installment count that is missing or not
    positive, contributes the full amount.

    Args:
        amount: Full purchase amount.
        is_installment: Whether the purchase is split into installments.
        total_installments: Number of installments, if any.

    Returns:
        Decimal: Amount billed per month.
    """
    value = coerce_decimal(amount)
    if is_installment and total_installments and total_installments > 0:
        return value / Decimal(total_installments)
    return value


def purchase_monthly_contribution(purchase: CardPurchase) -> Decimal:
    """Return the monthly contribution of a card purchase."""
    return monthly_contribution(
        purchase.amount,
        purchase.is_installment,
        purchase.total_installments,
    )


__all__ = ["monthly_contribution", "purchase_monthly_contribution"]
