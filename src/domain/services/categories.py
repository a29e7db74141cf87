"""Category breakdown of current-month spend."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import (
    CATEGORY_COLORS,
    DEFAULT_CATEGORY_COLOR,
    DEFAULT_EXPENSE_CATEGORY,
    DEFAULT_PURCHASE_CATEGORY,
)
from src.domain.models import (
    CardPurchase,
    CategoryAmount,
    ExtraExpense,
    FixedExpense,
    MonthBucket,
)
from src.domain.services.amortization import purchase_monthly_contribution
from src.domain.services.normalization import normalize_category
from src.utils.decimal_utils import coerce_decimal


def category_color(category: str) -> str:
    """Return the display color of a category."""
    return CATEGORY_COLORS.get(category, DEFAULT_CATEGORY_COLOR)


def compute_category_breakdown(
    *,
    fixed_expenses: Sequence[FixedExpense],
    extra_expenses: Sequence[ExtraExpense],
    purchases: Sequence[CardPurchase],
    month: MonthBucket,
) -> list[CategoryAmount]:
    """Aggregate one month of spend by category.

    Args:
        fixed_expenses: Fixed expenses; only active ones count.
        extra_expenses: Extra expenses; only those dated in ``month`` count.
        purchases: Card purchases; only those dated in ``month`` count,
            at their amortized monthly contribution.
        month: Month to break down.

    Returns:
        list[CategoryAmount]: Non-zero categories, largest amount first.
    """
    totals: dict[str, Decimal] = {}

    def _add(category: str, amount: Decimal) -> None:
        totals[category] = totals.get(category, Decimal("0")) + amount

    for expense in fixed_expenses:
        if expense.is_active:
            _add(
                normalize_category(expense.category, DEFAULT_EXPENSE_CATEGORY),
                coerce_decimal(expense.amount),
            )
    for expense in extra_expenses:
        if month.contains(expense.expense_date):
            _add(
                normalize_category(expense.category, DEFAULT_EXPENSE_CATEGORY),
                coerce_decimal(expense.amount),
            )
    for purchase in purchases:
        if month.contains(purchase.purchase_date):
            _add(
                normalize_category(
                    purchase.category,
                    DEFAULT_PURCHASE_CATEGORY,
                ),
                purchase_monthly_contribution(purchase),
            )

    ordered = sorted(
        ((name, amount) for name, amount in totals.items() if amount != 0),
        key=lambda item: (-item[1], item[0]),
    )
    return [
        CategoryAmount(
            category=name,
            amount=amount,
            color=category_color(name),
        )
        for name, amount in ordered
    ]


__all__ = ["category_color", "compute_category_breakdown"]
