"""Monthly aggregation of ledger records."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models import (
    CardPurchase,
    ExtraExpense,
    FixedExpense,
    IncomeHistory,
    IncomeSource,
    Investment,
    MonthBucket,
    MonthlySnapshot,
)
from src.domain.services.amortization import purchase_monthly_contribution
from src.domain.services.income import project_monthly_income, split_by_type
from src.utils.decimal_utils import coerce_decimal, quantize_money


def active_fixed_total(fixed_expenses: Sequence[FixedExpense]) -> Decimal:
    """Return the sum of active fixed expense amounts."""
    return sum(
        (
            coerce_decimal(expense.amount)
            for expense in fixed_expenses
            if expense.is_active
        ),
        Decimal("0"),
    )


def extra_total(
    extra_expenses: Sequence[ExtraExpense],
    bucket: MonthBucket,
) -> Decimal:
    """Return the extra expenses dated within a month."""
    return sum(
        (
            coerce_decimal(expense.amount)
            for expense in extra_expenses
            if bucket.contains(expense.expense_date)
        ),
        Decimal("0"),
    )


def card_total(
    purchases: Sequence[CardPurchase],
    bucket: MonthBucket,
) -> Decimal:
    """Return amortized card billing for purchases dated within a month.

    Only the purchase month is charged; later installments of the same
    purchase do not reach later buckets.
    """
    return sum(
        (
            purchase_monthly_contribution(purchase)
            for purchase in purchases
            if bucket.contains(purchase.purchase_date)
        ),
        Decimal("0"),
    )


def invested_cost_basis(
    investments: Sequence[Investment],
    bucket: MonthBucket,
) -> Decimal:
    """Return the cumulative cost basis as of the month end, in cents."""
    total = sum(
        (
            investment.cost_basis
            for investment in investments
            if investment.purchase_date is not None
            and investment.purchase_date <= bucket.end
        ),
        Decimal("0"),
    )
    return quantize_money(total)


def compute_monthly_series(
    window: Sequence[MonthBucket],
    *,
    purchases: Sequence[CardPurchase],
    fixed_expenses: Sequence[FixedExpense],
    extra_expenses: Sequence[ExtraExpense],
    investments: Sequence[Investment],
    income_sources: Sequence[IncomeSource],
    income_history: Sequence[IncomeHistory],
    current_month_key: str | None = None,
) -> list[MonthlySnapshot]:
    """Aggregate ledger records into one snapshot per month bucket.

    Income comes from realized history split by the type of its source.
    The current month falls back to a projection from active sources when
    it has no history yet. Fixed expenses are today's active set applied to
    every month.

    Args:
        window: Month buckets, oldest first.
        purchases: Card purchases covering the window.
        fixed_expenses: All fixed expenses.
        extra_expenses: Extra expenses covering the window.
        investments: All investments.
        income_sources: All income sources.
        income_history: Income history covering the window.
        current_month_key: Key of the current month; defaults to the last
            bucket of the window.

    Returns:
        list[MonthlySnapshot]: One snapshot per bucket, same order.
    """
    if current_month_key is None and window:
        current_month_key = window[-1].key
    type_by_source = {source.id: source.type for source in income_sources}
    fixed_sum = active_fixed_total(fixed_expenses)

    series: list[MonthlySnapshot] = []
    for bucket in window:
        month_history = [
            record
            for record in income_history
            if bucket.contains(record.date)
        ]
        if bucket.key == current_month_key and not month_history:
            income = project_monthly_income(income_sources)
        else:
            income = split_by_type(
                (
                    type_by_source.get(record.income_source_id),
                    coerce_decimal(record.amount),
                )
                for record in month_history
            )
        series.append(
            MonthlySnapshot(
                key=bucket.key,
                label=bucket.label,
                income_active=income.active,
                income_passive=income.passive,
                income_alternative=income.alternative,
                expenses_fixed=fixed_sum,
                expenses_extra=extra_total(extra_expenses, bucket),
                expenses_card=card_total(purchases, bucket),
                invested_cost_basis=invested_cost_basis(investments, bucket),
            )
        )
    return series


__all__ = [
    "active_fixed_total",
    "extra_total",
    "card_total",
    "invested_cost_basis",
    "compute_monthly_series",
]
