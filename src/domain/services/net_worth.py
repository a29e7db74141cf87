"""Net worth snapshot and backward reconstruction."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models import (
    CreditCard,
    Investment,
    MonthlySnapshot,
    NetWorthPoint,
    NetWorthSnapshot,
)
from src.domain.services.amortization import purchase_monthly_contribution
from src.utils.decimal_utils import coerce_decimal, quantize_money


def total_card_debt(cards: Sequence[CreditCard]) -> Decimal:
    """Return the outstanding debt across all cards."""
    return sum(
        (coerce_decimal(card.current_balance) for card in cards),
        Decimal("0"),
    )


def current_card_bill(cards: Sequence[CreditCard]) -> Decimal:
    """Return the amortized bill across every purchase attached to cards."""
    return sum(
        (
            purchase_monthly_contribution(purchase)
            for card in cards
            for purchase in card.purchases
        ),
        Decimal("0"),
    )


def compute_net_worth_snapshot(
    cards: Sequence[CreditCard],
    investments: Sequence[Investment],
) -> NetWorthSnapshot:
    """Compute current assets, liabilities and net worth.

    Args:
        cards: Credit cards with their current balances.
        investments: Investment positions.

    Returns:
        NetWorthSnapshot: Investment value minus outstanding card debt.
    """
    total_assets = quantize_money(
        sum(
            (investment.market_value for investment in investments),
            Decimal("0"),
        )
    )
    investment_cost = quantize_money(
        sum(
            (investment.cost_basis for investment in investments),
            Decimal("0"),
        )
    )
    total_liabilities = total_card_debt(cards)
    return NetWorthSnapshot(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
        investment_cost=investment_cost,
    )


def reconstruct_net_worth_series(
    series: Sequence[MonthlySnapshot],
    current_net_worth: Decimal,
) -> list[NetWorthPoint]:
    """Infer past month-end net worth from the current value.

    The newest month holds ``current_net_worth``; each earlier month is the
    following month's value minus that following month's cash flow.

    Args:
        series: Monthly snapshots, oldest first.
        current_net_worth: Net worth at the end of the newest month.

    Returns:
        list[NetWorthPoint]: Points in the same order as ``series``.
    """
    values: list[Decimal] = [Decimal("0")] * len(series)
    running = current_net_worth
    for index in range(len(series) - 1, -1, -1):
        values[index] = running
        running = running - series[index].cash_flow
    return [
        NetWorthPoint(key=month.key, label=month.label, net_worth=value)
        for month, value in zip(series, values)
    ]


__all__ = [
    "total_card_debt",
    "current_card_bill",
    "compute_net_worth_snapshot",
    "reconstruct_net_worth_series",
]
