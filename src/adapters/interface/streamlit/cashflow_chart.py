"""Cash-flow presentation logic for the Streamlit UI.

This module contains pure, testable transformations from a
``FinancialSummary`` to chart models and Plotly figures. Two views are
provided:

    - a monthly trend (income and expense bars, net worth line);
    - a Sankey of the current month: income types -> budget -> expense
      kinds, with a savings or deficit node balancing the flow.

No IO happens here; the UI loads the summary and renders the figures.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal
from typing import TYPE_CHECKING

from src.domain.models.finance import FinancialSummary, MonthlySnapshot

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


BUDGET_LABEL = "Budget"
SAVINGS_LABEL = "Savings"
DEFICIT_LABEL = "Deficit"

INCOME_LABELS = {
    "active": "Active income",
    "passive": "Passive income",
    "alternative": "Alternative income",
}
EXPENSE_LABELS = {
    "fixed": "Fixed expenses",
    "extra": "Extra expenses",
    "card": "Card purchases",
}

INCOME_COLOR = "#10b981"
EXPENSE_COLOR = "#ef4444"
NET_WORTH_COLOR = "#3b82f6"


@dataclass(frozen=True)
class CashflowTrendModel:
    """Series backing the monthly trend figure."""

    months: list[str]
    income: list[Decimal]
    expenses: list[Decimal]
    cash_flow: list[Decimal]
    net_worth: list[Decimal]


@dataclass(frozen=True)
class FlowLink:
    """Sankey link edge."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class MonthFlowModel:
    """Sankey nodes and links for a single month."""

    node_labels: list[str]
    side_by_label: dict[str, Literal["L", "M", "R"]]
    links: list[FlowLink]


def build_trend_model(summary: FinancialSummary) -> CashflowTrendModel:
    """Build the trend series from the summary chart rows.

    Args:
        summary: Financial summary produced by the use case.

    Returns:
        CashflowTrendModel: One entry per month, oldest first.
    """
    rows = summary.monthly_data
    return CashflowTrendModel(
        months=[row.month for row in rows],
        income=[row.income for row in rows],
        expenses=[row.expenses for row in rows],
        cash_flow=[row.income - row.expenses for row in rows],
        net_worth=[row.net_worth for row in rows],
    )


def build_month_flow_model(month: MonthlySnapshot) -> MonthFlowModel:
    """Build a Sankey model for one month.

    Zero amounts are left out. A positive cash flow adds a savings node on
    the right; a negative one adds a deficit node on the left so both
    sides of the budget node balance.

    Args:
        month: Aggregated month from the summary series.

    Returns:
        MonthFlowModel: Nodes and links with stable indices.
    """
    labels: list[str] = []
    sides: dict[str, Literal["L", "M", "R"]] = {}

    def add(label: str, side: Literal["L", "M", "R"]) -> int:
        if label not in sides:
            labels.append(label)
            sides[label] = side
        return labels.index(label)

    incoming = [
        (INCOME_LABELS["active"], month.income_active),
        (INCOME_LABELS["passive"], month.income_passive),
        (INCOME_LABELS["alternative"], month.income_alternative),
    ]
    outgoing = [
        (EXPENSE_LABELS["fixed"], month.expenses_fixed),
        (EXPENSE_LABELS["extra"], month.expenses_extra),
        (EXPENSE_LABELS["card"], month.expenses_card),
    ]

    links: list[FlowLink] = []
    left = [
        (add(label, "L"), amount) for label, amount in incoming if amount > 0
    ]
    budget = add(BUDGET_LABEL, "M")
    right = [
        (add(label, "R"), amount) for label, amount in outgoing if amount > 0
    ]
    for index, amount in left:
        links.append(FlowLink(source=index, target=budget, value=amount))
    for index, amount in right:
        links.append(FlowLink(source=budget, target=index, value=amount))

    diff = month.cash_flow
    if diff > 0:
        links.append(
            FlowLink(
                source=budget,
                target=add(SAVINGS_LABEL, "R"),
                value=diff,
            )
        )
    elif diff < 0:
        links.append(
            FlowLink(
                source=add(DEFICIT_LABEL, "L"),
                target=budget,
                value=abs(diff),
            )
        )
    return MonthFlowModel(node_labels=labels, side_by_label=sides, links=links)


def build_trend_figure(model: CashflowTrendModel) -> "go.Figure":
    """Build the monthly trend figure.

    Args:
        model: Precomputed trend model.

    Returns:
        Plotly figure with income/expense bars and a net worth line.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Bar(
                name="Income",
                x=model.months,
                y=[float(value) for value in model.income],
                marker_color=INCOME_COLOR,
            ),
            go.Bar(
                name="Expenses",
                x=model.months,
                y=[float(value) for value in model.expenses],
                marker_color=EXPENSE_COLOR,
            ),
            go.Scatter(
                name="Net worth",
                x=model.months,
                y=[float(value) for value in model.net_worth],
                mode="lines+markers",
                line=dict(color=NET_WORTH_COLOR, width=2),
                yaxis="y2",
            ),
        ]
    )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=380,
        legend=dict(orientation="h", y=-0.15),
        yaxis2=dict(overlaying="y", side="right", showgrid=False),
    )
    return fig


def build_month_flow_figure(model: MonthFlowModel) -> "go.Figure":
    """Build a Plotly Sankey figure from a month flow model.

    Args:
        model: Precomputed Sankey model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    node_x: list[float] = []
    node_y: list[float] = []
    left_count = sum(1 for side in model.side_by_label.values() if side == "L")
    right_count = sum(
        1 for side in model.side_by_label.values() if side == "R"
    )
    left_seen = 0
    right_seen = 0
    for label in model.node_labels:
        side = model.side_by_label[label]
        if side == "L":
            node_x.append(0.02)
            node_y.append((left_seen + 1) / (left_count + 1))
            left_seen += 1
        elif side == "R":
            node_x.append(0.98)
            node_y.append((right_seen + 1) / (right_count + 1))
            right_seen += 1
        else:
            node_x.append(0.5)
            node_y.append(0.5)

    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=10,
                    thickness=12,
                    label=model.node_labels,
                    x=node_x,
                    y=node_y,
                    line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                ),
                link=dict(
                    source=[link.source for link in model.links],
                    target=[link.target for link in model.links],
                    value=[float(link.value) for link in model.links],
                ),
                textfont=dict(size=12),
            )
        ]
    )
    fig.update_layout(margin=dict(l=8, r=8, t=8, b=8), height=420)
    return fig


__all__ = [
    "CashflowTrendModel",
    "FlowLink",
    "MonthFlowModel",
    "build_trend_model",
    "build_month_flow_model",
    "build_trend_figure",
    "build_month_flow_figure",
    "BUDGET_LABEL",
    "SAVINGS_LABEL",
    "DEFICIT_LABEL",
]
