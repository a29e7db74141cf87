"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
import importlib

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.cashflow_chart import (
    build_month_flow_figure,
    build_month_flow_model,
    build_trend_figure,
    build_trend_model,
)
from src.domain.errors import LedgerError, NotAuthenticatedError
from src.domain.models import (
    CategoryAmount,
    CreditCard,
    FinancialSummary,
    PriceUpdateResult,
)
from src.infrastructure.container import (
    build_financial_summary_use_case,
    build_manage_ledger_entries_use_case,
    build_update_crypto_prices_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger

CURRENCY_SYMBOLS = {"BRL": "R$", "USD": "$", "EUR": "€"}

INCOME_TYPE_COLORS = {
    "Active": "#10b981",
    "Passive": "#3b82f6",
    "Alternative": "#f59e0b",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy/pandas builds Altair relies on are usable.

    Returns:
        Tuple of a success flag and an error message when unusable.
    """
    checks = (("numpy", "ndarray"), ("pandas", "Timestamp"))
    for module_name, attribute in checks:
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            return False, f"{module_name} could not be imported: {exc}"
        if not hasattr(module, attribute):
            return (
                False,
                f"{module_name} is incomplete: missing {attribute}. "
                f"Reinstall {module_name} in this environment.",
            )
    return True, None


def _fetch_financial_summary(today: date) -> FinancialSummary:
    """Fetch the financial summary from the ledger database."""
    use_case = build_financial_summary_use_case()
    return use_case.execute(today=today)


@st.cache_data(show_spinner=False, ttl=300)
def _load_financial_summary(
    today: date,
    schema_version: int = 1,
) -> FinancialSummary:
    """Cached wrapper around _fetch_financial_summary."""
    _ = schema_version
    return _fetch_financial_summary(today)


def _fetch_credit_cards() -> Sequence[CreditCard]:
    """Fetch the credit cards of the current user."""
    use_case = build_manage_ledger_entries_use_case()
    return use_case.list_credit_cards()


@st.cache_data(show_spinner=False, ttl=300)
def _load_credit_cards() -> Sequence[CreditCard]:
    """Cached wrapper around _fetch_credit_cards."""
    return _fetch_credit_cards()


def _refresh_crypto_prices() -> PriceUpdateResult:
    """Refresh crypto prices and drop cached reads."""
    use_case = build_update_crypto_prices_use_case()
    result = use_case.execute()
    st.cache_data.clear()
    return result


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, currency_code)
    return f"{symbol} {value:,.2f}"


def _format_percent(value: Decimal) -> str:
    return f"{value:.1f}%"


def _prepare_donut_chart_data(
    breakdown: Sequence[CategoryAmount],
    currency_code: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Spend per category, largest first.
        currency_code: Currency used in labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    top_items = list(breakdown[:max_categories])
    other_items = breakdown[max_categories:]
    other_amount = sum(
        (item.amount for item in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        top_items.append(
            CategoryAmount(
                category="Other",
                amount=other_amount,
                color="#9ca3af",
            )
        )
    total_amount = sum(
        (item.amount for item in breakdown),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in top_items:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": item.category,
                "amount": float(item.amount),
                "color": item.color,
                "amount_label": _format_currency(item.amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _prepare_income_chart_data(
    summary: FinancialSummary,
) -> list[dict[str, str | float]]:
    """Flatten income rows into long format for a stacked bar chart."""
    data: list[dict[str, str | float]] = []
    for row in summary.income_chart_data:
        for income_type, amount in (
            ("Active", row.active),
            ("Passive", row.passive),
            ("Alternative", row.alternative),
        ):
            data.append(
                {
                    "month": row.month,
                    "type": income_type,
                    "amount": float(amount),
                }
            )
    return data


def _render_metrics(summary: FinancialSummary) -> None:
    """Render the snapshot metrics."""
    currency = summary.currency_code
    net_worth_col, income_col, expenses_col, savings_col = st.columns(4)
    net_worth_col.metric(
        "Net Worth",
        _format_currency(summary.total_net_worth, currency),
    )
    income_col.metric(
        "Monthly Income",
        _format_currency(summary.monthly_income, currency),
    )
    expenses_col.metric(
        "Monthly Expenses",
        _format_currency(summary.monthly_expenses, currency),
        _format_currency(summary.monthly_cash_flow, currency),
    )
    savings_col.metric("Savings Rate", _format_percent(summary.savings_rate))

    assets_col, bill_col, debt_col, gain_col = st.columns(4)
    assets_col.metric(
        "Investments",
        _format_currency(summary.total_investment_value, currency),
    )
    bill_col.metric(
        "Card Bill",
        _format_currency(summary.current_card_bill, currency),
    )
    debt_col.metric(
        "Card Debt",
        _format_currency(summary.total_credit_card_debt, currency),
        delta_color="inverse",
    )
    gain_col.metric(
        "Unrealized Gain",
        _format_currency(summary.total_investment_gain, currency),
    )


def _render_expense_breakdown_chart(
    summary: FinancialSummary,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of current-month spend by category."""
    st.subheader("Expenses by Category")
    if not summary.expense_breakdown:
        st.info("No expenses recorded this month.")
        return
    data, _total = _prepare_donut_chart_data(
        summary.expense_breakdown,
        summary.currency_code,
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.4)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(text="amount_label:N")
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")


def _render_income_chart(summary: FinancialSummary) -> None:
    """Render monthly income stacked by income type."""
    st.subheader("Income by Type")
    data = _prepare_income_chart_data(summary)
    months = [row.month for row in summary.income_chart_data]
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("month:N", sort=months, title=None),
        y=alt.Y("amount:Q", title=None, stack="zero"),
        color=alt.Color(
            "type:N",
            scale=alt.Scale(
                domain=list(INCOME_TYPE_COLORS),
                range=list(INCOME_TYPE_COLORS.values()),
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=["month:N", "type:N", "amount:Q"],
    ).properties(height=300)
    st.altair_chart(chart, width="stretch")


def _render_investment_chart(summary: FinancialSummary) -> None:
    """Render the invested cost basis over the window."""
    st.subheader("Invested Capital")
    data = [
        {"month": row.month, "value": float(row.value)}
        for row in summary.investment_chart_data
    ]
    months = [row["month"] for row in data]
    chart = alt.Chart(alt.Data(values=data)).mark_area(
        line=True,
        opacity=0.4,
    ).encode(
        x=alt.X("month:N", sort=months, title=None),
        y=alt.Y("value:Q", title=None),
        tooltip=["month:N", "value:Q"],
    ).properties(height=300)
    st.altair_chart(chart, width="stretch")


def _render_cashflow(summary: FinancialSummary) -> None:
    """Render the plotly trend and current-month flow."""
    trend_col, flow_col = st.columns(2)
    with trend_col:
        st.subheader("Cash Flow Trend")
        st.plotly_chart(
            build_trend_figure(build_trend_model(summary)),
            width="stretch",
        )
    with flow_col:
        st.subheader("This Month")
        if not summary.monthly_series:
            st.info("No monthly data available.")
            return
        st.plotly_chart(
            build_month_flow_figure(
                build_month_flow_model(summary.monthly_series[-1])
            ),
            width="stretch",
        )


def _render_cards(cards: Sequence[CreditCard], currency_code: str) -> None:
    """Render the credit cards table with used limit."""
    st.subheader("Credit Cards")
    if not cards:
        st.caption("No credit cards registered.")
        return
    data = []
    for card in cards:
        used = (
            card.current_balance / card.credit_limit * Decimal("100")
            if card.credit_limit
            else Decimal("0")
        )
        data.append(
            {
                "Name": card.name,
                "Last Four": card.last_four or "-",
                "Balance": _format_currency(card.current_balance, currency_code),
                "Limit": _format_currency(card.credit_limit, currency_code),
                "Available": _format_currency(
                    card.available_limit,
                    currency_code,
                ),
                "Used": _format_percent(used),
                "Due Day": card.due_date,
            }
        )
    st.dataframe(data, width="stretch", hide_index=True)


def _render_price_refresh() -> None:
    """Render the crypto price refresh action in the sidebar."""
    if not st.sidebar.button("Refresh crypto prices"):
        return
    get_usage_logger().info("Crypto price refresh requested")
    try:
        result = _refresh_crypto_prices()
    except LedgerError as exc:
        st.sidebar.error(str(exc))
        return
    if result.is_partial:
        st.sidebar.warning(
            f"Updated {len(result.updated)} symbols; failed: "
            f"{', '.join(result.failed)}"
        )
    elif result.updated:
        st.sidebar.success(f"Updated {len(result.updated)} symbols")
    else:
        st.sidebar.info("No crypto investments to update")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")

    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    _render_price_refresh()

    try:
        summary = _load_financial_summary(date.today(), schema_version=1)
    except NotAuthenticatedError:
        st.warning("No user configured. Set FINANCE_USER_ID to continue.")
        return

    get_usage_logger().info(
        f"Dashboard viewed: currency={summary.currency_code}"
    )
    _render_metrics(summary)
    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_expense_breakdown_chart(summary)
    with chart_right:
        _render_income_chart(summary)
    _render_cashflow(summary)
    _render_investment_chart(summary)
    _render_cards(_load_credit_cards(), summary.currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
