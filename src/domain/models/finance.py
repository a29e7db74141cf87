"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class MonthBucket:
    """One calendar month of the rolling aggregation window.

    Attributes:
        key: Year-month key formatted as ``YYYY-MM``.
        label: Short month label for charts.
        start: First day of the month.
        end: Last day of the month.
    """

    key: str
    label: str
    start: date
    end: date

    def contains(self, value: date | None) -> bool:
        """Return True when ``value`` falls within the month."""
        if value is None:
            return False
        return self.start <= value <= self.end


@dataclass(frozen=True)
class IncomeSplit:
    """Income amounts split by income type."""

    active: Decimal = Decimal("0")
    passive: Decimal = Decimal("0")
    alternative: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.active + self.passive + self.alternative


@dataclass(frozen=True)
class MonthlySnapshot:
    """Aggregated income, expenses and invested cost for one month."""

    key: str
    label: str
    income_active: Decimal
    income_passive: Decimal
    income_alternative: Decimal
    expenses_fixed: Decimal
    expenses_extra: Decimal
    expenses_card: Decimal
    invested_cost_basis: Decimal

    @property
    def income(self) -> Decimal:
        return self.income_active + self.income_passive + self.income_alternative

    @property
    def expenses_extra_and_card(self) -> Decimal:
        return self.expenses_extra + self.expenses_card

    @property
    def expenses(self) -> Decimal:
        return self.expenses_fixed + self.expenses_extra_and_card

    @property
    def cash_flow(self) -> Decimal:
        """Return income minus expenses for the month."""
        return self.income - self.expenses


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Current net worth figures.

    Attributes:
        total_assets: Market value of all investments.
        total_liabilities: Outstanding credit card debt.
        net_worth: Assets minus liabilities.
        investment_cost: Cost basis of all investments.
    """

    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    investment_cost: Decimal

    @property
    def unrealized_gain(self) -> Decimal:
        return self.total_assets - self.investment_cost


@dataclass(frozen=True)
class NetWorthPoint:
    """Reconstructed net worth at the end of a month."""

    key: str
    label: str
    net_worth: Decimal


@dataclass(frozen=True)
class CategoryAmount:
    """Spend aggregated for a single category."""

    category: str
    amount: Decimal
    color: str


@dataclass(frozen=True)
class MonthlyChartRow:
    month: str
    income: Decimal
    expenses: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class ExpenseChartRow:
    month: str
    fixed: Decimal
    extra: Decimal


@dataclass(frozen=True)
class IncomeChartRow:
    month: str
    active: Decimal
    passive: Decimal
    alternative: Decimal


@dataclass(frozen=True)
class InvestmentChartRow:
    month: str
    value: Decimal


@dataclass(frozen=True)
class FinancialSummary:
    """Consolidated dashboard summary.

    Field names are bound directly by the chart adapters.
    """

    currency_code: str
    total_net_worth: Decimal
    total_assets: Decimal
    total_liabilities: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_cash_flow: Decimal
    savings_rate: Decimal
    current_card_bill: Decimal
    total_credit_card_debt: Decimal
    total_credit_limit: Decimal
    total_investment_value: Decimal
    total_investment_cost: Decimal
    total_investment_gain: Decimal
    card_count: int
    investment_count: int
    income_source_count: int
    monthly_series: list[MonthlySnapshot] = field(default_factory=list)
    monthly_data: list[MonthlyChartRow] = field(default_factory=list)
    expense_breakdown: list[CategoryAmount] = field(default_factory=list)
    expense_chart_data: list[ExpenseChartRow] = field(default_factory=list)
    income_chart_data: list[IncomeChartRow] = field(default_factory=list)
    investment_chart_data: list[InvestmentChartRow] = field(
        default_factory=list
    )


@dataclass(frozen=True)
class PriceUpdateResult:
    """Outcome of a batch price refresh.

    Attributes:
        updated: Symbols whose price was written.
        failed: Symbols whose quote could not be obtained or stored.
        skipped: Investment ids without a symbol.
    """

    updated: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.failed)


@dataclass(frozen=True)
class CardBalanceDrift:
    """Difference between a stored card balance and its purchases."""

    card_id: str
    card_name: str
    stored_balance: Decimal
    derived_balance: Decimal

    @property
    def difference(self) -> Decimal:
        """Return stored minus derived balance."""
        return self.stored_balance - self.derived_balance


__all__ = [
    "MonthBucket",
    "IncomeSplit",
    "MonthlySnapshot",
    "NetWorthSnapshot",
    "NetWorthPoint",
    "CategoryAmount",
    "MonthlyChartRow",
    "ExpenseChartRow",
    "IncomeChartRow",
    "InvestmentChartRow",
    "FinancialSummary",
    "PriceUpdateResult",
    "CardBalanceDrift",
]
