"""Use case to compose the consolidated financial summary."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date
from decimal import Decimal

from src.application.ports.identity import CurrentUserPort
from src.application.ports.ledger_repository import LedgerReaderPort
from src.domain.constants import SUMMARY_WINDOW_MONTHS
from src.domain.models import (
    ExpenseChartRow,
    FinancialSummary,
    IncomeChartRow,
    InvestmentChartRow,
    MonthlyChartRow,
)
from src.domain.services.aggregation import (
    active_fixed_total,
    compute_monthly_series,
    extra_total,
)
from src.domain.services.categories import compute_category_breakdown
from src.domain.services.income import project_monthly_income
from src.domain.services.months import build_month_window
from src.domain.services.net_worth import (
    compute_net_worth_snapshot,
    current_card_bill,
    reconstruct_net_worth_series,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class GetFinancialSummaryUseCase:
    """Compute the dashboard summary for the current user."""

    def __init__(
        self,
        ledger_reader: LedgerReaderPort,
        current_user: CurrentUserPort,
        logger=None,
        currency_code: str = "BRL",
        window_months: int = SUMMARY_WINDOW_MONTHS,
        max_workers: int = 7,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_reader: Port providing user-scoped ledger reads.
            current_user: Port resolving the requesting user.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency of the ledger amounts.
            window_months: Number of months in the trend series.
            max_workers: Concurrent ledger reads.
        """
        self._ledger_reader = ledger_reader
        self._current_user = current_user
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code
        self._window_months = window_months
        self._max_workers = max_workers

    def execute(self, today: date | None = None) -> FinancialSummary:
        """Return the financial summary.

        Args:
            today: Reference date; defaults to the current date.

        Returns:
            FinancialSummary: Snapshot metrics and monthly series.

        Raises:
            NotAuthenticatedError: If no user is signed in.
        """
        user_id = self._current_user.get_current_user_id()
        today = today or date.today()
        window = build_month_window(today, self._window_months)
        window_start = window[0].start
        current_month = window[-1]

        reader = self._ledger_reader
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            cards_future = executor.submit(reader.fetch_credit_cards, user_id)
            fixed_future = executor.submit(reader.fetch_fixed_expenses, user_id)
            extra_future = executor.submit(
                reader.fetch_extra_expenses, user_id, since=window_start
            )
            investments_future = executor.submit(
                reader.fetch_investments, user_id
            )
            sources_future = executor.submit(
                reader.fetch_income_sources, user_id
            )
            history_future = executor.submit(
                reader.fetch_income_history, user_id, since=window_start
            )
            purchases_future = executor.submit(
                reader.fetch_card_purchases, user_id, since=window_start
            )
            cards = cards_future.result() or []
            fixed_expenses = fixed_future.result() or []
            extra_expenses = extra_future.result() or []
            investments = investments_future.result() or []
            income_sources = sources_future.result() or []
            income_history = history_future.result() or []
            purchases = purchases_future.result() or []

        self._logger.info(
            f"Fetched ledger for summary: cards={len(cards)}, "
            f"fixed={len(fixed_expenses)}, extra={len(extra_expenses)}, "
            f"investments={len(investments)}, sources={len(income_sources)}, "
            f"history={len(income_history)}, purchases={len(purchases)}"
        )

        snapshot = compute_net_worth_snapshot(cards, investments)
        card_bill = current_card_bill(cards)
        monthly_income = project_monthly_income(income_sources).total
        monthly_expenses = (
            active_fixed_total(fixed_expenses)
            + extra_total(extra_expenses, current_month)
            + card_bill
        )
        monthly_cash_flow = monthly_income - monthly_expenses
        savings_rate = (
            monthly_cash_flow / monthly_income * Decimal("100")
            if monthly_income > 0
            else Decimal("0")
        )
        total_credit_limit = sum(
            (coerce_decimal(card.credit_limit) for card in cards),
            Decimal("0"),
        )

        series = compute_monthly_series(
            window,
            purchases=purchases,
            fixed_expenses=fixed_expenses,
            extra_expenses=extra_expenses,
            investments=investments,
            income_sources=income_sources,
            income_history=income_history,
            current_month_key=current_month.key,
        )
        net_worth_points = reconstruct_net_worth_series(
            series,
            snapshot.net_worth,
        )
        breakdown = compute_category_breakdown(
            fixed_expenses=fixed_expenses,
            extra_expenses=extra_expenses,
            purchases=purchases,
            month=current_month,
        )

        self._logger.info(
            f"Financial summary computed: net_worth={snapshot.net_worth}, "
            f"income={monthly_income}, expenses={monthly_expenses}, "
            f"currency={self._currency_code}"
        )

        return FinancialSummary(
            currency_code=self._currency_code,
            total_net_worth=snapshot.net_worth,
            total_assets=snapshot.total_assets,
            total_liabilities=snapshot.total_liabilities,
            monthly_income=monthly_income,
            monthly_expenses=monthly_expenses,
            monthly_cash_flow=monthly_cash_flow,
            savings_rate=savings_rate,
            current_card_bill=card_bill,
            total_credit_card_debt=snapshot.total_liabilities,
            total_credit_limit=total_credit_limit,
            total_investment_value=snapshot.total_assets,
            total_investment_cost=snapshot.investment_cost,
            total_investment_gain=snapshot.unrealized_gain,
            card_count=len(cards),
            investment_count=len(investments),
            income_source_count=len(income_sources),
            monthly_series=series,
            monthly_data=[
                MonthlyChartRow(
                    month=month.label,
                    income=month.income,
                    expenses=month.expenses,
                    net_worth=point.net_worth,
                )
                for month, point in zip(series, net_worth_points)
            ],
            expense_breakdown=breakdown,
            expense_chart_data=[
                ExpenseChartRow(
                    month=month.label,
                    fixed=month.expenses_fixed,
                    extra=month.expenses_extra_and_card,
                )
                for month in series
            ],
            income_chart_data=[
                IncomeChartRow(
                    month=month.label,
                    active=month.income_active,
                    passive=month.income_passive,
                    alternative=month.income_alternative,
                )
                for month in series
            ],
            investment_chart_data=[
                InvestmentChartRow(
                    month=month.label,
                    value=month.invested_cost_basis,
                )
                for month in series
            ],
        )


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
