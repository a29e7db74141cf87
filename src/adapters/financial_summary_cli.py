"""CLI adapter printing the financial summary of the configured user."""

from src.domain.errors import NotAuthenticatedError
from src.domain.models import FinancialSummary
from src.infrastructure.container import build_financial_summary_use_case
from src.infrastructure.logging.logger import get_app_logger


def _format_summary(summary: FinancialSummary) -> list[str]:
    currency = summary.currency_code
    lines = [
        f"Net worth:          {summary.total_net_worth:,.2f} {currency}",
        f"Investments:        {summary.total_investment_value:,.2f} {currency}"
        f" (cost {summary.total_investment_cost:,.2f})",
        f"Card debt:          {summary.total_credit_card_debt:,.2f} {currency}"
        f" of {summary.total_credit_limit:,.2f} limit",
        f"Card bill:          {summary.current_card_bill:,.2f} {currency}",
        f"Monthly income:     {summary.monthly_income:,.2f} {currency}",
        f"Monthly expenses:   {summary.monthly_expenses:,.2f} {currency}",
        f"Monthly cash flow:  {summary.monthly_cash_flow:,.2f} {currency}",
        f"Savings rate:       {summary.savings_rate:.1f}%",
        "",
        "Month   Income      Expenses    Net worth",
    ]
    for row in summary.monthly_data:
        lines.append(
            f"{row.month:<7} {row.income:>10,.2f}  {row.expenses:>10,.2f}  "
            f"{row.net_worth:>10,.2f}"
        )
    if summary.expense_breakdown:
        lines.append("")
        lines.append("Top categories this month:")
        for item in summary.expense_breakdown:
            lines.append(f"  {item.category:<20} {item.amount:>10,.2f}")
    return lines


def main() -> None:
    """Run the summary use case and print the result."""
    logger = get_app_logger()
    use_case = build_financial_summary_use_case()
    try:
        summary = use_case.execute()
    except NotAuthenticatedError as exc:
        logger.error(f"Cannot compute summary: {exc}")
        raise SystemExit(1) from exc

    for line in _format_summary(summary):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
