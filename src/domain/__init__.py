"""Domain package for business rules and core models."""

from .constants import FREQUENCY_MULTIPLIERS, SUMMARY_WINDOW_MONTHS
from .errors import (
    EntityNotFoundError,
    LedgerError,
    NotAuthenticatedError,
    PriceUnavailableError,
)
from .models import (
    CardPurchase,
    CategoryAmount,
    CreditCard,
    ExtraExpense,
    FinancialSummary,
    FixedExpense,
    IncomeHistory,
    IncomeSource,
    Investment,
    MonthlySnapshot,
    NetWorthSnapshot,
)
from .services import (
    build_month_window,
    compute_category_breakdown,
    compute_monthly_series,
    compute_net_worth_snapshot,
    monthly_contribution,
    reconstruct_net_worth_series,
)

__all__ = [
    "FREQUENCY_MULTIPLIERS",
    "SUMMARY_WINDOW_MONTHS",
    "EntityNotFoundError",
    "LedgerError",
    "NotAuthenticatedError",
    "PriceUnavailableError",
    "CardPurchase",
    "CategoryAmount",
    "CreditCard",
    "ExtraExpense",
    "FinancialSummary",
    "FixedExpense",
    "IncomeHistory",
    "IncomeSource",
    "Investment",
    "MonthlySnapshot",
    "NetWorthSnapshot",
    "build_month_window",
    "compute_category_breakdown",
    "compute_monthly_series",
    "compute_net_worth_snapshot",
    "monthly_contribution",
    "reconstruct_net_worth_series",
]
