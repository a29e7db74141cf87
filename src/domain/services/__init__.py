"""Domain services package."""

from .aggregation import compute_monthly_series
from .amortization import monthly_contribution, purchase_monthly_contribution
from .balances import derive_card_balance, find_balance_drifts
from .categories import category_color, compute_category_breakdown
from .income import (
    frequency_multiplier,
    monthly_equivalent,
    project_monthly_income,
)
from .months import build_month_window, month_key
from .net_worth import (
    compute_net_worth_snapshot,
    current_card_bill,
    reconstruct_net_worth_series,
    total_card_debt,
)
from .normalization import normalize_category, normalize_symbol

__all__ = [
    "compute_monthly_series",
    "monthly_contribution",
    "purchase_monthly_contribution",
    "derive_card_balance",
    "find_balance_drifts",
    "category_color",
    "compute_category_breakdown",
    "frequency_multiplier",
    "monthly_equivalent",
    "project_monthly_income",
    "build_month_window",
    "month_key",
    "compute_net_worth_snapshot",
    "current_card_bill",
    "reconstruct_net_worth_series",
    "total_card_debt",
    "normalize_category",
    "normalize_symbol",
]
