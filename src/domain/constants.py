"""Domain constants for ledger analytics."""

from decimal import Decimal

SUMMARY_WINDOW_MONTHS = 6

INCOME_TYPES = ("active", "passive", "alternative")

INCOME_FREQUENCIES = (
    "weekly",
    "bi-weekly",
    "monthly",
    "quarterly",
    "annually",
)

# Occurrences per month.
FREQUENCY_MULTIPLIERS = {
    "weekly": Decimal("4.33"),
    "bi-weekly": Decimal("2.17"),
    "monthly": Decimal("1"),
    "quarterly": Decimal("0.33"),
    "annually": Decimal("0.083"),
}

INVESTMENT_TYPES = (
    "stock",
    "etf",
    "bond",
    "mutual_fund",
    "crypto",
    "real_estate",
)

FIXED_EXPENSE_CATEGORIES = (
    "utilities",
    "insurance",
    "subscriptions",
    "rent",
    "taxes",
    "transportation",
    "food",
    "entertainment",
    "health_care",
    "education",
    "other",
)

DEFAULT_EXPENSE_CATEGORY = "Other"
DEFAULT_PURCHASE_CATEGORY = "Shopping"

CATEGORY_COLORS = {
    "Shopping": "#3b82f6",
    "Groceries": "#10b981",
    "Mercado": "#10b981",
    "Entertainment": "#f59e0b",
    "Lazer": "#f59e0b",
    "Transportation": "#ef4444",
    "Transporte": "#ef4444",
    "Travel": "#8b5cf6",
    "Viagem": "#8b5cf6",
    "Dining": "#ec4899",
    "Alimentação": "#ec4899",
    "utilities": "#06b6d4",
    "insurance": "#64748b",
    "subscriptions": "#6366f1",
    "rent": "#d946ef",
    "Other": "#9ca3af",
    "Outros": "#9ca3af",
}
DEFAULT_CATEGORY_COLOR = "#9ca3af"

MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


__all__ = [
    "SUMMARY_WINDOW_MONTHS",
    "INCOME_TYPES",
    "INCOME_FREQUENCIES",
    "FREQUENCY_MULTIPLIERS",
    "INVESTMENT_TYPES",
    "FIXED_EXPENSE_CATEGORIES",
    "DEFAULT_EXPENSE_CATEGORY",
    "DEFAULT_PURCHASE_CATEGORY",
    "CATEGORY_COLORS",
    "DEFAULT_CATEGORY_COLOR",
    "MONTH_LABELS",
]
