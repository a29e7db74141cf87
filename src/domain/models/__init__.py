"""Domain models package."""

from .finance import (
    CardBalanceDrift,
    CategoryAmount,
    ExpenseChartRow,
    FinancialSummary,
    IncomeChartRow,
    IncomeSplit,
    InvestmentChartRow,
    MonthBucket,
    MonthlyChartRow,
    MonthlySnapshot,
    NetWorthPoint,
    NetWorthSnapshot,
    PriceUpdateResult,
)
from .ledger import (
    UPDATABLE_FIELDS,
    CardPurchase,
    CardPurchaseInput,
    CreditCard,
    CreditCardInput,
    ExtraExpense,
    ExtraExpenseInput,
    FixedExpense,
    FixedExpenseInput,
    IncomeHistory,
    IncomeHistoryInput,
    IncomeSource,
    IncomeSourceInput,
    Investment,
    InvestmentInput,
)

__all__ = [
    "CardBalanceDrift",
    "CategoryAmount",
    "ExpenseChartRow",
    "FinancialSummary",
    "IncomeChartRow",
    "IncomeSplit",
    "InvestmentChartRow",
    "MonthBucket",
    "MonthlyChartRow",
    "MonthlySnapshot",
    "NetWorthPoint",
    "NetWorthSnapshot",
    "PriceUpdateResult",
    "UPDATABLE_FIELDS",
    "CardPurchase",
    "CardPurchaseInput",
    "CreditCard",
    "CreditCardInput",
    "ExtraExpense",
    "ExtraExpenseInput",
    "FixedExpense",
    "FixedExpenseInput",
    "IncomeHistory",
    "IncomeHistoryInput",
    "IncomeSource",
    "IncomeSourceInput",
    "Investment",
    "InvestmentInput",
]
