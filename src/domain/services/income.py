"""Income projection helpers."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import FREQUENCY_MULTIPLIERS
from src.domain.models import IncomeSource, IncomeSplit
from src.utils.decimal_utils import coerce_decimal


def frequency_multiplier(frequency: str | None) -> Decimal:
    """Return how many times per month a frequency occurs.

    Unknown frequencies count as monthly.
    """
    return FREQUENCY_MULTIPLIERS.get(frequency or "", Decimal("1"))


def monthly_equivalent(source: IncomeSource) -> Decimal:
    """Return the monthly amount of an income source."""
    return coerce_decimal(source.amount) * frequency_multiplier(
        source.frequency
    )


def split_by_type(
    amounts: Iterable[tuple[str | None, Decimal]],
) -> IncomeSplit:
    """Sum (income_type, amount) pairs into an IncomeSplit.

    Types other than passive and alternative count as active.
    """
    active = Decimal("0")
    passive = Decimal("0")
    alternative = Decimal("0")
    for income_type, amount in amounts:
        if income_type == "passive":
            passive += amount
        elif income_type == "alternative":
            alternative += amount
        else:
            active += amount
    return IncomeSplit(active=active, passive=passive, alternative=alternative)


def project_monthly_income(sources: Iterable[IncomeSource]) -> IncomeSplit:
    """Project monthly income from the active income sources."""
    return split_by_type(
        (source.type, monthly_equivalent(source))
        for source in sources
        if source.is_active
    )


__all__ = [
    "frequency_multiplier",
    "monthly_equivalent",
    "split_by_type",
    "project_monthly_income",
]
