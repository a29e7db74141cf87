"""Tests for income projection and ledger validation rules."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import (
    CardPurchaseInput,
    IncomeSource,
    IncomeSourceInput,
    InvestmentInput,
)
from src.domain.services.income import (
    frequency_multiplier,
    monthly_equivalent,
    project_monthly_income,
)
from src.domain.services.normalization import (
    normalize_category,
    normalize_symbol,
)
from src.domain.services.validation import (
    validate_card_purchase,
    validate_income_source,
    validate_investment,
    validate_updates,
)


def _source(amount, frequency, income_type="active", active=True):
    return IncomeSource(
        id="s1",
        user_id="u1",
        name="Source",
        type=income_type,
        amount=Decimal(amount),
        frequency=frequency,
        is_active=active,
    )


@pytest.mark.parametrize(
    ("frequency", "expected"),
    [
        ("weekly", Decimal("4.33")),
        ("bi-weekly", Decimal("2.17")),
        ("monthly", Decimal("1")),
        ("quarterly", Decimal("0.33")),
        ("annually", Decimal("0.083")),
        ("daily", Decimal("1")),
        (None, Decimal("1")),
    ],
)
def test_frequency_multipliers(frequency, expected):
    assert frequency_multiplier(frequency) == expected


def test_quarterly_monthly_equivalent():
    """1200 quarterly is 396 per month."""
    assert monthly_equivalent(_source("1200", "quarterly")) == Decimal("396")


def test_projection_skips_inactive_sources_and_splits_types():
    split = project_monthly_income(
        [
            _source("3000", "monthly"),
            _source("100", "weekly", "passive"),
            _source("500", "monthly", "alternative", active=False),
        ]
    )

    assert split.active == Decimal("3000")
    assert split.passive == Decimal("433")
    assert split.alternative == Decimal("0")
    assert split.total == Decimal("3433")


def _purchase_input(**overrides):
    values = dict(
        card_id="c1",
        description="TV",
        amount=Decimal("120"),
        purchase_date=date(2024, 3, 1),
        category="Shopping",
    )
    values.update(overrides)
    return CardPurchaseInput(**values)


def test_one_time_purchase_cannot_carry_installments():
    with pytest.raises(ValueError):
        validate_card_purchase(_purchase_input(total_installments=3))


def test_installment_purchase_requires_count():
    with pytest.raises(ValueError):
        validate_card_purchase(_purchase_input(is_installment=True))


def test_purchase_amount_must_be_positive():
    with pytest.raises(ValueError):
        validate_card_purchase(_purchase_input(amount=Decimal("0")))


def test_valid_installment_purchase_passes():
    validate_card_purchase(
        _purchase_input(
            is_installment=True,
            total_installments=4,
            current_installment=1,
        )
    )


def test_income_source_frequency_is_checked():
    with pytest.raises(ValueError, match="frequency"):
        validate_income_source(
            IncomeSourceInput(
                name="Job",
                type="active",
                amount=Decimal("10"),
                frequency="hourly",
            )
        )


def test_investment_type_is_checked():
    with pytest.raises(ValueError, match="investment type"):
        validate_investment(
            InvestmentInput(
                name="Gold",
                type="metal",
                symbol=None,
                quantity=Decimal("1"),
                purchase_price=Decimal("1"),
                current_price=Decimal("1"),
                purchase_date=date(2024, 1, 1),
            )
        )


def test_updates_reject_balance_and_unknown_fields():
    with pytest.raises(ValueError, match="current_balance"):
        validate_updates("credit_cards", {"current_balance": Decimal("1")})
    with pytest.raises(ValueError):
        validate_updates("fixed_expenses", {})
    with pytest.raises(ValueError):
        validate_updates("income_sources", {"type": "salary"})
    validate_updates("investments", {"current_price": Decimal("2")})


def test_normalization_helpers():
    assert normalize_symbol(" btc ") == "BTC"
    assert normalize_symbol("   ") is None
    assert normalize_category("  ", "Other") == "Other"
    assert normalize_category(" Travel ", "Other") == "Travel"
