"""Tests for the current-month category breakdown."""

from datetime import date
from decimal import Decimal

from src.domain.constants import DEFAULT_CATEGORY_COLOR
from src.domain.models import CardPurchase, ExtraExpense, FixedExpense
from src.domain.services.categories import (
    category_color,
    compute_category_breakdown,
)
from src.domain.services.months import build_month_bucket

MARCH = build_month_bucket(2024, 3)


def test_breakdown_combines_sources_and_sorts_descending():
    result = compute_category_breakdown(
        fixed_expenses=[
            FixedExpense("f1", "u1", "Rent", Decimal("1500"), "rent", 5),
            FixedExpense(
                "f2", "u1", "Old", Decimal("99"), "insurance", 1, False
            ),
        ],
        extra_expenses=[
            ExtraExpense(
                "e1", "u1", "Dinner", Decimal("80"), "Dining", date(2024, 3, 9)
            ),
            ExtraExpense(
                "e2", "u1", "Lunch", Decimal("40"), "Dining", date(2024, 2, 9)
            ),
            ExtraExpense("e3", "u1", "Misc", Decimal("25"), "", date(2024, 3, 1)),
        ],
        purchases=[
            CardPurchase(
                "p1",
                "c1",
                "u1",
                "Phone",
                Decimal("1200"),
                date(2024, 3, 2),
                "",
                is_installment=True,
                total_installments=12,
            ),
            CardPurchase(
                "p2", "c1", "u1", "Food", Decimal("60"), date(2024, 3, 3), "Dining"
            ),
        ],
        month=MARCH,
    )

    assert [(item.category, item.amount) for item in result] == [
        ("rent", Decimal("1500")),
        ("Dining", Decimal("140")),
        ("Shopping", Decimal("100")),
        ("Other", Decimal("25")),
    ]
    amounts = [item.amount for item in result]
    assert amounts == sorted(amounts, reverse=True)
    assert result[0].color == category_color("rent")


def test_zero_categories_are_excluded():
    result = compute_category_breakdown(
        fixed_expenses=[
            FixedExpense("f1", "u1", "Free", Decimal("0"), "subscriptions", 1)
        ],
        extra_expenses=[],
        purchases=[],
        month=MARCH,
    )

    assert result == []


def test_ties_are_ordered_by_name():
    result = compute_category_breakdown(
        fixed_expenses=[
            FixedExpense("f1", "u1", "B", Decimal("10"), "Travel", 1),
            FixedExpense("f2", "u1", "A", Decimal("10"), "Lazer", 1),
        ],
        extra_expenses=[],
        purchases=[],
        month=MARCH,
    )

    assert [item.category for item in result] == ["Lazer", "Travel"]


def test_unknown_categories_are_gray():
    assert category_color("Pets") == DEFAULT_CATEGORY_COLOR
    assert category_color("Shopping") == "#3b82f6"
