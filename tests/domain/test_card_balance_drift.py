"""Tests for card balance drift detection."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import CardPurchase, CreditCard
from src.domain.services.balances import (
    derive_card_balance,
    find_balance_drifts,
)


def _card(card_id, balance, amounts):
    purchases = tuple(
        CardPurchase(
            f"{card_id}-{index}",
            card_id,
            "u1",
            "item",
            Decimal(amount),
            date(2024, 3, 1),
            "",
        )
        for index, amount in enumerate(amounts)
    )
    return CreditCard(
        id=card_id,
        user_id="u1",
        name=card_id.upper(),
        last_four="0000",
        credit_limit=Decimal("1000"),
        current_balance=Decimal(balance),
        due_date=5,
        color="",
        purchases=purchases,
    )


def test_derived_balance_sums_full_amounts():
    card = _card("c1", "0", ["100", "120"])

    assert derive_card_balance(card.purchases) == Decimal("220")


def test_only_drifted_cards_are_reported_and_logged():
    logger = MagicMock()
    cards = [_card("c1", "220", ["100", "120"]), _card("c2", "50", ["20"])]

    drifts = find_balance_drifts(cards, logger)

    assert len(drifts) == 1
    assert drifts[0].card_id == "c2"
    assert drifts[0].difference == Decimal("30")
    logger.warning.assert_called_once()
