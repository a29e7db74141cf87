"""Tests for the card purchase use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_card_purchases import (
    CreateCardPurchaseUseCase,
    DeleteCardPurchaseUseCase,
    ListCardPurchasesUseCase,
)
from src.domain.models import CardPurchase, CardPurchaseInput


def _user():
    current_user = MagicMock()
    current_user.get_current_user_id.return_value = "u1"
    return current_user


def _stored(amount="100"):
    return CardPurchase(
        "p1", "c1", "u1", "Shoes", Decimal(amount), date(2024, 3, 2), "Shopping"
    )


def test_create_normalizes_and_delegates_to_writer():
    writer = MagicMock()
    writer.create_card_purchase.return_value = (_stored(), True)
    logger = MagicMock()
    use_case = CreateCardPurchaseUseCase(writer, _user(), logger=logger)

    result = use_case.execute(
        CardPurchaseInput(
            card_id="c1",
            description="  Shoes ",
            amount=Decimal("100"),
            purchase_date=date(2024, 3, 2),
            category=" ",
        )
    )

    assert result.id == "p1"
    user_id, payload = writer.create_card_purchase.call_args.args
    assert user_id == "u1"
    assert payload.description == "Shoes"
    assert payload.category == "Shopping"
    logger.warning.assert_not_called()


def test_create_warns_when_card_was_missing():
    writer = MagicMock()
    writer.create_card_purchase.return_value = (_stored(), False)
    logger = MagicMock()
    use_case = CreateCardPurchaseUseCase(writer, _user(), logger=logger)

    use_case.execute(
        CardPurchaseInput(
            card_id="c1",
            description="Shoes",
            amount=Decimal("100"),
            purchase_date=date(2024, 3, 2),
            category="Shopping",
        )
    )

    logger.warning.assert_called_once()


def test_create_rejects_invalid_installments_before_writing():
    writer = MagicMock()
    use_case = CreateCardPurchaseUseCase(writer, _user(), logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.execute(
            CardPurchaseInput(
                card_id="c1",
                description="TV",
                amount=Decimal("100"),
                purchase_date=date(2024, 3, 2),
                category="",
                is_installment=True,
            )
        )
    writer.create_card_purchase.assert_not_called()


def test_delete_returns_removed_purchase():
    writer = MagicMock()
    writer.delete_card_purchase.return_value = (_stored(), True)
    use_case = DeleteCardPurchaseUseCase(writer, _user(), logger=MagicMock())

    result = use_case.execute("p1")

    writer.delete_card_purchase.assert_called_once_with("u1", "p1")
    assert result.amount == Decimal("100")


def test_list_filters_by_card():
    reader = MagicMock()
    reader.fetch_card_purchases.return_value = [_stored()]
    use_case = ListCardPurchasesUseCase(reader, _user(), logger=MagicMock())

    assert use_case.execute(card_id="c1") == [_stored()]
    reader.fetch_card_purchases.assert_called_once_with("u1", card_id="c1")
