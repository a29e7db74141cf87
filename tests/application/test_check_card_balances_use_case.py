"""Tests for CheckCardBalancesUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.check_card_balances import (
    CheckCardBalancesUseCase,
)
from src.domain.models import CardPurchase, CreditCard


def _cards():
    purchase = CardPurchase(
        "p1", "c1", "u1", "Shoes", Decimal("100"), date(2024, 3, 2), ""
    )
    return [
        CreditCard(
            id="c1",
            user_id="u1",
            name="Visa",
            last_four="1234",
            credit_limit=Decimal("1000"),
            current_balance=Decimal("150"),
            due_date=10,
            color="",
            purchases=(purchase,),
        )
    ]


def _user():
    current_user = MagicMock()
    current_user.get_current_user_id.return_value = "u1"
    return current_user


def test_reports_drift_without_writing():
    reader = MagicMock()
    reader.fetch_credit_cards.return_value = _cards()
    writer = MagicMock()
    use_case = CheckCardBalancesUseCase(
        reader,
        _user(),
        ledger_writer=writer,
        logger=MagicMock(),
    )

    drifts = use_case.execute()

    assert [drift.card_id for drift in drifts] == ["c1"]
    assert drifts[0].derived_balance == Decimal("100")
    writer.set_card_balance.assert_not_called()


def test_repair_resets_balance_to_derived_value():
    reader = MagicMock()
    reader.fetch_credit_cards.return_value = _cards()
    writer = MagicMock()
    use_case = CheckCardBalancesUseCase(
        reader,
        _user(),
        ledger_writer=writer,
        logger=MagicMock(),
    )

    use_case.execute(repair=True)

    writer.set_card_balance.assert_called_once_with(
        "u1",
        "c1",
        Decimal("100"),
    )


def test_repair_requires_writer():
    use_case = CheckCardBalancesUseCase(
        MagicMock(),
        _user(),
        logger=MagicMock(),
    )

    with pytest.raises(ValueError):
        use_case.execute(repair=True)
