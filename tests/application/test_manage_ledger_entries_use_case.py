"""Tests for ManageLedgerEntriesUseCase."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_ledger_entries import (
    ManageLedgerEntriesUseCase,
)
from src.domain.errors import EntityNotFoundError
from src.domain.models import (
    CreditCardInput,
    ExtraExpenseInput,
    FixedExpenseInput,
    IncomeHistoryInput,
    InvestmentInput,
)


@pytest.fixture
def ports():
    reader = MagicMock()
    writer = MagicMock()
    current_user = MagicMock()
    current_user.get_current_user_id.return_value = "u1"
    use_case = ManageLedgerEntriesUseCase(
        reader,
        writer,
        current_user,
        logger=MagicMock(),
    )
    return use_case, reader, writer


def test_create_fixed_expense_defaults_blank_category(ports):
    use_case, _reader, writer = ports

    use_case.create_fixed_expense(
        FixedExpenseInput(
            name=" Rent ",
            amount=Decimal("1500"),
            category="",
            due_day=5,
        )
    )

    _user_id, payload = writer.create_fixed_expense.call_args.args
    assert payload.name == "Rent"
    assert payload.category == "Other"


def test_fixed_expense_due_day_must_be_in_month(ports):
    use_case, _reader, writer = ports

    with pytest.raises(ValueError):
        use_case.create_fixed_expense(
            FixedExpenseInput(
                name="Rent",
                amount=Decimal("1500"),
                category="rent",
                due_day=32,
            )
        )
    writer.create_fixed_expense.assert_not_called()


def test_toggles_write_only_the_active_flag(ports):
    use_case, _reader, writer = ports

    use_case.toggle_fixed_expense("f1", False)
    use_case.toggle_income_source("s1", True)

    writer.update_fixed_expense.assert_called_once_with(
        "u1",
        "f1",
        {"is_active": False},
    )
    writer.update_income_source.assert_called_once_with(
        "u1",
        "s1",
        {"is_active": True},
    )


def test_card_balance_cannot_be_edited_directly(ports):
    use_case, _reader, writer = ports

    with pytest.raises(ValueError):
        use_case.update_credit_card("c1", {"current_balance": Decimal("0")})
    writer.update_credit_card.assert_not_called()


def test_create_credit_card_validates_limit(ports):
    use_case, _reader, _writer = ports

    with pytest.raises(ValueError):
        use_case.create_credit_card(
            CreditCardInput(
                name="Visa",
                last_four="1234",
                credit_limit=Decimal("-1"),
                due_date=10,
                color="#000",
            )
        )


def test_create_investment_upper_cases_symbol(ports):
    use_case, _reader, writer = ports

    use_case.create_investment(
        InvestmentInput(
            name="Bitcoin",
            type="crypto",
            symbol=" btc",
            quantity=Decimal("0.1"),
            purchase_price=Decimal("300000"),
            current_price=Decimal("300000"),
            purchase_date=date(2024, 1, 1),
        )
    )

    _user_id, payload = writer.create_investment.call_args.args
    assert payload.symbol == "BTC"


def test_update_investment_rejects_negative_quantity(ports):
    use_case, _reader, writer = ports

    with pytest.raises(ValueError):
        use_case.update_investment("i1", {"quantity": Decimal("-1")})
    writer.update_investment.assert_not_called()


def test_extra_expense_amount_must_be_positive(ports):
    use_case, _reader, writer = ports

    with pytest.raises(ValueError):
        use_case.create_extra_expense(
            ExtraExpenseInput(
                description="Gift",
                amount=Decimal("0"),
                category="",
                expense_date=date(2024, 3, 1),
            )
        )
    writer.create_extra_expense.assert_not_called()


def test_record_income_and_list_history(ports):
    use_case, reader, writer = ports
    reader.fetch_income_sources.return_value = [SimpleNamespace(id="s1")]

    use_case.record_income(
        IncomeHistoryInput(
            income_source_id="s1",
            amount=Decimal("3000"),
            date=date(2024, 3, 5),
        )
    )
    use_case.list_income_history(source_id="s1")

    writer.create_income_history.assert_called_once()
    reader.fetch_income_history.assert_called_once_with("u1", source_id="s1")


def test_record_income_rejects_source_of_another_user(ports):
    use_case, reader, writer = ports
    reader.fetch_income_sources.return_value = [SimpleNamespace(id="s1")]

    with pytest.raises(EntityNotFoundError) as excinfo:
        use_case.record_income(
            IncomeHistoryInput(
                income_source_id="other-user-source",
                amount=Decimal("500"),
                date=date(2024, 3, 5),
            )
        )

    assert excinfo.value.entity_id == "other-user-source"
    reader.fetch_income_sources.assert_called_once_with("u1")
    writer.create_income_history.assert_not_called()


def test_list_credit_cards_skips_purchases(ports):
    use_case, reader, _writer = ports

    use_case.list_credit_cards()

    reader.fetch_credit_cards.assert_called_once_with(
        "u1",
        include_purchases=False,
    )
