"""Use case bundling user-scoped CRUD for ledger records."""

from collections.abc import Mapping

from src.application.ports.identity import CurrentUserPort
from src.application.ports.ledger_repository import (
    LedgerReaderPort,
    LedgerWriterPort,
)
from src.domain.constants import DEFAULT_EXPENSE_CATEGORY
from src.domain.errors import EntityNotFoundError
from src.domain.models import (
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
from src.domain.services.normalization import (
    normalize_category,
    normalize_symbol,
)
from src.domain.services.validation import (
    validate_income_source,
    validate_investment,
    validate_positive_amount,
    validate_updates,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


def _validate_day(name: str, value: int) -> None:
    if not 1 <= int(value) <= 31:
        raise ValueError(f"{name} must be between 1 and 31, got {value}")


class ManageLedgerEntriesUseCase:
    """Create, update, delete and list ledger records of the current user.

    Card purchases are handled by the dedicated purchase use cases, which
    also maintain the card balance.
    """

    def __init__(
        self,
        ledger_reader: LedgerReaderPort,
        ledger_writer: LedgerWriterPort,
        current_user: CurrentUserPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_reader: Port providing user-scoped ledger reads.
            ledger_writer: Port persisting ledger mutations.
            current_user: Port resolving the requesting user.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_reader = ledger_reader
        self._ledger_writer = ledger_writer
        self._current_user = current_user
        self._logger = logger or get_app_logger()

    # Credit cards

    def list_credit_cards(self) -> list[CreditCard]:
        user_id = self._user_id()
        return self._ledger_reader.fetch_credit_cards(
            user_id,
            include_purchases=False,
        )

    def create_credit_card(self, card: CreditCardInput) -> CreditCard:
        """Create a card; its balance starts at the given value.

        Raises:
            ValueError: If the name is blank, the limit negative or the due
                day outside 1..31.
        """
        if not card.name.strip():
            raise ValueError("Card name is required")
        if card.credit_limit < 0:
            raise ValueError(
                f"credit_limit cannot be negative, got {card.credit_limit}"
            )
        _validate_day("due_date", card.due_date)
        created = self._ledger_writer.create_credit_card(self._user_id(), card)
        self._logger.info(f"Created credit card {created.id}")
        return created

    def update_credit_card(
        self,
        card_id: str,
        updates: Mapping[str, object],
    ) -> CreditCard:
        """Apply a partial update; ``current_balance`` is not updatable."""
        validate_updates("credit_cards", updates)
        if "due_date" in updates:
            _validate_day("due_date", updates["due_date"])
        updated = self._ledger_writer.update_credit_card(
            self._user_id(),
            card_id,
            updates,
        )
        self._logger.info(
            f"Updated credit card {card_id}: {', '.join(sorted(updates))}"
        )
        return updated

    def delete_credit_card(self, card_id: str) -> None:
        """Delete a card together with its purchases."""
        self._ledger_writer.delete_credit_card(self._user_id(), card_id)
        self._logger.info(f"Deleted credit card {card_id}")

    # Fixed expenses

    def list_fixed_expenses(self) -> list[FixedExpense]:
        return self._ledger_reader.fetch_fixed_expenses(self._user_id())

    def create_fixed_expense(self, expense: FixedExpenseInput) -> FixedExpense:
        validate_positive_amount("amount", expense.amount)
        _validate_day("due_day", expense.due_day)
        expense = FixedExpenseInput(
            name=expense.name.strip(),
            amount=expense.amount,
            category=normalize_category(
                expense.category,
                DEFAULT_EXPENSE_CATEGORY,
            ),
            due_day=expense.due_day,
            is_active=expense.is_active,
        )
        created = self._ledger_writer.create_fixed_expense(
            self._user_id(),
            expense,
        )
        self._logger.info(f"Created fixed expense {created.id}")
        return created

    def update_fixed_expense(
        self,
        expense_id: str,
        updates: Mapping[str, object],
    ) -> FixedExpense:
        validate_updates("fixed_expenses", updates)
        if "amount" in updates:
            validate_positive_amount("amount", updates["amount"])
        if "due_day" in updates:
            _validate_day("due_day", updates["due_day"])
        return self._ledger_writer.update_fixed_expense(
            self._user_id(),
            expense_id,
            updates,
        )

    def toggle_fixed_expense(
        self,
        expense_id: str,
        is_active: bool,
    ) -> FixedExpense:
        """Activate or deactivate a fixed expense."""
        updated = self._ledger_writer.update_fixed_expense(
            self._user_id(),
            expense_id,
            {"is_active": bool(is_active)},
        )
        self._logger.info(
            f"Fixed expense {expense_id} active={updated.is_active}"
        )
        return updated

    def delete_fixed_expense(self, expense_id: str) -> None:
        self._ledger_writer.delete_fixed_expense(self._user_id(), expense_id)
        self._logger.info(f"Deleted fixed expense {expense_id}")

    # Extra expenses

    def list_extra_expenses(self) -> list[ExtraExpense]:
        return self._ledger_reader.fetch_extra_expenses(self._user_id())

    def create_extra_expense(self, expense: ExtraExpenseInput) -> ExtraExpense:
        validate_positive_amount("amount", expense.amount)
        expense = ExtraExpenseInput(
            description=expense.description.strip(),
            amount=expense.amount,
            category=normalize_category(
                expense.category,
                DEFAULT_EXPENSE_CATEGORY,
            ),
            expense_date=expense.expense_date,
        )
        created = self._ledger_writer.create_extra_expense(
            self._user_id(),
            expense,
        )
        self._logger.info(f"Created extra expense {created.id}")
        return created

    def delete_extra_expense(self, expense_id: str) -> None:
        self._ledger_writer.delete_extra_expense(self._user_id(), expense_id)
        self._logger.info(f"Deleted extra expense {expense_id}")

    # Investments

    def list_investments(
        self,
        investment_type: str | None = None,
    ) -> list[Investment]:
        return self._ledger_reader.fetch_investments(
            self._user_id(),
            investment_type=investment_type,
        )

    def create_investment(self, investment: InvestmentInput) -> Investment:
        """Create an investment; the symbol is stored upper-cased."""
        validate_investment(investment)
        investment = InvestmentInput(
            name=investment.name.strip(),
            type=investment.type,
            symbol=normalize_symbol(investment.symbol),
            quantity=investment.quantity,
            purchase_price=investment.purchase_price,
            current_price=investment.current_price,
            purchase_date=investment.purchase_date,
        )
        created = self._ledger_writer.create_investment(
            self._user_id(),
            investment,
        )
        self._logger.info(f"Created investment {created.id} ({created.type})")
        return created

    def update_investment(
        self,
        investment_id: str,
        updates: Mapping[str, object],
    ) -> Investment:
        validate_updates("investments", updates)
        updates = dict(updates)
        if "symbol" in updates:
            updates["symbol"] = normalize_symbol(updates["symbol"])
        if "quantity" in updates and coerce_decimal(updates["quantity"]) < 0:
            raise ValueError(
                f"quantity cannot be negative, got {updates['quantity']}"
            )
        return self._ledger_writer.update_investment(
            self._user_id(),
            investment_id,
            updates,
        )

    def delete_investment(self, investment_id: str) -> None:
        self._ledger_writer.delete_investment(self._user_id(), investment_id)
        self._logger.info(f"Deleted investment {investment_id}")

    # Income

    def list_income_sources(self) -> list[IncomeSource]:
        return self._ledger_reader.fetch_income_sources(self._user_id())

    def create_income_source(self, source: IncomeSourceInput) -> IncomeSource:
        validate_income_source(source)
        created = self._ledger_writer.create_income_source(
            self._user_id(),
            source,
        )
        self._logger.info(f"Created income source {created.id}")
        return created

    def update_income_source(
        self,
        source_id: str,
        updates: Mapping[str, object],
    ) -> IncomeSource:
        validate_updates("income_sources", updates)
        if "amount" in updates:
            validate_positive_amount("amount", updates["amount"])
        return self._ledger_writer.update_income_source(
            self._user_id(),
            source_id,
            updates,
        )

    def toggle_income_source(
        self,
        source_id: str,
        is_active: bool,
    ) -> IncomeSource:
        """Activate or deactivate an income source."""
        updated = self._ledger_writer.update_income_source(
            self._user_id(),
            source_id,
            {"is_active": bool(is_active)},
        )
        self._logger.info(
            f"Income source {source_id} active={updated.is_active}"
        )
        return updated

    def delete_income_source(self, source_id: str) -> None:
        """Delete an income source together with its history."""
        self._ledger_writer.delete_income_source(self._user_id(), source_id)
        self._logger.info(f"Deleted income source {source_id}")

    def record_income(self, record: IncomeHistoryInput) -> IncomeHistory:
        """Record a realized income event.

        Raises:
            ValueError: If the amount is not positive.
            EntityNotFoundError: If the source is not one of the user's.
        """
        validate_positive_amount("amount", record.amount)
        user_id = self._user_id()
        source_ids = {
            source.id
            for source in self._ledger_reader.fetch_income_sources(user_id)
        }
        if record.income_source_id not in source_ids:
            raise EntityNotFoundError("Income source", record.income_source_id)
        created = self._ledger_writer.create_income_history(user_id, record)
        self._logger.info(
            f"Recorded income {created.amount} for source "
            f"{created.income_source_id}"
        )
        return created

    def list_income_history(
        self,
        source_id: str | None = None,
    ) -> list[IncomeHistory]:
        return self._ledger_reader.fetch_income_history(
            self._user_id(),
            source_id=source_id,
        )

    def _user_id(self) -> str:
        return self._current_user.get_current_user_id()


__all__ = ["ManageLedgerEntriesUseCase"]
