"""SQLAlchemy-backed repository for user-scoped ledger records."""

from collections.abc import Mapping
from dataclasses import asdict
from datetime import date, datetime
from decimal import Decimal
import uuid

from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    LedgerReaderPort,
    LedgerWriterPort,
)
from src.domain.errors import EntityNotFoundError
from src.domain.models import (
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
from src.infrastructure.ledger_schema import (
    LEDGER_TABLE_COLUMNS,
    typed_select,
    typed_text,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal

_ORDER_BY = {
    "credit_cards": "created_at DESC, id",
    "card_purchases": "purchase_date DESC, id",
    "fixed_expenses": "due_day ASC, id",
    "extra_expenses": "expense_date DESC, id",
    "investments": "created_at DESC, id",
    "income_sources": "created_at DESC, id",
    "income_history": "date DESC, id",
}

_ENTITY_NAMES = {
    "credit_cards": "Credit card",
    "card_purchases": "Card purchase",
    "fixed_expenses": "Fixed expense",
    "extra_expenses": "Extra expense",
    "investments": "Investment",
    "income_sources": "Income source",
    "income_history": "Income record",
}

ADJUST_CARD_BALANCE_SQL = """
UPDATE credit_cards
SET current_balance = current_balance + :delta,
    updated_at = :updated_at
WHERE id = :card_id AND user_id = :user_id
"""


def _optional_int(value) -> int | None:
    return None if value is None else int(value)


def _to_card(row, purchases: tuple[CardPurchase, ...] = ()) -> CreditCard:
    return CreditCard(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        last_four=row.last_four or "",
        credit_limit=coerce_decimal(row.credit_limit),
        current_balance=coerce_decimal(row.current_balance),
        due_date=int(row.due_date or 0),
        color=row.color or "",
        purchases=purchases,
    )


def _to_purchase(row) -> CardPurchase:
    return CardPurchase(
        id=row.id,
        card_id=row.card_id,
        user_id=row.user_id,
        description=row.description or "",
        amount=coerce_decimal(row.amount),
        purchase_date=coerce_date(row.purchase_date),
        category=row.category or "",
        is_installment=bool(row.is_installment),
        total_installments=_optional_int(row.total_installments),
        current_installment=_optional_int(row.current_installment),
    )


def _to_fixed_expense(row) -> FixedExpense:
    return FixedExpense(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        amount=coerce_decimal(row.amount),
        category=row.category or "",
        due_day=int(row.due_day or 0),
        is_active=bool(row.is_active),
    )


def _to_extra_expense(row) -> ExtraExpense:
    return ExtraExpense(
        id=row.id,
        user_id=row.user_id,
        description=row.description or "",
        amount=coerce_decimal(row.amount),
        category=row.category or "",
        expense_date=coerce_date(row.expense_date),
    )


def _to_investment(row) -> Investment:
    return Investment(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        type=row.type,
        symbol=row.symbol,
        quantity=coerce_decimal(row.quantity),
        purchase_price=coerce_decimal(row.purchase_price),
        current_price=coerce_decimal(row.current_price),
        purchase_date=coerce_date(row.purchase_date),
    )


def _to_income_source(row) -> IncomeSource:
    return IncomeSource(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        type=row.type,
        amount=coerce_decimal(row.amount),
        frequency=row.frequency,
        source=row.source or "",
        is_active=bool(row.is_active),
    )


def _to_income_history(row) -> IncomeHistory:
    return IncomeHistory(
        id=row.id,
        income_source_id=row.income_source_id,
        user_id=row.user_id,
        amount=coerce_decimal(row.amount),
        date=coerce_date(row.date),
        notes=row.notes,
    )


_MAPPERS = {
    "credit_cards": _to_card,
    "card_purchases": _to_purchase,
    "fixed_expenses": _to_fixed_expense,
    "extra_expenses": _to_extra_expense,
    "investments": _to_investment,
    "income_sources": _to_income_source,
    "income_history": _to_income_history,
}


class SqlAlchemyLedgerRepository(LedgerReaderPort, LedgerWriterPort):
    """Ledger repository backed by the ledger database.

    Every statement filters on ``user_id``. Purchase mutations and their
    card balance adjustment share one transaction; the adjustment is a
    single relative UPDATE so concurrent writers cannot lose updates.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    # Reads

    def fetch_credit_cards(
        self,
        user_id: str,
        include_purchases: bool = True,
    ) -> list[CreditCard]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            card_rows = self._select(conn, "credit_cards", user_id)
            purchase_rows = (
                self._select(conn, "card_purchases", user_id)
                if include_purchases
                else []
            )
        purchases_by_card: dict[str, list[CardPurchase]] = {}
        for row in purchase_rows:
            purchases_by_card.setdefault(row.card_id, []).append(
                _to_purchase(row)
            )
        return [
            _to_card(row, tuple(purchases_by_card.get(row.id, ())))
            for row in card_rows
        ]

    def fetch_card_purchases(
        self,
        user_id: str,
        card_id: str | None = None,
        since: date | None = None,
    ) -> list[CardPurchase]:
        filters = {}
        if card_id:
            filters["card_id"] = card_id
        return self._fetch_all(
            "card_purchases",
            user_id,
            filters=filters,
            since=("purchase_date", since),
        )

    def fetch_card_purchase(
        self,
        user_id: str,
        purchase_id: str,
    ) -> CardPurchase | None:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = self._select_one(conn, "card_purchases", user_id, purchase_id)
        return _to_purchase(row) if row is not None else None

    def fetch_fixed_expenses(self, user_id: str) -> list[FixedExpense]:
        return self._fetch_all("fixed_expenses", user_id)

    def fetch_extra_expenses(
        self,
        user_id: str,
        since: date | None = None,
    ) -> list[ExtraExpense]:
        return self._fetch_all(
            "extra_expenses",
            user_id,
            since=("expense_date", since),
        )

    def fetch_investments(
        self,
        user_id: str,
        investment_type: str | None = None,
    ) -> list[Investment]:
        filters = {}
        if investment_type:
            filters["type"] = investment_type
        return self._fetch_all("investments", user_id, filters=filters)

    def fetch_income_sources(self, user_id: str) -> list[IncomeSource]:
        return self._fetch_all("income_sources", user_id)

    def fetch_income_history(
        self,
        user_id: str,
        source_id: str | None = None,
        since: date | None = None,
    ) -> list[IncomeHistory]:
        filters = {}
        if source_id:
            filters["income_source_id"] = source_id
        return self._fetch_all(
            "income_history",
            user_id,
            filters=filters,
            since=("date", since),
        )

    # Credit cards

    def create_credit_card(
        self,
        user_id: str,
        card: CreditCardInput,
    ) -> CreditCard:
        return self._create("credit_cards", user_id, asdict(card))

    def update_credit_card(
        self,
        user_id: str,
        card_id: str,
        updates: Mapping[str, object],
    ) -> CreditCard:
        return self._update("credit_cards", user_id, card_id, updates)

    def delete_credit_card(self, user_id: str, card_id: str) -> None:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                typed_text(
                    "DELETE FROM card_purchases "
                    "WHERE card_id = :card_id AND user_id = :user_id",
                    ("card_id", "user_id"),
                ),
                {"card_id": card_id, "user_id": user_id},
            )
            self._delete_row(conn, "credit_cards", user_id, card_id)

    def set_card_balance(
        self,
        user_id: str,
        card_id: str,
        balance: Decimal,
    ) -> None:
        self._update(
            "credit_cards",
            user_id,
            card_id,
            {"current_balance": balance},
        )

    # Card purchases

    def create_card_purchase(
        self,
        user_id: str,
        purchase: CardPurchaseInput,
    ) -> tuple[CardPurchase, bool]:
        values = self._row_values("card_purchases", user_id, asdict(purchase))
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            self._insert_row(conn, "card_purchases", values)
            adjusted = self._adjust_card_balance(
                conn,
                user_id,
                purchase.card_id,
                coerce_decimal(purchase.amount),
            )
            row = self._select_one(conn, "card_purchases", user_id, values["id"])
        return _to_purchase(row), adjusted

    def delete_card_purchase(
        self,
        user_id: str,
        purchase_id: str,
    ) -> tuple[CardPurchase, bool]:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            row = self._select_one(conn, "card_purchases", user_id, purchase_id)
            if row is None:
                raise EntityNotFoundError("Card purchase", purchase_id)
            purchase = _to_purchase(row)
            self._delete_row(conn, "card_purchases", user_id, purchase_id)
            adjusted = self._adjust_card_balance(
                conn,
                user_id,
                purchase.card_id,
                -purchase.amount,
            )
        return purchase, adjusted

    # Fixed and extra expenses

    def create_fixed_expense(
        self,
        user_id: str,
        expense: FixedExpenseInput,
    ) -> FixedExpense:
        return self._create("fixed_expenses", user_id, asdict(expense))

    def update_fixed_expense(
        self,
        user_id: str,
        expense_id: str,
        updates: Mapping[str, object],
    ) -> FixedExpense:
        return self._update("fixed_expenses", user_id, expense_id, updates)

    def delete_fixed_expense(self, user_id: str, expense_id: str) -> None:
        self._delete("fixed_expenses", user_id, expense_id)

    def create_extra_expense(
        self,
        user_id: str,
        expense: ExtraExpenseInput,
    ) -> ExtraExpense:
        return self._create("extra_expenses", user_id, asdict(expense))

    def delete_extra_expense(self, user_id: str, expense_id: str) -> None:
        self._delete("extra_expenses", user_id, expense_id)

    # Investments

    def create_investment(
        self,
        user_id: str,
        investment: InvestmentInput,
    ) -> Investment:
        return self._create("investments", user_id, asdict(investment))

    def update_investment(
        self,
        user_id: str,
        investment_id: str,
        updates: Mapping[str, object],
    ) -> Investment:
        return self._update("investments", user_id, investment_id, updates)

    def delete_investment(self, user_id: str, investment_id: str) -> None:
        self._delete("investments", user_id, investment_id)

    def update_investment_price(
        self,
        user_id: str,
        investment_id: str,
        current_price: Decimal,
    ) -> None:
        self._update(
            "investments",
            user_id,
            investment_id,
            {"current_price": current_price},
        )

    # Income

    def create_income_source(
        self,
        user_id: str,
        source: IncomeSourceInput,
    ) -> IncomeSource:
        return self._create("income_sources", user_id, asdict(source))

    def update_income_source(
        self,
        user_id: str,
        source_id: str,
        updates: Mapping[str, object],
    ) -> IncomeSource:
        return self._update("income_sources", user_id, source_id, updates)

    def delete_income_source(self, user_id: str, source_id: str) -> None:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                typed_text(
                    "DELETE FROM income_history "
                    "WHERE income_source_id = :source_id "
                    "AND user_id = :user_id",
                    ("source_id", "user_id"),
                ),
                {"source_id": source_id, "user_id": user_id},
            )
            self._delete_row(conn, "income_sources", user_id, source_id)

    def create_income_history(
        self,
        user_id: str,
        record: IncomeHistoryInput,
    ) -> IncomeHistory:
        return self._create("income_history", user_id, asdict(record))

    # Helpers

    def _adjust_card_balance(
        self,
        conn: Connection,
        user_id: str,
        card_id: str,
        delta: Decimal,
    ) -> bool:
        result = conn.execute(
            typed_text(
                ADJUST_CARD_BALANCE_SQL,
                ("delta", "updated_at", "card_id", "user_id"),
            ),
            {
                "delta": delta,
                "updated_at": datetime.now(),
                "card_id": card_id,
                "user_id": user_id,
            },
        )
        if result.rowcount == 0:
            self._logger.warning(
                f"Credit card {card_id} not found; "
                f"balance not adjusted by {delta}"
            )
            return False
        self._logger.info(f"Adjusted balance of card {card_id} by {delta}")
        return True

    def _fetch_all(
        self,
        table: str,
        user_id: str,
        filters: Mapping[str, object] | None = None,
        since: tuple[str, date | None] | None = None,
    ) -> list:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = self._select(conn, table, user_id, filters, since)
        mapper = _MAPPERS[table]
        return [mapper(row) for row in rows]

    @staticmethod
    def _select(
        conn: Connection,
        table: str,
        user_id: str,
        filters: Mapping[str, object] | None = None,
        since: tuple[str, date | None] | None = None,
    ):
        columns = LEDGER_TABLE_COLUMNS[table]
        sql = f"SELECT {', '.join(columns)} FROM {table} WHERE user_id = :user_id"
        params: dict[str, object] = {"user_id": user_id}
        for column, value in (filters or {}).items():
            sql += f" AND {column} = :{column}"
            params[column] = value
        if since is not None and since[1] is not None:
            sql += f" AND {since[0]} >= :since"
            params["since"] = since[1]
        sql += f" ORDER BY {_ORDER_BY[table]}"
        return conn.execute(typed_select(sql, params, table), params).all()

    @staticmethod
    def _select_one(conn: Connection, table: str, user_id: str, entry_id: str):
        columns = LEDGER_TABLE_COLUMNS[table]
        sql = (
            f"SELECT {', '.join(columns)} FROM {table} "
            "WHERE id = :entry_id AND user_id = :user_id"
        )
        return conn.execute(
            typed_select(sql, ("entry_id", "user_id"), table),
            {"entry_id": entry_id, "user_id": user_id},
        ).first()

    @staticmethod
    def _row_values(
        table: str,
        user_id: str,
        payload: Mapping[str, object],
    ) -> dict[str, object]:
        columns = LEDGER_TABLE_COLUMNS[table]
        now = datetime.now()
        values = {"id": str(uuid.uuid4()), "user_id": user_id}
        values.update(
            (key, value) for key, value in payload.items() if key in columns
        )
        if "created_at" in columns:
            values["created_at"] = now
        if "updated_at" in columns:
            values["updated_at"] = now
        return values

    @staticmethod
    def _insert_row(
        conn: Connection,
        table: str,
        values: Mapping[str, object],
    ) -> None:
        names = list(values)
        sql = (
            f"INSERT INTO {table} ({', '.join(names)}) "
            f"VALUES ({', '.join(':' + name for name in names)})"
        )
        conn.execute(typed_text(sql, names), dict(values))

    @staticmethod
    def _delete_row(
        conn: Connection,
        table: str,
        user_id: str,
        entry_id: str,
    ) -> None:
        result = conn.execute(
            typed_text(
                f"DELETE FROM {table} WHERE id = :entry_id AND user_id = :user_id",
                ("entry_id", "user_id"),
            ),
            {"entry_id": entry_id, "user_id": user_id},
        )
        if result.rowcount == 0:
            raise EntityNotFoundError(_ENTITY_NAMES[table], entry_id)

    def _create(self, table: str, user_id: str, payload: Mapping[str, object]):
        values = self._row_values(table, user_id, payload)
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            self._insert_row(conn, table, values)
            row = self._select_one(conn, table, user_id, values["id"])
        return _MAPPERS[table](row)

    def _update(
        self,
        table: str,
        user_id: str,
        entry_id: str,
        updates: Mapping[str, object],
    ):
        columns = LEDGER_TABLE_COLUMNS[table]
        unknown = [
            name
            for name in updates
            if name not in columns or name in ("id", "user_id")
        ]
        if unknown:
            raise ValueError(
                f"Unknown columns for {table}: {', '.join(sorted(unknown))}"
            )
        values = dict(updates)
        if "updated_at" in columns:
            values["updated_at"] = datetime.now()
        assignments = ", ".join(f"{name} = :{name}" for name in values)
        sql = (
            f"UPDATE {table} SET {assignments} "
            "WHERE id = :entry_id AND user_id = :user_id"
        )
        params = {**values, "entry_id": entry_id, "user_id": user_id}
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(typed_text(sql, params), params)
            if result.rowcount == 0:
                raise EntityNotFoundError(_ENTITY_NAMES[table], entry_id)
            row = self._select_one(conn, table, user_id, entry_id)
        return _MAPPERS[table](row)

    def _delete(self, table: str, user_id: str, entry_id: str) -> None:
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            self._delete_row(conn, table, user_id, entry_id)


__all__ = ["SqlAlchemyLedgerRepository", "ADJUST_CARD_BALANCE_SQL"]
