"""Ledger table definitions and typed SQL helpers."""

from collections.abc import Iterable

from sqlalchemy import bindparam, text
from sqlalchemy.engine import Engine
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.sql.selectable import TextualSelect
from sqlalchemy.types import Date, DateTime, Numeric

LEDGER_TABLE_COLUMNS = {
    "credit_cards": (
        "id",
        "user_id",
        "name",
        "last_four",
        "credit_limit",
        "current_balance",
        "due_date",
        "color",
        "created_at",
        "updated_at",
    ),
    "card_purchases": (
        "id",
        "card_id",
        "user_id",
        "description",
        "amount",
        "purchase_date",
        "category",
        "is_installment",
        "current_installment",
        "total_installments",
        "created_at",
    ),
    "fixed_expenses": (
        "id",
        "user_id",
        "name",
        "amount",
        "category",
        "due_day",
        "is_active",
        "created_at",
        "updated_at",
    ),
    "extra_expenses": (
        "id",
        "user_id",
        "description",
        "amount",
        "expense_date",
        "category",
        "created_at",
    ),
    "investments": (
        "id",
        "user_id",
        "name",
        "type",
        "symbol",
        "quantity",
        "purchase_price",
        "current_price",
        "purchase_date",
        "created_at",
        "updated_at",
    ),
    "income_sources": (
        "id",
        "user_id",
        "name",
        "type",
        "amount",
        "frequency",
        "source",
        "is_active",
        "created_at",
        "updated_at",
    ),
    "income_history": (
        "id",
        "income_source_id",
        "user_id",
        "amount",
        "date",
        "notes",
        "created_at",
    ),
}

_MONEY = Numeric(14, 2)
_UNITS = Numeric(20, 8)

# Bind types for parameters needing driver conversion (SQLite has no
# native Decimal or date support).
PARAM_TYPES = {
    "amount": _MONEY,
    "credit_limit": _MONEY,
    "current_balance": _MONEY,
    "delta": _MONEY,
    "quantity": _UNITS,
    "purchase_price": _UNITS,
    "current_price": _UNITS,
    "purchase_date": Date(),
    "expense_date": Date(),
    "date": Date(),
    "since": Date(),
    "created_at": DateTime(),
    "updated_at": DateTime(),
}

CREATE_LEDGER_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS credit_cards (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        last_four TEXT,
        credit_limit NUMERIC(14, 2) NOT NULL DEFAULT 0,
        current_balance NUMERIC(14, 2) NOT NULL DEFAULT 0,
        due_date INTEGER,
        color TEXT,
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS card_purchases (
        id TEXT PRIMARY KEY,
        card_id TEXT NOT NULL,
        user_id TEXT NOT NULL,
        description TEXT,
        amount NUMERIC(14, 2) NOT NULL,
        purchase_date DATE NOT NULL,
        category TEXT,
        is_installment BOOLEAN NOT NULL DEFAULT FALSE,
        current_installment INTEGER,
        total_installments INTEGER,
        created_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS fixed_expenses (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        amount NUMERIC(14, 2) NOT NULL,
        category TEXT,
        due_day INTEGER,
        is_active BOOLEAN NOT NULL DEFAULT TRUE,
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS extra_expenses (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        description TEXT,
        amount NUMERIC(14, 2) NOT NULL,
        expense_date DATE NOT NULL,
        category TEXT,
        created_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS investments (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        type TEXT NOT NULL,
        symbol TEXT,
        quantity NUMERIC(20, 8) NOT NULL,
        purchase_price NUMERIC(20, 8) NOT NULL,
        current_price NUMERIC(20, 8) NOT NULL,
        purchase_date DATE,
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS income_sources (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        type TEXT NOT NULL,
        amount NUMERIC(14, 2) NOT NULL,
        frequency TEXT NOT NULL,
        source TEXT,
        is_active BOOLEAN NOT NULL DEFAULT TRUE,
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS income_history (
        id TEXT PRIMARY KEY,
        income_source_id TEXT NOT NULL,
        user_id TEXT NOT NULL,
        amount NUMERIC(14, 2) NOT NULL,
        date DATE NOT NULL,
        notes TEXT,
        created_at TIMESTAMP
    )
    """,
)


def typed_text(sql: str, param_names: Iterable[str]) -> TextClause:
    """Build a text clause with typed bind parameters.

    Args:
        sql: SQL statement using ``:name`` placeholders.
        param_names: Placeholders present in ``sql``.

    Returns:
        TextClause: Clause whose money and date parameters carry types.
    """
    binds = [
        bindparam(name, type_=PARAM_TYPES[name])
        for name in dict.fromkeys(param_names)
        if name in PARAM_TYPES
    ]
    clause = text(sql)
    if binds:
        clause = clause.bindparams(*binds)
    return clause


def typed_select(
    sql: str,
    param_names: Iterable[str],
    table: str,
) -> TextualSelect:
    """Build a ledger SELECT whose money and date columns carry types.

    Typed result columns turn SQLite floats back into Decimals at the
    column scale and ISO strings into dates.

    Args:
        sql: SELECT statement over ``table``.
        param_names: Placeholders present in ``sql``.
        table: Ledger table whose columns are selected.

    Returns:
        TextualSelect: Executable statement with typed result columns.
    """
    result_types = {
        name: PARAM_TYPES[name]
        for name in LEDGER_TABLE_COLUMNS[table]
        if name in PARAM_TYPES and name not in ("created_at", "updated_at")
    }
    return typed_text(sql, param_names).columns(**result_types)


def prepare_schema(engine: Engine) -> None:
    """Create the ledger tables when missing."""
    with engine.begin() as conn:
        for statement in CREATE_LEDGER_TABLES_SQL:
            conn.exec_driver_sql(statement)


__all__ = [
    "LEDGER_TABLE_COLUMNS",
    "PARAM_TYPES",
    "CREATE_LEDGER_TABLES_SQL",
    "typed_text",
    "typed_select",
    "prepare_schema",
]
