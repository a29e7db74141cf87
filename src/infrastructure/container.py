"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.identity import CurrentUserPort
from src.application.ports.price_quotes import PriceQuotePort
from src.application.use_cases.check_card_balances import (
    CheckCardBalancesUseCase,
)
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.manage_card_purchases import (
    CreateCardPurchaseUseCase,
    DeleteCardPurchaseUseCase,
    ListCardPurchasesUseCase,
)
from src.application.use_cases.manage_ledger_entries import (
    ManageLedgerEntriesUseCase,
)
from src.application.use_cases.update_crypto_prices import (
    UpdateCryptoPricesUseCase,
)
from src.infrastructure.binance_price_source import BinancePriceQuoteSource
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.identity import StaticCurrentUser
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyLedgerRepository:
    """Return the ledger repository, serving both reads and writes."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db, logger=get_app_logger())


def build_current_user(
    settings: DashboardSettings | None = None,
) -> CurrentUserPort:
    """Return the identity provider for the configured user."""
    resolved = settings or DashboardSettings.from_env()
    return StaticCurrentUser(resolved.user_id)


def build_price_source(
    settings: DashboardSettings | None = None,
) -> PriceQuotePort:
    """Return the crypto quote source."""
    resolved = settings or DashboardSettings.from_env()
    return BinancePriceQuoteSource(
        quote_currency=resolved.quote_currency,
        api_url=resolved.price_api_url,
        timeout=resolved.price_timeout,
    )


def build_financial_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> GetFinancialSummaryUseCase:
    """Return the summary use case wired to the ledger database."""
    resolved = settings or DashboardSettings.from_env()
    return GetFinancialSummaryUseCase(
        build_ledger_repository(db_port),
        build_current_user(resolved),
        logger=get_app_logger(),
        currency_code=resolved.currency_code,
        max_workers=resolved.summary_max_workers,
    )


def build_update_crypto_prices_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> UpdateCryptoPricesUseCase:
    """Return the crypto price refresh use case."""
    resolved = settings or DashboardSettings.from_env()
    repository = build_ledger_repository(db_port)
    return UpdateCryptoPricesUseCase(
        repository,
        repository,
        build_price_source(resolved),
        build_current_user(resolved),
        logger=get_app_logger(),
        max_workers=resolved.price_max_workers,
    )


def build_check_card_balances_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> CheckCardBalancesUseCase:
    """Return the card balance drift check."""
    resolved = settings or DashboardSettings.from_env()
    repository = build_ledger_repository(db_port)
    return CheckCardBalancesUseCase(
        repository,
        build_current_user(resolved),
        ledger_writer=repository,
        logger=get_app_logger(),
    )


def build_manage_ledger_entries_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> ManageLedgerEntriesUseCase:
    """Return the CRUD use case for ledger records."""
    resolved = settings or DashboardSettings.from_env()
    repository = build_ledger_repository(db_port)
    return ManageLedgerEntriesUseCase(
        repository,
        repository,
        build_current_user(resolved),
        logger=get_app_logger(),
    )


def build_card_purchase_use_cases(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> tuple[
    CreateCardPurchaseUseCase,
    DeleteCardPurchaseUseCase,
    ListCardPurchasesUseCase,
]:
    """Return the create, delete and list purchase use cases."""
    resolved = settings or DashboardSettings.from_env()
    repository = build_ledger_repository(db_port)
    current_user = build_current_user(resolved)
    logger = get_app_logger()
    return (
        CreateCardPurchaseUseCase(repository, current_user, logger=logger),
        DeleteCardPurchaseUseCase(repository, current_user, logger=logger),
        ListCardPurchasesUseCase(repository, current_user, logger=logger),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_current_user",
    "build_price_source",
    "build_financial_summary_use_case",
    "build_update_crypto_prices_use_case",
    "build_check_card_balances_use_case",
    "build_manage_ledger_entries_use_case",
    "build_card_purchase_use_cases",
]
