"""Use cases for recording and removing credit card purchases.

Each purchase mutation keeps the parent card's ``current_balance`` equal to
the sum of its attached purchase amounts. The adjustment is performed by the
writer inside the purchase transaction; a missing parent card does not block
the purchase and is only reported.
"""

from src.application.ports.identity import CurrentUserPort
from src.application.ports.ledger_repository import (
    LedgerReaderPort,
    LedgerWriterPort,
)
from src.domain.constants import DEFAULT_PURCHASE_CATEGORY
from src.domain.models import CardPurchase, CardPurchaseInput
from src.domain.services.normalization import normalize_category
from src.domain.services.validation import validate_card_purchase
from src.infrastructure.logging.logger import get_app_logger


class CreateCardPurchaseUseCase:
    """Record a purchase and add its amount to the card balance."""

    def __init__(
        self,
        ledger_writer: LedgerWriterPort,
        current_user: CurrentUserPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_writer: Port persisting ledger mutations.
            current_user: Port resolving the requesting user.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_writer = ledger_writer
        self._current_user = current_user
        self._logger = logger or get_app_logger()

    def execute(self, purchase: CardPurchaseInput) -> CardPurchase:
        """Persist the purchase.

        Args:
            purchase: Purchase details, amount being the full amount.

        Returns:
            CardPurchase: The stored purchase.

        Raises:
            NotAuthenticatedError: If no user is signed in.
            ValueError: If the installment fields are inconsistent.
        """
        user_id = self._current_user.get_current_user_id()
        validate_card_purchase(purchase)
        purchase = CardPurchaseInput(
            card_id=purchase.card_id,
            description=purchase.description.strip(),
            amount=purchase.amount,
            purchase_date=purchase.purchase_date,
            category=normalize_category(
                purchase.category,
                DEFAULT_PURCHASE_CATEGORY,
            ),
            is_installment=purchase.is_installment,
            total_installments=purchase.total_installments,
            current_installment=purchase.current_installment,
        )
        stored, adjusted = self._ledger_writer.create_card_purchase(
            user_id,
            purchase,
        )
        if not adjusted:
            self._logger.warning(
                f"Purchase {stored.id} saved without balance update; "
                f"card {purchase.card_id} not found"
            )
        self._logger.info(
            f"Recorded purchase {stored.id} of {stored.amount} "
            f"on card {stored.card_id}"
        )
        return stored


class DeleteCardPurchaseUseCase:
    """Delete a purchase and subtract its amount from the card balance."""

    def __init__(
        self,
        ledger_writer: LedgerWriterPort,
        current_user: CurrentUserPort,
        logger=None,
    ) -> None:
        self._ledger_writer = ledger_writer
        self._current_user = current_user
        self._logger = logger or get_app_logger()

    def execute(self, purchase_id: str) -> CardPurchase:
        """Remove the purchase.

        Args:
            purchase_id: Identifier of the purchase to delete.

        Returns:
            CardPurchase: The deleted purchase.

        Raises:
            EntityNotFoundError: If the user has no such purchase.
        """
        user_id = self._current_user.get_current_user_id()
        deleted, adjusted = self._ledger_writer.delete_card_purchase(
            user_id,
            purchase_id,
        )
        if not adjusted:
            self._logger.warning(
                f"Purchase {purchase_id} deleted without balance update; "
                f"card {deleted.card_id} not found"
            )
        self._logger.info(
            f"Deleted purchase {purchase_id} of {deleted.amount} "
            f"from card {deleted.card_id}"
        )
        return deleted


class ListCardPurchasesUseCase:
    """List purchases of the current user, optionally for one card."""

    def __init__(
        self,
        ledger_reader: LedgerReaderPort,
        current_user: CurrentUserPort,
        logger=None,
    ) -> None:
        self._ledger_reader = ledger_reader
        self._current_user = current_user
        self._logger = logger or get_app_logger()

    def execute(self, card_id: str | None = None) -> list[CardPurchase]:
        user_id = self._current_user.get_current_user_id()
        purchases = self._ledger_reader.fetch_card_purchases(
            user_id,
            card_id=card_id,
        )
        self._logger.info(
            f"Fetched {len(purchases)} purchases"
            + (f" for card {card_id}" if card_id else "")
        )
        return purchases


__all__ = [
    "CreateCardPurchaseUseCase",
    "DeleteCardPurchaseUseCase",
    "ListCardPurchasesUseCase",
]
