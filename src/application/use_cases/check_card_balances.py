"""Use case comparing stored card balances with their purchases."""

from src.application.ports.identity import CurrentUserPort
from src.application.ports.ledger_repository import (
    LedgerReaderPort,
    LedgerWriterPort,
)
from src.domain.models import CardBalanceDrift
from src.domain.services.balances import find_balance_drifts
from src.infrastructure.logging.logger import get_app_logger


class CheckCardBalancesUseCase:
    """Detect, and optionally repair, card balance drift.

    A card's ``current_balance`` should equal the sum of the full amounts of
    its attached purchases. Drift appears when a purchase was saved while its
    card was missing, or after manual edits.
    """

    def __init__(
        self,
        ledger_reader: LedgerReaderPort,
        current_user: CurrentUserPort,
        ledger_writer: LedgerWriterPort | None = None,
        logger=None,
    ) -> None:
        self._ledger_reader = ledger_reader
        self._ledger_writer = ledger_writer
        self._current_user = current_user
        self._logger = logger or get_app_logger()

    def execute(self, repair: bool = False) -> list[CardBalanceDrift]:
        """Return cards whose stored balance drifted.

        Args:
            repair: Reset drifted balances to the derived value.

        Returns:
            list[CardBalanceDrift]: Drifts found before any repair.

        Raises:
            ValueError: If repair is requested without a writer.
        """
        if repair and self._ledger_writer is None:
            raise ValueError("Repair requires a ledger writer")
        user_id = self._current_user.get_current_user_id()
        cards = self._ledger_reader.fetch_credit_cards(user_id)
        drifts = find_balance_drifts(cards, self._logger)
        self._logger.info(
            f"Checked {len(cards)} cards, {len(drifts)} with balance drift"
        )
        if repair:
            for drift in drifts:
                self._ledger_writer.set_card_balance(
                    user_id,
                    drift.card_id,
                    drift.derived_balance,
                )
                self._logger.info(
                    f"Reset balance of card {drift.card_id} to "
                    f"{drift.derived_balance}"
                )
        return drifts


__all__ = ["CheckCardBalancesUseCase"]
