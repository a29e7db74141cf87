"""CLI adapter reporting card balances that drifted from their purchases.

Set ``CARD_BALANCE_REPAIR=1`` to reset drifted balances to the sum of the
attached purchases.
"""

import os

from src.domain.errors import NotAuthenticatedError
from src.infrastructure.container import build_check_card_balances_use_case
from src.infrastructure.logging.logger import get_app_logger


def _repair_enabled() -> bool:
    value = os.getenv("CARD_BALANCE_REPAIR", "").strip().lower()
    return value in {"1", "true", "yes"}


def main() -> None:
    """Run the drift check and print the result."""
    logger = get_app_logger()
    repair = _repair_enabled()
    use_case = build_check_card_balances_use_case()
    try:
        drifts = use_case.execute(repair=repair)
    except NotAuthenticatedError as exc:
        logger.error(f"Cannot check card balances: {exc}")
        raise SystemExit(1) from exc

    if not drifts:
        print("All card balances match their purchases.")
        return
    for drift in drifts:
        print(
            f"{drift.card_name} ({drift.card_id}): "
            f"stored={drift.stored_balance} derived={drift.derived_balance} "
            f"difference={drift.difference}"
        )
    if repair:
        print(f"Repaired {len(drifts)} card balances.")


if __name__ == "__main__":  # pragma: no cover
    main()
