"""Credit card balance invariant helpers."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from src.domain.models import CardBalanceDrift, CardPurchase, CreditCard
from src.utils.decimal_utils import coerce_decimal


def derive_card_balance(purchases: Sequence[CardPurchase]) -> Decimal:
    """Return the balance implied by a card's purchases."""
    return sum(
        (coerce_decimal(purchase.amount) for purchase in purchases),
        Decimal("0"),
    )


def find_balance_drifts(
    cards: Sequence[CreditCard],
    logger: Logger,
) -> list[CardBalanceDrift]:
    """Compare stored balances against their purchases.

    Args:
        cards: Cards loaded with their purchases.
        logger: Logger used for warnings.

    Returns:
        list[CardBalanceDrift]: Cards whose stored balance drifted.
    """
    drifts = []
    for card in cards:
        derived = derive_card_balance(card.purchases)
        stored = coerce_decimal(card.current_balance)
        if stored == derived:
            continue
        logger.warning(
            f"Card balance drift for card_id={card.id}: "
            f"stored={stored}, derived={derived}"
        )
        drifts.append(
            CardBalanceDrift(
                card_id=card.id,
                card_name=card.name,
                stored_balance=stored,
                derived_balance=derived,
            )
        )
    return drifts


__all__ = ["derive_card_balance", "find_balance_drifts"]
