"""Domain exceptions for ledger operations."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class NotAuthenticatedError(LedgerError):
    """Raised when no current user identity is available."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced ledger entity does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class PriceUnavailableError(LedgerError):
    """Raised when a price quote cannot be obtained for a symbol."""

    def __init__(self, symbol: str, reason: str) -> None:
        super().__init__(f"Price unavailable for {symbol}: {reason}")
        self.symbol = symbol
        self.reason = reason


__all__ = [
    "LedgerError",
    "NotAuthenticatedError",
    "EntityNotFoundError",
    "PriceUnavailableError",
]
