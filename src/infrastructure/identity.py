"""Current user resolution for single-user deployments."""

from src.application.ports.identity import CurrentUserPort
from src.domain.errors import NotAuthenticatedError


class StaticCurrentUser(CurrentUserPort):
    """Identity provider returning a preconfigured user id."""

    def __init__(self, user_id: str | None) -> None:
        """Initialize the provider.

        Args:
            user_id: Configured user id, or None when nobody is signed in.
        """
        self._user_id = user_id

    def get_current_user_id(self) -> str:
        """Return the configured user id.

        Raises:
            NotAuthenticatedError: If no user id is configured.
        """
        if not self._user_id:
            raise NotAuthenticatedError("No authenticated user")
        return self._user_id


__all__ = ["StaticCurrentUser"]
