"""Port for resolving the current user identity."""

from typing import Protocol


class CurrentUserPort(Protocol):
    """Port exposing the identity of the requesting user."""

    def get_current_user_id(self) -> str:
        """Return the current user id.

        Raises:
            NotAuthenticatedError: If no user identity is available.
        """


__all__ = ["CurrentUserPort"]
