"""Exception hierarchy for permission-guard."""

from __future__ import annotations

from typing import Any

__all__ = [
    "AuthorizationError",
    "InvalidRequirementsError",
    "PermissionGuardError",
]


class PermissionGuardError(Exception):
    """Base exception for all permission-guard errors."""


class AuthorizationError(PermissionGuardError):
    """Caller is not allowed to run the requested action.

    Raised by the guard boundary when a decision comes back denied, always
    before the protected handler runs.

    Attributes:
        code: Machine-readable error code.
        status: HTTP-like status code, ``401`` by default.
        data: The diagnostic of the denial: the check function's
            message, or the list of predicate results.

    Example::

        try:
            await handler(ctx)
        except AuthorizationError as exc:
            print(exc.code, exc.data)
    """

    def __init__(
        self,
        message: str = "Insufficient permissions",
        *,
        code: str = "PERMISSION_ERROR",
        status: int = 401,
        data: Any = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status = status
        self.data = data
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"AuthorizationError({self.message!r}, code={self.code!r}, "
            f"status={self.status!r}, data={self.data!r})"
        )


class InvalidRequirementsError(PermissionGuardError, ValueError):
    """A decision was requested with no permission names and no predicates.

    Unprotected actions never reach the checker; the guard hands back the
    original handler instead.
    """
