"""Flask extension for permission-guard."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Flask, current_app, jsonify

from permission_guard._guard import PermissionGuard
from permission_guard.exceptions import AuthorizationError
from permission_guard.requirements._base import ActionDeclaration

__all__ = ["GuardExtension"]

V = TypeVar("V", bound=Callable[..., Any])


async def _pass_context(ctx: Any) -> Any:
    return ctx


class GuardExtension:
    """Flask extension that guards view functions with permission checks.

    Registers an ``AuthorizationError`` handler and provides a ``protect()``
    decorator for views. The guard itself is asynchronous; it runs through
    ``current_app.ensure_sync``, which needs ``flask[async]``.

    Supports the Flask app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        context_provider: A callable ``() -> ctx`` that builds the request
            context the guard reads. Called within request context.
        guard: Optional guard. Defaults to a guard on the global config.

    Example::

        from flask import Flask, g
        from permission_guard.integrations.flask import GuardExtension

        app = Flask(__name__)
        guards = GuardExtension(
            app,
            context_provider=lambda: {"meta": {"user": g.user}, "service": posts},
        )

        @app.delete("/posts/<int:post_id>")
        @guards.protect("posts:delete", "$owner")
        def delete_post(post_id):
            ...
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        context_provider: Callable[[], Any],
        guard: PermissionGuard | None = None,
    ) -> None:
        self._context_provider = context_provider
        self._guard = guard if guard is not None else PermissionGuard()

        if app is not None:
            self.init_app(app)

    @property
    def guard(self) -> PermissionGuard:
        return self._guard

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores state on ``app.extensions["permission_guard"]`` and registers
        the error handler for ``AuthorizationError``.
        """
        app.extensions["permission_guard"] = {
            "context_provider": self._context_provider,
            "guard": self._guard,
        }

        @app.errorhandler(AuthorizationError)
        def handle_authorization_error(exc: AuthorizationError):  # pyright: ignore[reportUnusedFunction]
            body = {"detail": exc.message, "code": exc.code, "data": exc.data}
            return jsonify(body), exc.status

    def protect(self, *permissions: Any, name: str | None = None) -> Callable[[V], V]:
        """Decorator that checks permissions before a view runs.

        With no *permissions* the view requires the canonical name derived
        from *name*, or from the view's ``module.name``.

        Example::

            @app.get("/reports")
            @guards.protect("reports:read")
            def reports():
                ...
        """

        def decorator(view: V) -> V:
            declaration = ActionDeclaration(
                name=name or f"{view.__module__}.{view.__name__}",
                permissions=list(permissions) if permissions else True,
            )
            checked = self._guard.wrap(_pass_context, declaration)

            @functools.wraps(view)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                ext_state: dict[str, Any] = current_app.extensions["permission_guard"]
                ctx = ext_state["context_provider"]()
                current_app.ensure_sync(checked)(ctx)
                return current_app.ensure_sync(view)(*args, **kwargs)

            return wrapper  # type: ignore[return-value]

        return decorator
