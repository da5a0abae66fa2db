"""FastAPI dependencies for permission-guard."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Request

from permission_guard._guard import PermissionGuard
from permission_guard.requirements._base import ActionDeclaration

__all__ = ["PermissionDep", "get_context"]


def get_context(request: Request) -> Any:
    """Sentinel dependency — override via ``app.dependency_overrides[get_context]``.

    The override returns the request context the guard reads permissions
    (and the ``"$owner"`` service) from.

    Example::

        from permission_guard.integrations.fastapi import get_context

        def build_context(request: Request) -> dict:
            return {"meta": {"user": request.state.user}, "service": post_service}

        app.dependency_overrides[get_context] = build_context
    """
    raise NotImplementedError(
        "Override get_context via app.dependency_overrides[get_context]. "
        "See permission-guard docs for configuration guide."
    )


async def _pass_context(ctx: Any) -> Any:
    return ctx


def PermissionDep(
    *permissions: Any,
    name: str | None = None,
    guard: PermissionGuard | None = None,
) -> Any:
    """FastAPI dependency that enforces permissions before the endpoint runs.

    The dependency resolves to the request context. With no *permissions*
    the endpoint requires the canonical name derived from *name*.
    Requirements are computed once, when the dependency is built.

    Args:
        *permissions: Permission names, predicates or ``"$owner"``.
        name: Dotted action name. Required when *permissions* is empty.
        guard: Guard to use. Defaults to a guard on the global config.

    Returns:
        A FastAPI ``Depends`` instance.

    Example::

        @app.delete("/posts/{post_id}")
        async def delete_post(ctx=PermissionDep("posts:delete", "$owner")) -> None:
            ...
    """
    if not permissions and not name:
        raise ValueError("PermissionDep() needs permissions or an action name")

    effective_guard = guard if guard is not None else PermissionGuard()
    declaration = ActionDeclaration(
        name=name or "<endpoint>",
        permissions=list(permissions) if permissions else True,
    )
    checked = effective_guard.wrap(_pass_context, declaration)

    async def _enforce(ctx: Any = Depends(get_context)) -> Any:
        return await checked(ctx)

    return Depends(_enforce)
