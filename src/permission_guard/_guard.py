"""PermissionGuard — wraps action handlers with an authorization check."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from permission_guard._audit import log_decision
from permission_guard._checks import Allowed, Decision, PermissionChecker
from permission_guard._path import resolve
from permission_guard._types import (
    CheckFunction,
    PermissionsExtractor,
    Predicate,
    UserPermissionsResolver,
)
from permission_guard.config._config import GuardConfig, get_global_config
from permission_guard.exceptions import AuthorizationError
from permission_guard.requirements._base import ActionDeclaration, RequirementSet
from permission_guard.requirements._extractor import (
    build_requirements,
    get_permissions_from_action,
)

__all__ = ["PermissionGuard", "get_user_permissions"]

H = TypeVar("H", bound=Callable[..., Any])

_UNSET: Any = object()


def get_user_permissions(
    ctx: Any,
    *,
    path: str = "meta.user.permissions",
    separator: str = ".",
) -> Any:
    """Default resolver for the caller's permissions.

    Example::

        get_user_permissions({"meta": {"user": {"permissions": ["a"]}}})
        # ["a"]
    """
    return resolve(path, ctx, separator)


def _action_name(action: Any) -> str:
    name = action.get("name") if isinstance(action, Mapping) else getattr(action, "name", None)
    return name if isinstance(name, str) and name else "<anonymous>"


class PermissionGuard:
    """Authorization guard for action handlers.

    Every strategy can be swapped through the constructor. Defaults are
    bound to *config* (or the global config at construction time).

    Args:
        check_function: ``(current, requested) -> True | diagnostic``.
            Defaults to :func:`~permission_guard.basic_permission_check`.
        get_permissions_from_action: ``(action) -> list`` of requirement
            items. Defaults to reading ``action.permissions``.
        get_user_permissions: ``(ctx) -> current permissions``. Defaults to
            resolving ``config.permissions_path`` in the context.
        config: Optional config. Defaults to the global config.

    Example::

        guard = PermissionGuard()

        @guard.requires("posts:update", "$owner")
        async def update_post(ctx):
            ...

        await update_post(ctx)  # raises AuthorizationError when denied
    """

    def __init__(
        self,
        *,
        check_function: CheckFunction | None = None,
        get_permissions_from_action: PermissionsExtractor | None = None,
        get_user_permissions: UserPermissionsResolver | None = None,
        config: GuardConfig | None = None,
    ) -> None:
        self._config = config if config is not None else get_global_config()
        self._checker = PermissionChecker(check_function)
        self.get_permissions_from_action: PermissionsExtractor = (
            get_permissions_from_action
            if get_permissions_from_action is not None
            else functools.partial(
                _default_permissions_from_action, separator=self._config.permissions_sep
            )
        )
        self.get_user_permissions: UserPermissionsResolver = (
            get_user_permissions
            if get_user_permissions is not None
            else functools.partial(
                _default_user_permissions,
                path=self._config.permissions_path,
                separator=self._config.path_separator,
            )
        )

    @property
    def config(self) -> GuardConfig:
        return self._config

    @property
    def check_function(self) -> CheckFunction:
        return self._checker.check_function

    def requirements_for(self, action: Any) -> RequirementSet:
        """Compute the frozen requirement set for *action*."""
        return build_requirements(
            self.get_permissions_from_action(action),
            service_path=self._config.service_path,
            path_separator=self._config.path_separator,
        )

    async def decide(
        self,
        current: Any,
        perm_names: Sequence[str],
        perm_funcs: Sequence[Predicate],
        ctx: Any,
    ) -> Decision:
        """Run the checker without raising. See ``PermissionChecker.decide``."""
        return await self._checker.decide(current, perm_names, perm_funcs, ctx)

    async def check(
        self,
        requirements: RequirementSet,
        ctx: Any,
        current: Any = _UNSET,
        *,
        action: str = "<anonymous>",
    ) -> None:
        """Raise ``AuthorizationError`` unless *requirements* are satisfied.

        Args:
            requirements: A non-empty requirement set.
            ctx: The request context.
            current: The caller's permissions. Resolved from *ctx* when
                omitted.
            action: Action name, used for audit logging.

        Raises:
            AuthorizationError: If the decision is denied.
            InvalidRequirementsError: If *requirements* is empty.
        """
        if current is _UNSET:
            current = self.get_user_permissions(ctx)
        decision = await self._checker.decide(
            current, requirements.perm_names, requirements.perm_funcs, ctx
        )
        if self._config.log_decisions:
            log_decision(action=action, decision=decision, requirements=requirements)
        if not isinstance(decision, Allowed):
            raise AuthorizationError(
                self._config.error_message,
                code=self._config.error_code,
                data=decision.diagnostic,
            )

    def wrap(self, handler: H, action: Any) -> H:
        """Return *handler* guarded by the requirements *action* declares.

        Requirements are computed once, here. An unprotected action gets
        *handler* back unchanged. Otherwise the returned coroutine function
        checks the caller before forwarding the untouched context to
        *handler*; on denial *handler* never runs.

        Example::

            wrapped = guard.wrap(handler, {"name": "posts.update", "permissions": True})
            await wrapped(ctx)
        """
        requirements = self.requirements_for(action)
        if requirements.is_empty:
            return handler

        action_name = _action_name(action)

        @functools.wraps(handler)
        async def guarded(ctx: Any, *args: Any, **kwargs: Any) -> Any:
            await self.check(requirements, ctx, action=action_name)
            result = handler(ctx, *args, **kwargs)
            if inspect.isawaitable(result):
                return await result
            return result

        return guarded  # type: ignore[return-value]

    def requires(self, *permissions: Any, name: str | None = None) -> Callable[[H], H]:
        """Decorator form of :meth:`wrap`.

        With no *permissions* the action requires its canonical name,
        derived from *name* or the handler's module and qualified name.

        Example::

            @guard.requires(name="posts.list")
            async def list_posts(ctx): ...          # needs "posts:list"

            @guard.requires("admin", is_staff)
            def purge(ctx): ...
        """

        def decorator(handler: H) -> H:
            action_name = name or f"{handler.__module__}.{handler.__qualname__}"
            declaration = ActionDeclaration(
                name=action_name,
                permissions=list(permissions) if permissions else True,
            )
            return self.wrap(handler, declaration)

        return decorator

    def middleware(self) -> dict[str, Any]:
        """Return the guard as a hook set for hosts that register middleware by hook.

        Example::

            broker.add_middleware(guard.middleware())
        """
        return {"name": "PermissionGuard", "local_action": self.wrap}


def _default_permissions_from_action(action: Any, *, separator: str) -> list[Any]:
    return get_permissions_from_action(action, separator=separator)


def _default_user_permissions(ctx: Any, *, path: str, separator: str) -> Any:
    return get_user_permissions(ctx, path=path, separator=separator)
