"""Decision core — the default check function and PermissionChecker."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from permission_guard._types import CHECK_PASSED, CheckFunction, Predicate
from permission_guard.exceptions import InvalidRequirementsError

__all__ = ["Allowed", "Decision", "Denied", "PermissionChecker", "basic_permission_check"]


@dataclass(frozen=True, slots=True)
class Allowed:
    """The caller may proceed."""

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Denied:
    """The caller may not proceed.

    Attributes:
        diagnostic: The check function's non-passing result, or the list of
            predicate results when predicates were evaluated last.
    """

    diagnostic: Any = None

    @property
    def allowed(self) -> bool:
        return False


Decision = Union[Allowed, Denied]


def basic_permission_check(current: Any, requested: Sequence[str]) -> bool | str:
    """Default check function: every requested permission must be held.

    Only a list or tuple counts as a permission set; any other *current*
    value holds no permissions at all.

    Returns:
        ``True`` when nothing is missing, otherwise a message listing the
        missing permissions in request order.

    Example::

        basic_permission_check(["a", "b"], ["a"])  # True
        basic_permission_check(["a"], ["a", "b"])  # "... Missing permissions: b"
    """
    if isinstance(current, (list, tuple)):
        missing = [perm for perm in requested if perm not in current]
    else:
        missing = list(requested)
    if not missing:
        return CHECK_PASSED
    return (
        "You don't have enough permissions in order to do that! "
        f"Missing permissions: {', '.join(missing)}"
    )


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _discard(value: Any) -> None:
    if inspect.iscoroutine(value):
        value.close()
    elif isinstance(value, asyncio.Future):
        value.cancel()


async def _evaluate_predicates(perm_funcs: Sequence[Predicate], ctx: Any) -> list[Any]:
    """Call every predicate, then await all of their results together.

    If a predicate raises while the others are being started, results that
    were already produced are closed before the error propagates. If one
    awaited predicate fails, the rest are cancelled and drained first.
    """
    pending: list[Any] = []
    try:
        for fn in perm_funcs:
            pending.append(fn(ctx))
    except BaseException:
        for value in pending:
            _discard(value)
        raise

    tasks = [asyncio.ensure_future(_resolve(value)) for value in pending]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class PermissionChecker:
    """Evaluates requirement sets against a caller's permissions.

    Holds nothing but the check function, so one instance can serve any
    number of concurrent decisions.

    Example::

        checker = PermissionChecker()
        decision = await checker.decide(["posts:read"], ("posts:read",), (), ctx)
        assert decision.allowed
    """

    def __init__(self, check_function: CheckFunction | None = None) -> None:
        self._check_function = (
            check_function if check_function is not None else basic_permission_check
        )

    @property
    def check_function(self) -> CheckFunction:
        return self._check_function

    async def decide(
        self,
        current: Any,
        perm_names: Sequence[str],
        perm_funcs: Sequence[Predicate],
        ctx: Any,
    ) -> Decision:
        """Decide whether *current* satisfies the requirements.

        Permission names are checked first; a pass there ends the decision.
        Otherwise every predicate is called with *ctx* and all results are
        awaited together. Any truthy predicate result allows the call.
        Exceptions from the check function or predicates propagate.

        Args:
            current: The caller's permissions.
            perm_names: Required permission names.
            perm_funcs: Predicates over the request context.
            ctx: The request context handed to predicates.

        Returns:
            ``Allowed()`` or ``Denied(diagnostic)``.

        Raises:
            InvalidRequirementsError: If both *perm_names* and *perm_funcs*
                are empty.
        """
        if not perm_names and not perm_funcs:
            raise InvalidRequirementsError(
                "decide() needs at least one permission name or predicate"
            )

        diagnostic: Any = None

        if perm_names:
            diagnostic = await _resolve(self._check_function(current, list(perm_names)))
            if diagnostic is CHECK_PASSED:
                return Allowed()

        if perm_funcs:
            results = await _evaluate_predicates(perm_funcs, ctx)
            if any(results):
                return Allowed()
            diagnostic = list(results)

        return Denied(diagnostic)
