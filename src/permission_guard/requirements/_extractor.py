"""Derive requirement sets from action declarations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from permission_guard._types import OWNER_MARKER, Predicate
from permission_guard.exceptions import InvalidRequirementsError
from permission_guard.requirements._base import RequirementSet
from permission_guard.requirements._owner import make_owner_predicate

__all__ = ["build_requirements", "extract_requirements", "get_permissions_from_action"]


def _action_field(action: Any, name: str) -> Any:
    if isinstance(action, Mapping):
        return action.get(name)
    return getattr(action, name, None)


def get_permissions_from_action(action: Any, *, separator: str = ":") -> list[Any]:
    """Return the requirement-like list an action declares.

    Args:
        action: An ``ActionDeclaration``, a mapping, or any object with
            ``name`` and ``permissions``.
        separator: Replaces ``.`` in the action name when the action
            declares ``permissions=True``.

    Returns:
        A new list. Empty only when ``permissions`` is missing or falsy.

    Raises:
        InvalidRequirementsError: If the action asks for protection in a
            form that names no requirement: ``permissions=True`` without a
            usable name, or a value that is neither a string, a callable
            nor an iterable of requirements.

    Example::

        get_permissions_from_action(ActionDeclaration("posts.update", True))
        # ["posts:update"]
        get_permissions_from_action({"permissions": "admin"})
        # ["admin"]
    """
    permissions = _action_field(action, "permissions")
    if permissions is True:
        name = _action_field(action, "name")
        if not isinstance(name, str) or not name:
            raise InvalidRequirementsError(
                "permissions=True needs a non-empty action name to derive the permission from"
            )
        return [name.replace(".", separator)]
    if not permissions:
        return []
    if isinstance(permissions, str):
        return [permissions]
    if isinstance(permissions, (Mapping, bytes, bytearray)):
        raise InvalidRequirementsError(
            f"permissions must be a string, a callable or a sequence, got {type(permissions).__name__}"
        )
    if isinstance(permissions, Iterable):
        return list(permissions)
    if callable(permissions):
        return [permissions]
    raise InvalidRequirementsError(
        f"permissions must be a string, a callable or a sequence, got {type(permissions).__name__}"
    )


def build_requirements(
    permissions: Sequence[Any],
    *,
    service_path: str = "service",
    path_separator: str = ".",
) -> RequirementSet:
    """Split a requirement-like list into names and predicates.

    Callables become predicates, ``"$owner"`` becomes an ownership
    predicate, other strings become permission names, and anything else
    is dropped. Order is preserved within each group.
    """
    names: list[str] = []
    funcs: list[Predicate] = []
    for perm in permissions:
        if callable(perm):
            funcs.append(perm)
        elif not isinstance(perm, str):
            continue
        elif perm == OWNER_MARKER:
            funcs.append(make_owner_predicate(service_path, path_separator))
        else:
            names.append(perm)
    return RequirementSet(perm_names=tuple(names), perm_funcs=tuple(funcs))


def extract_requirements(
    action: Any,
    *,
    separator: str = ":",
    service_path: str = "service",
    path_separator: str = ".",
) -> RequirementSet:
    """Shortcut for ``build_requirements(get_permissions_from_action(action))``."""
    return build_requirements(
        get_permissions_from_action(action, separator=separator),
        service_path=service_path,
        path_separator=path_separator,
    )
