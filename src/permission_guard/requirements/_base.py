"""ActionDeclaration and RequirementSet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from permission_guard._types import Predicate

__all__ = ["ActionDeclaration", "RequirementSet"]


@dataclass(frozen=True, slots=True)
class ActionDeclaration:
    """A protected operation as registered with the host framework.

    Attributes:
        name: Dotted action name (e.g. ``"posts.update"``).
        permissions: ``None``/falsy for an unprotected action, ``True`` to
            require the canonical name, a single permission string, or a
            sequence mixing permission strings, predicates and ``"$owner"``.
    """

    name: str
    permissions: Any = None


@dataclass(frozen=True, slots=True)
class RequirementSet:
    """The permission names and predicates an action demands.

    Built once when the action is wrapped and shared by every invocation.

    Attributes:
        perm_names: Literal permission names, in declaration order.
        perm_funcs: Predicates over the request context, in declaration order.
    """

    perm_names: tuple[str, ...] = ()
    perm_funcs: tuple[Predicate, ...] = ()

    @property
    def is_empty(self) -> bool:
        """``True`` when the action is unprotected."""
        return not self.perm_names and not self.perm_funcs
