"""Shared protocols and type aliases for permission-guard."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, Union, runtime_checkable

__all__ = [
    "CHECK_PASSED",
    "CheckFunction",
    "EntityOwnerCapability",
    "OWNER_MARKER",
    "PermissionsExtractor",
    "Predicate",
    "UserPermissionsResolver",
]

# The only check-function result that counts as a pass.
CHECK_PASSED = True

# Reserved requirement token rewritten into an ownership predicate.
OWNER_MARKER = "$owner"

# A dynamic requirement: receives the request context.
Predicate = Callable[[Any], Union[bool, Awaitable[bool]]]

# check_function(current, requested) -> True | diagnostic
CheckFunction = Callable[[Any, Sequence[str]], Any]

# get_permissions_from_action(action) -> requirement-like list
PermissionsExtractor = Callable[[Any], list[Any]]

# get_user_permissions(ctx) -> caller permissions (ideally a list of str)
UserPermissionsResolver = Callable[[Any], Any]


@runtime_checkable
class EntityOwnerCapability(Protocol):
    """Structural type for services that can answer ownership questions.

    Any object with an ``is_entity_owner(ctx)`` method satisfies this
    protocol. The method may return a ``bool`` or an awaitable ``bool``.

    Example::

        class PostService:
            async def is_entity_owner(self, ctx) -> bool:
                post = await self.get(ctx.params["id"])
                return post.author_id == ctx.meta["user"]["id"]

        assert isinstance(PostService(), EntityOwnerCapability)
    """

    def is_entity_owner(self, ctx: Any) -> bool | Awaitable[bool]: ...
