"""Ownership predicate built for the ``"$owner"`` requirement."""

from __future__ import annotations

import logging
from typing import Any, cast

from permission_guard._path import resolve
from permission_guard._types import EntityOwnerCapability, Predicate

__all__ = ["get_owner_capability", "make_owner_predicate"]

logger = logging.getLogger("permission_guard.owner")


def get_owner_capability(service: Any) -> EntityOwnerCapability | None:
    """Return *service* if it can answer ownership questions, else ``None``.

    The ``is_entity_owner`` attribute must resolve through normal attribute
    lookup (``__getattr__`` included) and be callable.
    """
    if service is None or not callable(getattr(service, "is_entity_owner", None)):
        return None
    return cast(EntityOwnerCapability, service)


def make_owner_predicate(service_path: str = "service", separator: str = ".") -> Predicate:
    """Build the predicate that stands in for an ``"$owner"`` requirement.

    The predicate resolves the target service from the request context and
    returns whatever its ``is_entity_owner(ctx)`` returns, awaitable or not.
    A service without that capability yields ``False``.

    Args:
        service_path: Where the service lives in the request context.
        separator: Separator used to split *service_path*.

    Example::

        is_owner = make_owner_predicate()
        is_owner({"service": PostService()})
    """

    def is_owner(ctx: Any) -> Any:
        service = resolve(service_path, ctx, separator)
        capability = get_owner_capability(service)
        if capability is None:
            logger.debug(
                "Service at %r has no is_entity_owner capability — ownership denied",
                service_path,
            )
            return False
        return capability.is_entity_owner(ctx)

    return is_owner
