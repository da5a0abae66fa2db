"""Nested value lookup for request contexts."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["resolve"]


def resolve(path: str | Sequence[str], obj: Any = None, separator: str = ".") -> Any:
    """Return the value found at *path* inside *obj*, or ``None``.

    Mappings are indexed by key, everything else by attribute. A missing
    segment anywhere along the way yields ``None``; this never raises.

    Args:
        path: A separator-joined path or a pre-split sequence of segments.
        obj: The root object.
        separator: Separator used to split a string *path*.

    Example::

        resolve("meta.user.permissions", {"meta": {"user": {"permissions": ["a"]}}})
        # ["a"]
        resolve("a->b.d", {"a": {"b.d": 1}}, "->")
        # 1
    """
    segments = path.split(separator) if isinstance(path, str) else list(path)
    current = obj
    for segment in segments:
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(segment)
        else:
            current = getattr(current, segment, None)
    return current
