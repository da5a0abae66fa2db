"""permission-guard testing utilities — mock contexts, assertions, and fixtures.

Provides test helpers for verifying guarded handlers:

- **MockContext / MockService / factories**: Lightweight request contexts
  and services for tests.
- **Assertion helpers**: ``assert_allowed``, ``assert_denied``.
- **Fixtures**: ``guard_config``, ``guard``,
  ``isolated_guard_state``.

Example::

    from permission_guard.testing import assert_denied, make_context

    async def test_viewer_cannot_delete(guard):
        action = {"name": "posts.delete", "permissions": True}
        await assert_denied(guard, action, make_context(["posts:read"]))
"""

from permission_guard.testing._assertions import assert_allowed, assert_denied
from permission_guard.testing._contexts import (
    MockContext,
    MockService,
    make_context,
    make_owner_service,
)
from permission_guard.testing._fixtures import (
    guard,
    guard_config,
    isolated_guard_state,
)
from permission_guard.testing._isolation import isolated_guard_config

__all__ = [
    "MockContext",
    "MockService",
    "assert_allowed",
    "assert_denied",
    "guard",
    "guard_config",
    "isolated_guard_config",
    "isolated_guard_state",
    "make_context",
    "make_owner_service",
]
