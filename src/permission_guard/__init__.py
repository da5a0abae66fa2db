"""permission-guard — Embedded permission checks for action handlers.

Wraps a handler so that, before it runs, the caller's permissions (read
from the request context) are checked against what the action declares:
permission names, context predicates, or the ``"$owner"`` marker.

Example::

    from permission_guard import PermissionGuard

    guard = PermissionGuard()

    @guard.requires("posts:update", "$owner")
    async def update_post(ctx):
        ...

    await update_post(ctx)  # AuthorizationError if the caller lacks access
"""

from importlib.metadata import PackageNotFoundError, version

from permission_guard._checks import (
    Allowed,
    Decision,
    Denied,
    PermissionChecker,
    basic_permission_check,
)
from permission_guard._guard import PermissionGuard, get_user_permissions
from permission_guard._path import resolve
from permission_guard._types import EntityOwnerCapability, Predicate
from permission_guard.config._config import GuardConfig, configure
from permission_guard.exceptions import (
    AuthorizationError,
    InvalidRequirementsError,
    PermissionGuardError,
)
from permission_guard.requirements import (
    ActionDeclaration,
    RequirementSet,
    build_requirements,
    extract_requirements,
    get_permissions_from_action,
    make_owner_predicate,
)

try:
    __version__ = version("permission-guard")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "ActionDeclaration",
    "Allowed",
    "AuthorizationError",
    "Decision",
    "Denied",
    "EntityOwnerCapability",
    "GuardConfig",
    "InvalidRequirementsError",
    "PermissionChecker",
    "PermissionGuard",
    "PermissionGuardError",
    "Predicate",
    "RequirementSet",
    "basic_permission_check",
    "build_requirements",
    "configure",
    "extract_requirements",
    "get_permissions_from_action",
    "get_user_permissions",
    "make_owner_predicate",
    "resolve",
]
