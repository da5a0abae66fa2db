"""Requirement extraction — from action declarations to frozen requirement sets."""

from permission_guard.requirements._base import ActionDeclaration, RequirementSet
from permission_guard.requirements._extractor import (
    build_requirements,
    extract_requirements,
    get_permissions_from_action,
)
from permission_guard.requirements._owner import get_owner_capability, make_owner_predicate

__all__ = [
    "ActionDeclaration",
    "RequirementSet",
    "build_requirements",
    "extract_requirements",
    "get_owner_capability",
    "get_permissions_from_action",
    "make_owner_predicate",
]
