"""Audit logging for authorization decisions."""

from __future__ import annotations

import logging
from typing import Any

from permission_guard._checks import Allowed, Decision
from permission_guard.requirements._base import RequirementSet

__all__ = ["log_decision"]

logger = logging.getLogger("permission_guard")


def _predicate_name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


def log_decision(
    *,
    action: str,
    decision: Decision,
    requirements: RequirementSet,
) -> None:
    """Log an authorization decision.

    Logging levels:
    - INFO: Denials (action, diagnostic)
    - DEBUG: Allowances and the requirement set behind every decision

    Example::

        log_decision(action="posts.update", decision=Denied("..."), requirements=reqs)
    """
    if isinstance(decision, Allowed):
        logger.debug("Access granted: %s", action)
    else:
        logger.info("Access denied: %s — %r", action, decision.diagnostic)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Requirements for %s: names=%s predicates=%s",
            action,
            list(requirements.perm_names),
            [_predicate_name(fn) for fn in requirements.perm_funcs],
        )
