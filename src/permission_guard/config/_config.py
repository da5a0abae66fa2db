"""Layered configuration for permission-guard."""

from __future__ import annotations

from dataclasses import dataclass, fields

__all__ = [
    "GuardConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_NON_EMPTY_FIELDS: tuple[str, ...] = (
    "permissions_path",
    "path_separator",
    "permissions_sep",
    "service_path",
    "error_code",
)


@dataclass(frozen=True, slots=True)
class GuardConfig:
    """Layered configuration with merge semantics (global -> guard).

    Attributes:
        permissions_path: Where the caller's permissions live in the
            request context.
        path_separator: Separator used to split ``permissions_path`` and
            ``service_path`` into segments.
        permissions_sep: Replaces ``.`` in action names when an action
            declares ``permissions=True``.
        service_path: Where the target service lives in the request
            context. Used by ``"$owner"`` requirements.
        error_code: ``code`` of raised ``AuthorizationError`` instances.
        error_message: Message of raised ``AuthorizationError`` instances.
        log_decisions: Emit audit log records for every decision.

    Example::

        config = GuardConfig(permissions_path="state.user.scopes")
        merged = config.merge(permissions_sep="/")
    """

    permissions_path: str = "meta.user.permissions"
    path_separator: str = "."
    permissions_sep: str = ":"
    service_path: str = "service"
    error_code: str = "PERMISSION_ERROR"
    error_message: str = "Insufficient permissions"
    log_decisions: bool = False

    def __post_init__(self) -> None:
        for name in _NON_EMPTY_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")
        if not isinstance(self.error_message, str):
            raise ValueError(f"error_message must be a string, got {self.error_message!r}")

    def merge(
        self,
        *,
        permissions_path: str | None = None,
        path_separator: str | None = None,
        permissions_sep: str | None = None,
        service_path: str | None = None,
        error_code: str | None = None,
        error_message: str | None = None,
        log_decisions: bool | None = None,
    ) -> GuardConfig:
        """Return a new config with non-None overrides applied.

        Returns:
            A new ``GuardConfig`` with overrides merged.

        Example::

            base = GuardConfig()
            guard_cfg = base.merge(error_code="ERR_HAS_NO_ACCESS")
        """
        overrides = {
            "permissions_path": permissions_path,
            "path_separator": path_separator,
            "permissions_sep": permissions_sep,
            "service_path": service_path,
            "error_code": error_code,
            "error_message": error_message,
            "log_decisions": log_decisions,
        }
        values = {
            f.name: overrides[f.name] if overrides[f.name] is not None else getattr(self, f.name)
            for f in fields(self)
        }
        return GuardConfig(**values)


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = GuardConfig()


def get_global_config() -> GuardConfig:
    """Return the current global configuration.

    Guards created without an explicit ``config`` snapshot this value at
    construction time.
    """
    return _global_config


def configure(
    *,
    permissions_path: str | None = None,
    path_separator: str | None = None,
    permissions_sep: str | None = None,
    service_path: str | None = None,
    error_code: str | None = None,
    error_message: str | None = None,
    log_decisions: bool | None = None,
) -> GuardConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.
    Guards that already exist keep the config they were built with.

    Example::

        configure(permissions_path="meta.auth.scopes", log_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        permissions_path=permissions_path,
        path_separator=path_separator,
        permissions_sep=permissions_sep,
        service_path=service_path,
        error_code=error_code,
        error_message=error_message,
        log_decisions=log_decisions,
    )
    return _global_config


def _set_global_config(cfg: GuardConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = GuardConfig()
