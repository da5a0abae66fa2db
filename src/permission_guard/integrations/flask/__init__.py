"""Flask integration for permission-guard."""

from __future__ import annotations

try:
    import flask as _flask_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _flask_check
except ImportError as exc:
    raise ImportError(
        "Flask integration requires flask. Install it with: pip install permission-guard[flask]"
    ) from exc

from permission_guard.integrations.flask._extension import GuardExtension

__all__ = ["GuardExtension"]
