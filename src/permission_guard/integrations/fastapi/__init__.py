"""FastAPI integration for permission-guard."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install permission-guard[fastapi]"
    ) from exc

from permission_guard.integrations.fastapi._dependencies import PermissionDep, get_context
from permission_guard.integrations.fastapi._errors import install_error_handlers

__all__ = ["PermissionDep", "get_context", "install_error_handlers"]
