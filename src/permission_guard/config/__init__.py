"""Configuration module for permission-guard."""

from __future__ import annotations

from permission_guard.config._config import GuardConfig, configure, get_global_config

__all__ = ["GuardConfig", "configure", "get_global_config"]
