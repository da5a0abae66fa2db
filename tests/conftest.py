"""Shared test fixtures for permission-guard tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from permission_guard.config._config import _reset_global_config
from permission_guard.requirements._base import ActionDeclaration
from permission_guard.testing._fixtures import (  # noqa: F401
    guard,
    guard_config,
    isolated_guard_state,
)


@pytest.fixture(autouse=True)
def _clean_global_config() -> Generator[None, None, None]:
    """Every test starts and ends on the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def admin_action() -> ActionDeclaration:
    return ActionDeclaration(name="admin.action", permissions=["admin:action"])


@pytest.fixture()
def canonical_action() -> ActionDeclaration:
    return ActionDeclaration(name="service.action", permissions=True)


class Recorder:
    """Handler double that records the contexts it was called with."""

    def __init__(self, result: object = "ok") -> None:
        self.calls: list[object] = []
        self.result = result

    def __call__(self, ctx: object) -> object:
        self.calls.append(ctx)
        return self.result


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()
