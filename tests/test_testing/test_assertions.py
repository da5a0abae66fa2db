"""Tests for testing/_assertions.py."""

from __future__ import annotations

import pytest

from permission_guard._guard import PermissionGuard
from permission_guard.exceptions import AuthorizationError
from permission_guard.testing import assert_allowed, assert_denied, make_context


class TestAssertAllowed:
    @pytest.mark.asyncio
    async def test_passes_when_allowed(self, guard: PermissionGuard) -> None:
        await assert_allowed(guard, {"permissions": ["a"]}, make_context(["a"]))

    @pytest.mark.asyncio
    async def test_passes_when_unprotected(self, guard: PermissionGuard) -> None:
        await assert_allowed(guard, {}, make_context([]))

    @pytest.mark.asyncio
    async def test_fails_when_denied(self, guard: PermissionGuard) -> None:
        with pytest.raises(AssertionError, match="denied"):
            await assert_allowed(guard, {"permissions": ["a"]}, make_context([]))


class TestAssertDenied:
    @pytest.mark.asyncio
    async def test_returns_error(self, guard: PermissionGuard) -> None:
        err = await assert_denied(guard, {"permissions": ["admin"]}, make_context([]))
        assert isinstance(err, AuthorizationError)
        assert "admin" in err.data

    @pytest.mark.asyncio
    async def test_fails_when_allowed(self, guard: PermissionGuard) -> None:
        with pytest.raises(AssertionError, match="allowed"):
            await assert_denied(guard, {"permissions": ["a"]}, make_context(["a"]))

    @pytest.mark.asyncio
    async def test_fails_when_unprotected(self, guard: PermissionGuard) -> None:
        with pytest.raises(AssertionError, match="unprotected"):
            await assert_denied(guard, {"permissions": []}, make_context([]))
