"""Tests for requirements/_extractor.py — declarations to requirement sets."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from types import SimpleNamespace

import pytest

from permission_guard.exceptions import InvalidRequirementsError
from permission_guard.requirements import (
    ActionDeclaration,
    RequirementSet,
    build_requirements,
    extract_requirements,
    get_permissions_from_action,
)


class TestGetPermissionsFromAction:
    def test_list_returned_as_copy(self) -> None:
        perms = ["test"]
        result = get_permissions_from_action({"permissions": perms})
        assert result == ["test"]
        assert result is not perms

    def test_true_uses_canonical_name(self) -> None:
        action = ActionDeclaration(name="service.action", permissions=True)
        assert get_permissions_from_action(action) == ["service:action"]

    def test_true_with_custom_separator(self) -> None:
        action = {"name": "v1.posts.update", "permissions": True}
        assert get_permissions_from_action(action, separator="/") == ["v1/posts/update"]

    @pytest.mark.parametrize("name", [None, "", 42])
    def test_true_without_usable_name_raises(self, name: object) -> None:
        with pytest.raises(InvalidRequirementsError, match="action name"):
            get_permissions_from_action({"name": name, "permissions": True})

    def test_true_with_name_missing_raises(self) -> None:
        with pytest.raises(InvalidRequirementsError):
            get_permissions_from_action(SimpleNamespace(permissions=True))

    def test_single_string(self) -> None:
        assert get_permissions_from_action({"permissions": "test"}) == ["test"]

    def test_tuple(self) -> None:
        assert get_permissions_from_action({"permissions": ("a", "b")}) == ["a", "b"]

    @pytest.mark.parametrize("permissions", [None, False, "", [], 0])
    def test_falsy_is_unprotected(self, permissions: object) -> None:
        assert get_permissions_from_action({"name": "a.b", "permissions": permissions}) == []

    def test_missing_field(self) -> None:
        assert get_permissions_from_action({}) == []
        assert get_permissions_from_action(SimpleNamespace(name="a.b")) == []

    @pytest.mark.parametrize("permissions", [3.14, 7, object(), {"a": 1}, b"admin"])
    def test_ill_typed_raises(self, permissions: object) -> None:
        with pytest.raises(InvalidRequirementsError, match="permissions must be"):
            get_permissions_from_action({"name": "a.b", "permissions": permissions})

    @pytest.mark.parametrize("permissions", [{"admin"}, frozenset({"admin"})])
    def test_set_accepted(self, permissions: object) -> None:
        assert get_permissions_from_action({"permissions": permissions}) == ["admin"]

    def test_generator_accepted(self) -> None:
        perms = (p for p in ["a", "b"])
        assert get_permissions_from_action({"permissions": perms}) == ["a", "b"]

    def test_single_callable(self) -> None:
        def is_staff(ctx: object) -> bool:
            return True

        assert get_permissions_from_action({"permissions": is_staff}) == [is_staff]

    def test_attribute_object(self) -> None:
        action = SimpleNamespace(name="x.y", permissions=["p"])
        assert get_permissions_from_action(action) == ["p"]


class TestBuildRequirements:
    def test_separates_functions_from_strings(self) -> None:
        def fn1(ctx: object) -> bool:
            return True

        reqs = build_requirements(["test", fn1])
        assert reqs.perm_names == ("test",)
        assert reqs.perm_funcs == (fn1,)

    def test_preserves_order(self) -> None:
        def f(ctx: object) -> bool:
            return True

        def g(ctx: object) -> bool:
            return False

        reqs = build_requirements(["b", g, "a", f])
        assert reqs.perm_names == ("b", "a")
        assert reqs.perm_funcs == (g, f)

    def test_owner_marker_becomes_predicate(self) -> None:
        reqs = build_requirements(["$owner"])
        assert reqs.perm_names == ()
        assert len(reqs.perm_funcs) == 1
        assert callable(reqs.perm_funcs[0])

    def test_other_types_ignored(self) -> None:
        reqs = build_requirements([3.14, None, {"a": 1}, b"bytes"])
        assert reqs == RequirementSet()
        assert reqs.is_empty

    def test_result_is_frozen(self) -> None:
        reqs = build_requirements(["a"])
        with pytest.raises(FrozenInstanceError):
            reqs.perm_names = ("b",)  # type: ignore[misc]

    def test_is_empty(self) -> None:
        assert RequirementSet().is_empty
        assert not RequirementSet(perm_names=("a",)).is_empty
        assert not RequirementSet(perm_funcs=(lambda ctx: True,)).is_empty


class TestExtractRequirements:
    def test_canonical(self) -> None:
        reqs = extract_requirements(ActionDeclaration("service.action", True))
        assert reqs.perm_names == ("service:action",)

    def test_unprotected(self) -> None:
        assert extract_requirements(ActionDeclaration("service.action")).is_empty
