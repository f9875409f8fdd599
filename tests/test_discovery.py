"""Tests for role discovery."""

from suiterunner.core.discovery import discover, find_methods_by_role
from suiterunner.core.models import Binding, MethodDescriptor, Role


def _method(name: str, roles: dict, binding: Binding = Binding.INSTANCE) -> MethodDescriptor:
    return MethodDescriptor(name=name, function=lambda *args: None, binding=binding, roles=roles)


class TestDiscover:
    """Tests for discover()."""

    def test_partitions_by_role(self):
        """Test that each role lands in its own group."""
        methods = [
            _method("bs", {Role.BEFORE_SUITE: None}, Binding.STATIC),
            _method("as_", {Role.AFTER_SUITE: None}, Binding.STATIC),
            _method("bt", {Role.BEFORE_TEST: None}),
            _method("at", {Role.AFTER_TEST: None}),
            _method("t1", {Role.TEST: 2}),
            _method("plain", {}),
        ]

        groups = discover(methods)

        assert [m.name for m in groups.before_suite] == ["bs"]
        assert [m.name for m in groups.after_suite] == ["as_"]
        assert [m.name for m in groups.before_test] == ["bt"]
        assert [m.name for m in groups.after_test] == ["at"]
        assert [m.name for m in groups.tests] == ["t1"]

    def test_groups_keep_discovery_order(self):
        """Test that group members are not reordered."""
        methods = [_method(name, {Role.BEFORE_TEST: None}) for name in ["c", "a", "b"]]

        groups = discover(methods)

        assert [m.name for m in groups.before_test] == ["c", "a", "b"]

    def test_method_with_two_roles_in_both_groups(self):
        """Test that groups are not mutually exclusive."""
        both = _method("both", {Role.TEST: None, Role.BEFORE_TEST: None})

        groups = discover([both])

        assert groups.tests == [both]
        assert groups.before_test == [both]

    def test_never_rejects(self):
        """Test that invalid metadata passes discovery untouched."""
        methods = [
            _method("bs1", {Role.BEFORE_SUITE: None}),
            _method("bs2", {Role.BEFORE_SUITE: None}),
            _method("bad", {Role.TEST: 99}),
        ]

        groups = discover(methods)

        assert len(groups.before_suite) == 2
        assert len(groups.tests) == 1

    def test_empty_unit(self):
        """Test discovery of a unit with no methods."""
        groups = discover([])
        assert groups.tests == []
        assert groups.before_suite == []


class TestFindMethodsByRole:
    """Tests for find_methods_by_role()."""

    def test_filters(self):
        """Test filtering by a single role."""
        methods = [_method("x", {Role.CSV_SOURCE: "1"}), _method("y", {})]
        assert [m.name for m in find_methods_by_role(methods, Role.CSV_SOURCE)] == ["x"]
