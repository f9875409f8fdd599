"""Tests for the class metadata source."""

from suiterunner import annotations as suite
from suiterunner.annotations import Double, Long
from suiterunner.core.metadata import ClassMetadataSource, resolve_kind
from suiterunner.core.models import Binding, ParamKind, Role


class Sample:
    LIMIT = 3

    def __init__(self):
        self.calls = []

    @suite.before_suite
    @staticmethod
    def setup():
        pass

    @suite.after_suite
    @classmethod
    def teardown(cls):
        pass

    @suite.test(priority=4)
    @suite.csv_source("1, 2, 3.5, x, true")
    def typed(self, a: int, b: Long, c: Double, d: str, e: bool):
        pass

    def _helper(self, value):
        pass


class TestResolveKind:
    """Tests for annotation to kind mapping."""

    def test_scalar_kinds(self):
        """Test the supported scalar annotations."""
        assert resolve_kind(int) == ParamKind.INT
        assert resolve_kind(bool) == ParamKind.BOOLEAN
        assert resolve_kind(float) == ParamKind.DOUBLE
        assert resolve_kind(str) == ParamKind.STRING
        assert resolve_kind(Long) == ParamKind.LONG
        assert resolve_kind(Double) == ParamKind.DOUBLE

    def test_other_types_are_unsupported(self):
        """Test that everything else maps to UNSUPPORTED."""
        assert resolve_kind(list) == ParamKind.UNSUPPORTED
        assert resolve_kind(bytes) == ParamKind.UNSUPPORTED
        assert resolve_kind(None) == ParamKind.UNSUPPORTED


class TestClassMetadataSource:
    """Tests for ClassMetadataSource."""

    def setup_method(self):
        self.descriptors = ClassMetadataSource().describe(Sample)
        self.by_name = {d.name: d for d in self.descriptors}

    def test_declaration_order(self):
        """Test that methods are reported in declaration order, data skipped."""
        assert [d.name for d in self.descriptors] == [
            "__init__",
            "setup",
            "teardown",
            "typed",
            "_helper",
        ]

    def test_bindings(self):
        """Test static, class and instance detection."""
        assert self.by_name["setup"].binding == Binding.STATIC
        assert self.by_name["teardown"].binding == Binding.CLASS
        assert self.by_name["typed"].binding == Binding.INSTANCE
        assert self.by_name["setup"].is_static
        assert self.by_name["teardown"].is_static
        assert not self.by_name["typed"].is_static

    def test_receiver_parameter_dropped(self):
        """Test that self and cls are not counted as parameters."""
        assert self.by_name["teardown"].param_names == []
        assert self.by_name["typed"].param_names == ["a", "b", "c", "d", "e"]

    def test_parameter_kinds(self):
        """Test that type hints resolve to kinds."""
        assert self.by_name["typed"].param_kinds == [
            ParamKind.INT,
            ParamKind.LONG,
            ParamKind.DOUBLE,
            ParamKind.STRING,
            ParamKind.BOOLEAN,
        ]

    def test_unannotated_parameter(self):
        """Test that a missing annotation is unsupported and named as such."""
        helper = self.by_name["_helper"]
        assert helper.param_kinds == [ParamKind.UNSUPPORTED]
        assert helper.param_types == ["<unannotated>"]
        assert helper.visibility == "private"

    def test_roles_read_from_functions(self):
        """Test that role payloads come through."""
        typed = self.by_name["typed"]
        assert typed.payload(Role.TEST) == 4
        assert typed.payload(Role.CSV_SOURCE) == "1, 2, 3.5, x, true"
        assert self.by_name["__init__"].roles == {}

    def test_inherited_methods_not_reported(self):
        """Test that only the class's own members are described."""

        class Child(Sample):
            @suite.test
            def extra(self):
                pass

        names = [d.name for d in ClassMetadataSource().describe(Child)]
        assert names == ["extra"]
