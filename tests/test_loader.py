"""Tests for module:Class target loading."""

import json
import sys
from collections import OrderedDict
from pathlib import Path

import pytest

from suiterunner.errors import TargetLoadError
from suiterunner.loader import load_target

SAMPLE_SUITE = Path(__file__).resolve().parent.parent / "scripts" / "sample_suite.py"


def _target_modules(stem: str) -> list[str]:
    return [name for name in sys.modules if name.startswith(f"_suiterunner_target_{stem}_")]


class TestLoadTarget:
    """Tests for load_target()."""

    def test_dotted_module(self):
        """Test loading a class from an importable module."""
        assert load_target("collections:OrderedDict") is OrderedDict

    def test_file_path(self):
        """Test loading a class from a .py file."""
        unit = load_target(f"{SAMPLE_SUITE}:SampleSuite")
        assert unit.__name__ == "SampleSuite"

    def test_file_written_at_runtime(self, tmp_path):
        """Test loading from an arbitrary file."""
        suite_file = tmp_path / "loader_runtime_suite.py"
        suite_file.write_text("class Written:\n    pass\n")

        assert load_target(f"{suite_file}:Written").__name__ == "Written"

    @pytest.mark.parametrize("target", ["collections", ":Thing", "collections:"])
    def test_malformed_target(self, target):
        """Test that targets without both parts are rejected."""
        with pytest.raises(TargetLoadError, match="module:ClassName"):
            load_target(target)

    def test_missing_module(self):
        """Test an unimportable module."""
        with pytest.raises(TargetLoadError, match="Cannot import"):
            load_target("no_such_module_for_suiterunner:Thing")

    def test_missing_file(self, tmp_path):
        """Test a path that does not exist."""
        with pytest.raises(TargetLoadError, match="File not found"):
            load_target(f"{tmp_path / 'absent.py'}:Thing")

    def test_missing_attribute(self):
        """Test a module without the named class."""
        with pytest.raises(TargetLoadError, match="has no attribute"):
            load_target("collections:NoSuchClass")

    def test_not_a_class(self):
        """Test that functions are not accepted as units."""
        with pytest.raises(TargetLoadError, match="is not a class"):
            load_target("json:dumps")


class TestImportFailures:
    """Tests for target files that fail while importing."""

    def test_syntax_error(self, tmp_path):
        """Test that a file with broken syntax is a load error."""
        suite_file = tmp_path / "broken_syntax_suite.py"
        suite_file.write_text("class X(:\n    pass\n")

        with pytest.raises(TargetLoadError, match="SyntaxError") as exc_info:
            load_target(f"{suite_file}:X")

        assert isinstance(exc_info.value.__cause__, SyntaxError)

    def test_module_body_raises(self, tmp_path):
        """Test that an exception raised at import time is a load error."""
        suite_file = tmp_path / "raising_body_suite.py"
        suite_file.write_text("raise RuntimeError('boom at import')\n")

        with pytest.raises(TargetLoadError, match="boom at import") as exc_info:
            load_target(f"{suite_file}:Anything")

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_failed_import_is_not_registered(self, tmp_path):
        """Test that a failing file leaves nothing behind in sys.modules."""
        suite_file = tmp_path / "unregistered_suite.py"
        suite_file.write_text("raise RuntimeError('nope')\n")

        with pytest.raises(TargetLoadError):
            load_target(f"{suite_file}:Anything")

        assert _target_modules("unregistered_suite") == []


class TestModuleNaming:
    """Tests for the module names given to target files."""

    def test_stdlib_name_is_not_shadowed(self, tmp_path):
        """Test that a file named like a stdlib module leaves that module alone."""
        real_json = sys.modules["json"]
        suite_dir = tmp_path / "sub"
        suite_dir.mkdir()
        suite_file = suite_dir / "json.py"
        suite_file.write_text("class Suite:\n    pass\n")

        unit = load_target(f"{suite_file}:Suite")

        assert sys.modules["json"] is real_json
        assert sys.modules["json"] is json
        assert unit.__module__.startswith("_suiterunner_target_json_")

    def test_same_stem_in_different_directories(self, tmp_path):
        """Test that two files with the same name load as separate modules."""
        first = tmp_path / "a" / "twin_suite.py"
        second = tmp_path / "b" / "twin_suite.py"
        for path, marker in ((first, "A"), (second, "B")):
            path.parent.mkdir()
            path.write_text(f"class Twin:\n    MARK = {marker!r}\n")

        first_unit = load_target(f"{first}:Twin")
        second_unit = load_target(f"{second}:Twin")

        assert first_unit.MARK == "A"
        assert second_unit.MARK == "B"
        assert first_unit.__module__ != second_unit.__module__
