"""Discovery, validation, ordering and execution of a test unit."""

from suiterunner.core.runner import SuiteRunner, run_tests
from suiterunner.core.discovery import discover
from suiterunner.core.planning import build_plan

__all__ = ["SuiteRunner", "run_tests", "discover", "build_plan"]
