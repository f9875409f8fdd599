"""
suiterunner - a small annotation-driven test harness.

This package provides tools to:
- Mark methods of a class as tests and lifecycle hooks
- Validate the declared roles and priorities before anything runs
- Run tests in priority order, with inline CSV arguments
"""

__version__ = "0.1.0"
__author__ = "suiterunner Team"

from suiterunner.core.runner import SuiteRunner, run_tests

__all__ = ["SuiteRunner", "run_tests", "__version__"]
