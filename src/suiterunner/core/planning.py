"""Execution plan construction: validation followed by priority ordering."""

import logging

from suiterunner.core.models import ExecutionPlan, PlannedTest, Role, RoleGroups
from suiterunner.core.validation import DEFAULT_PRIORITY, validate_suite_hook, validate_tests

logger = logging.getLogger(__name__)


def order_tests(tests: list[PlannedTest]) -> list[PlannedTest]:
    """Sort tests by priority, highest first.

    ``sorted`` is stable, so equal priorities keep discovery order.
    """
    return sorted(tests, key=lambda planned: planned.priority, reverse=True)


def build_plan(
    unit_name: str,
    groups: RoleGroups,
    default_priority: int = DEFAULT_PRIORITY,
    trim_csv_tokens: bool = False,
) -> ExecutionPlan:
    """Validate the role groups and produce the ordered execution plan.

    Raises:
        ConfigurationError: On the first structural violation found
    """
    before_suite = validate_suite_hook(groups.before_suite, Role.BEFORE_SUITE)
    after_suite = validate_suite_hook(groups.after_suite, Role.AFTER_SUITE)
    tests = validate_tests(
        groups.tests,
        default_priority=default_priority,
        trim_csv_tokens=trim_csv_tokens,
    )

    plan = ExecutionPlan(
        unit_name=unit_name,
        tests=order_tests(tests),
        before_suite=before_suite,
        after_suite=after_suite,
        before_test=list(groups.before_test),
        after_test=list(groups.after_test),
    )
    logger.debug("Execution plan for %s: %s", unit_name, plan.test_names)
    return plan
