"""Partitioning of declared methods into role groups."""

import logging

from suiterunner.core.models import MethodDescriptor, Role, RoleGroups

logger = logging.getLogger(__name__)


def find_methods_by_role(methods: list[MethodDescriptor], role: Role) -> list[MethodDescriptor]:
    """Return the methods carrying ``role``, in discovery order."""
    return [m for m in methods if m.has_role(role)]


def discover(methods: list[MethodDescriptor]) -> RoleGroups:
    """Group declared methods by role.

    Groups are not mutually exclusive: a method carrying two roles appears in
    both. Discovery never rejects input.
    """
    groups = RoleGroups(
        before_suite=find_methods_by_role(methods, Role.BEFORE_SUITE),
        after_suite=find_methods_by_role(methods, Role.AFTER_SUITE),
        before_test=find_methods_by_role(methods, Role.BEFORE_TEST),
        after_test=find_methods_by_role(methods, Role.AFTER_TEST),
        tests=find_methods_by_role(methods, Role.TEST),
    )
    logger.debug(
        "Discovered %d tests, %d before-test and %d after-test hooks",
        len(groups.tests),
        len(groups.before_test),
        len(groups.after_test),
    )
    return groups
