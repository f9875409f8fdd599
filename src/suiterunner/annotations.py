"""Decorators that mark methods of a test unit with their role.

Each decorator records its role (and payload) in a small metadata bag stored on
the underlying function, so it can be stacked above or below ``staticmethod``
and ``classmethod``::

    class CheckoutSuite:
        @before_suite
        @staticmethod
        def start_server():
            ...

        @test(priority=3)
        @csv_source("5, Java, 15, false")
        def checks_cart(self, a: int, b: str, c: int, d: bool):
            ...
"""

from typing import Any, Callable, NewType, Optional

from suiterunner.core.models import Role

ROLES_ATTR = "__suite_roles__"

# Markers for the 64-bit parameter kinds; plain int maps to the 32-bit kind.
Long = NewType("Long", int)
Double = NewType("Double", float)


def _unwrap(target: Any) -> Callable[..., Any]:
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    if not callable(target):
        raise TypeError(f"Role decorators apply to functions, got {target!r}")
    return target


def _attach(target: Any, role: Role, payload: Any = None) -> Any:
    func = _unwrap(target)
    roles = dict(getattr(func, ROLES_ATTR, {}))
    roles[role] = payload
    setattr(func, ROLES_ATTR, roles)
    return target


def get_roles(target: Any) -> dict[Role, Any]:
    """Return the role metadata attached to ``target`` (empty when unmarked)."""
    if isinstance(target, (staticmethod, classmethod)):
        target = target.__func__
    return dict(getattr(target, ROLES_ATTR, {}))


def test(func: Any = None, *, priority: Optional[int] = None) -> Any:
    """Mark a method as a test case.

    Usable bare (``@test``) or with a priority (``@test(priority=7)``). A test
    without an explicit priority runs with the default priority.
    """
    if func is not None:
        return _attach(func, Role.TEST, None)

    def _decorate(target: Any) -> Any:
        return _attach(target, Role.TEST, priority)

    return _decorate


def csv_source(value: str) -> Callable[[Any], Any]:
    """Supply one argument set for a test as a comma-separated literal."""
    if not isinstance(value, str):
        raise TypeError(f"csv_source expects a string, got {type(value).__name__}")

    def _decorate(target: Any) -> Any:
        return _attach(target, Role.CSV_SOURCE, value)

    return _decorate


def before_test(func: Any) -> Any:
    """Run before every test method, on the shared instance."""
    return _attach(func, Role.BEFORE_TEST)


def after_test(func: Any) -> Any:
    """Run after every test method, on the shared instance."""
    return _attach(func, Role.AFTER_TEST)


def before_suite(func: Any) -> Any:
    """Run once before any test. Must be a staticmethod or classmethod."""
    return _attach(func, Role.BEFORE_SUITE)


def after_suite(func: Any) -> Any:
    """Run once after all tests. Must be a staticmethod or classmethod."""
    return _attach(func, Role.AFTER_SUITE)
