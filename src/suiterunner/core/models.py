"""Data models for discovered methods, execution plans and run outcomes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class Role(str, Enum):
    """Role markers a method can carry."""

    TEST = "Test"
    BEFORE_TEST = "BeforeTest"
    AFTER_TEST = "AfterTest"
    BEFORE_SUITE = "BeforeSuite"
    AFTER_SUITE = "AfterSuite"
    CSV_SOURCE = "CsvSource"


class ParamKind(str, Enum):
    """Scalar parameter kinds a CSV literal can be converted to."""

    INT = "int"
    BOOLEAN = "boolean"
    DOUBLE = "double"
    LONG = "long"
    STRING = "string"
    UNSUPPORTED = "unsupported"


class Binding(str, Enum):
    """How a method receives its receiver when invoked."""

    INSTANCE = "instance"
    STATIC = "static"
    CLASS = "class"


@dataclass
class MethodDescriptor:
    """A declared method of a test unit, as reported by a metadata source."""

    name: str
    function: Callable[..., Any]
    binding: Binding = Binding.INSTANCE
    param_names: list[str] = field(default_factory=list)
    param_kinds: list[ParamKind] = field(default_factory=list)
    param_types: list[str] = field(default_factory=list)
    roles: dict[Role, Any] = field(default_factory=dict)

    @property
    def is_static(self) -> bool:
        """Class-level methods (staticmethod or classmethod) count as static."""
        return self.binding != Binding.INSTANCE

    @property
    def visibility(self) -> str:
        return "private" if self.name.startswith("_") else "public"

    @property
    def param_count(self) -> int:
        return len(self.param_names)

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def payload(self, role: Role) -> Any:
        """Return the payload attached to ``role``, or None when absent."""
        return self.roles.get(role)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "binding": self.binding.value,
            "visibility": self.visibility,
            "param_names": list(self.param_names),
            "param_types": list(self.param_types),
            "roles": {role.value: value for role, value in self.roles.items()},
        }


@dataclass
class RoleGroups:
    """Methods partitioned by role, each list in discovery order."""

    before_suite: list[MethodDescriptor] = field(default_factory=list)
    after_suite: list[MethodDescriptor] = field(default_factory=list)
    before_test: list[MethodDescriptor] = field(default_factory=list)
    after_test: list[MethodDescriptor] = field(default_factory=list)
    tests: list[MethodDescriptor] = field(default_factory=list)


@dataclass
class PlannedTest:
    """A validated test method with its resolved priority and bound arguments."""

    method: MethodDescriptor
    priority: int
    args: tuple = ()

    @property
    def name(self) -> str:
        return self.method.name

    @property
    def parameterized(self) -> bool:
        return self.method.has_role(Role.CSV_SOURCE)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "priority": self.priority,
            "args": list(self.args),
        }


@dataclass
class ExecutionPlan:
    """Validated hooks plus the priority-ordered test sequence for one run."""

    unit_name: str
    tests: list[PlannedTest] = field(default_factory=list)
    before_suite: Optional[MethodDescriptor] = None
    after_suite: Optional[MethodDescriptor] = None
    before_test: list[MethodDescriptor] = field(default_factory=list)
    after_test: list[MethodDescriptor] = field(default_factory=list)

    @property
    def test_names(self) -> list[str]:
        return [planned.name for planned in self.tests]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "unit_name": self.unit_name,
            "before_suite": self.before_suite.name if self.before_suite else None,
            "after_suite": self.after_suite.name if self.after_suite else None,
            "before_test": [m.name for m in self.before_test],
            "after_test": [m.name for m in self.after_test],
            "tests": [planned.to_dict() for planned in self.tests],
        }


@dataclass
class RunOutcome:
    """Result of a run that completed every applicable phase."""

    unit_name: str
    invoked: list[str] = field(default_factory=list)
    tests_run: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "unit_name": self.unit_name,
            "invoked": list(self.invoked),
            "tests_run": list(self.tests_run),
        }
