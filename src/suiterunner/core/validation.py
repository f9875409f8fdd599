"""Structural validation of role groups and CSV argument binding."""

import re
from typing import Any, Callable, Optional

from suiterunner.core.models import MethodDescriptor, ParamKind, PlannedTest, Role
from suiterunner.errors import ConfigurationError

MIN_PRIORITY = 1
MAX_PRIORITY = 10
DEFAULT_PRIORITY = 5

INT_RANGE = (-(2**31), 2**31 - 1)
LONG_RANGE = (-(2**63), 2**63 - 1)

CSV_SEPARATOR = re.compile(r",\s*")
_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")
_DECIMAL_LITERAL = re.compile(r"[+-]?(NaN|Infinity|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)")

_DUPLICATE_MESSAGES = {
    Role.BEFORE_SUITE: "@BeforeSuite annotation can only be used once",
    Role.AFTER_SUITE: "@AfterSuite annotation can only be used once",
}


def validate_suite_hook(methods: list[MethodDescriptor], role: Role) -> Optional[MethodDescriptor]:
    """Validate a suite hook group and return its single member, if any.

    Raises:
        ConfigurationError: If a member is not static, or the group has more
            than one member
    """
    for method in methods:
        if not method.is_static:
            raise ConfigurationError(
                f"@{role.value} should only be used on static methods. "
                f"Incorrect usage in the method {method.name}",
                method_name=method.name,
            )

    if len(methods) > 1:
        raise ConfigurationError(_DUPLICATE_MESSAGES[role])

    return methods[0] if methods else None


def resolve_priority(method: MethodDescriptor, default: int = DEFAULT_PRIORITY) -> int:
    """Return the method's declared priority, or ``default`` when absent.

    Raises:
        ConfigurationError: If the priority is not an integer in [1, 10]
    """
    priority = method.payload(Role.TEST)
    if priority is None:
        priority = default

    valid = isinstance(priority, int) and not isinstance(priority, bool)
    if not valid or not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise ConfigurationError(
            f"Priority in method {method.name} must be between "
            f"{MIN_PRIORITY} and {MAX_PRIORITY}: {priority!r}",
            method_name=method.name,
        )
    return priority


def split_csv(value: str, trim: bool = False) -> list[str]:
    """Split a CSV literal on a comma followed by optional whitespace.

    Trailing empty tokens are dropped. Leading whitespace of the first token
    and trailing whitespace of the last one are kept unless ``trim`` is set.
    """
    tokens = CSV_SEPARATOR.split(value)
    while len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()
    if trim:
        tokens = [token.strip() for token in tokens]
    return tokens


def _parse_integer(token: str, bounds: tuple[int, int]) -> int:
    if not _INTEGER_LITERAL.fullmatch(token):
        raise ValueError(f"not a base-10 integer: {token!r}")
    value = int(token)
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"out of range [{low}, {high}]: {token}")
    return value


def _parse_boolean(token: str) -> bool:
    # Anything other than "true" is False, never an error.
    return token.lower() == "true"


def _parse_double(token: str) -> float:
    # Plain decimal or exponent form; Python-only spellings like "1_000" or "inf" are rejected.
    if not _DECIMAL_LITERAL.fullmatch(token):
        raise ValueError(f"not a decimal float: {token!r}")
    return float(token)


CONVERTERS: dict[ParamKind, Callable[[str], Any]] = {
    ParamKind.INT: lambda token: _parse_integer(token, INT_RANGE),
    ParamKind.BOOLEAN: _parse_boolean,
    ParamKind.DOUBLE: _parse_double,
    ParamKind.LONG: lambda token: _parse_integer(token, LONG_RANGE),
    ParamKind.STRING: lambda token: token,
}


def convert(token: str, kind: ParamKind, type_name: str = "") -> Any:
    """Convert one CSV token to the given parameter kind.

    Raises:
        ConfigurationError: If the kind is unsupported
        ValueError: If the token cannot be parsed as that kind
    """
    converter = CONVERTERS.get(kind)
    if converter is None:
        raise ConfigurationError(f"Unsupported parameter type: {type_name or kind.value}")
    return converter(token)


def bind_csv_arguments(method: MethodDescriptor, trim: bool = False) -> tuple:
    """Convert the method's CsvSource literal into its positional arguments.

    Raises:
        ConfigurationError: On a count mismatch, an unsupported parameter type
            or a token that does not parse as its parameter's kind
    """
    tokens = split_csv(method.payload(Role.CSV_SOURCE), trim=trim)
    if len(tokens) != method.param_count:
        raise ConfigurationError(
            f"Argument count mismatch between CSV values and method parameters "
            f"for: {method.name} ({len(tokens)} values, {method.param_count} parameters)",
            method_name=method.name,
        )

    args = []
    for token, name, kind, declared in zip(
        tokens, method.param_names, method.param_kinds, method.param_types
    ):
        try:
            args.append(convert(token, kind, declared))
        except ConfigurationError as e:
            e.method_name = method.name
            raise
        except ValueError as e:
            raise ConfigurationError(
                f"Cannot convert {token!r} for parameter {name} of {method.name} "
                f"to {kind.value}: {e}",
                method_name=method.name,
            ) from e
    return tuple(args)


def validate_tests(
    methods: list[MethodDescriptor],
    default_priority: int = DEFAULT_PRIORITY,
    trim_csv_tokens: bool = False,
) -> list[PlannedTest]:
    """Validate every test method and bind its CSV arguments.

    Returns the planned tests in discovery order. The first invalid method
    aborts validation.
    """
    planned = []
    for method in methods:
        priority = resolve_priority(method, default_priority)
        args: tuple = ()
        if method.has_role(Role.CSV_SOURCE):
            args = bind_csv_arguments(method, trim=trim_csv_tokens)
        planned.append(PlannedTest(method=method, priority=priority, args=args))
    return planned
