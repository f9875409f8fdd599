"""Error types raised by the suite runner."""

from typing import Optional


class SuiteRunnerError(Exception):
    """Base class for every error a run can end with."""

    pass


class ConfigurationError(SuiteRunnerError):
    """Raised when a test unit's declared metadata is structurally invalid.

    Always raised before any method of the unit is invoked.
    """

    def __init__(self, message: str, method_name: Optional[str] = None):
        super().__init__(message)
        self.method_name = method_name


class InstantiationError(SuiteRunnerError):
    """Raised when the test unit cannot be constructed."""

    def __init__(self, unit_name: str, cause: BaseException):
        super().__init__(f"Cannot instantiate test unit {unit_name}: {cause}")
        self.unit_name = unit_name


class InvocationError(SuiteRunnerError):
    """Raised when a hook or test method fails while being invoked.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, method_name: str, message: str):
        super().__init__(f"Invocation of {method_name} failed: {message}")
        self.method_name = method_name


class TargetLoadError(SuiteRunnerError):
    """Raised when a ``module:Class`` target cannot be imported."""

    pass
