"""Invocation boundary between the runner and the methods it calls.

The runner never calls user code directly; every hook and test goes through an
``Invoker``, which makes the call and lets any exception propagate.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from suiterunner.core.models import Binding, MethodDescriptor


class Invoker(ABC):
    """Performs a single method call on behalf of the runner."""

    @abstractmethod
    def invoke(self, method: MethodDescriptor, receiver: Optional[Any], args: tuple = ()) -> Any:
        """Call ``method`` with ``args``.

        Args:
            method: The method to call
            receiver: The unit instance for instance methods, the unit class
                for class-level methods
            args: Positional arguments, already converted

        Returns:
            Whatever the method returns

        Raises:
            Exception: Whatever the method raises, unchanged
        """
        pass


class DirectInvoker(Invoker):
    """Calls the method's function in-process."""

    def invoke(self, method: MethodDescriptor, receiver: Optional[Any], args: tuple = ()) -> Any:
        if method.binding == Binding.STATIC:
            return method.function(*args)
        if method.binding == Binding.CLASS:
            unit = receiver if isinstance(receiver, type) else type(receiver)
            return method.function(unit, *args)
        return method.function(receiver, *args)
