"""Metadata sources describing the declared methods of a test unit."""

import inspect
import typing
from abc import ABC, abstractmethod
from typing import Any, Optional

from suiterunner.annotations import Double, Long, get_roles
from suiterunner.core.models import Binding, MethodDescriptor, ParamKind

# Order matters: bool is checked before the integer kinds.
_KIND_BY_TYPE: list[tuple[Any, ParamKind]] = [
    (bool, ParamKind.BOOLEAN),
    (Long, ParamKind.LONG),
    (Double, ParamKind.DOUBLE),
    (int, ParamKind.INT),
    (float, ParamKind.DOUBLE),
    (str, ParamKind.STRING),
]


def resolve_kind(hint: Any) -> ParamKind:
    """Map a parameter annotation to its scalar kind."""
    for candidate, kind in _KIND_BY_TYPE:
        if hint is candidate:
            return kind
    return ParamKind.UNSUPPORTED


def type_name(hint: Any) -> str:
    """Readable name of a parameter annotation, for error messages."""
    if hint is inspect.Parameter.empty:
        return "<unannotated>"
    return getattr(hint, "__name__", None) or repr(hint)


class MetadataSource(ABC):
    """Read-only query interface over the declared methods of a test unit."""

    @abstractmethod
    def describe(self, unit: type) -> list[MethodDescriptor]:
        """Return the unit's declared methods in discovery order.

        Args:
            unit: The test class to describe

        Returns:
            One MethodDescriptor per declared callable member
        """
        pass


class ClassMetadataSource(MetadataSource):
    """Describes a class through its own namespace, in declaration order.

    Inherited members are not reported.
    """

    def describe(self, unit: type) -> list[MethodDescriptor]:
        descriptors = []
        for name, member in vars(unit).items():
            descriptor = self._describe_member(name, member)
            if descriptor is not None:
                descriptors.append(descriptor)
        return descriptors

    def _describe_member(self, name: str, member: Any) -> Optional[MethodDescriptor]:
        if isinstance(member, staticmethod):
            function = member.__func__
            binding = Binding.STATIC
        elif isinstance(member, classmethod):
            function = member.__func__
            binding = Binding.CLASS
        elif inspect.isfunction(member):
            function = member
            binding = Binding.INSTANCE
        else:
            return None

        params = list(inspect.signature(function).parameters.values())
        if binding != Binding.STATIC and params:
            # Drop self / cls.
            params = params[1:]

        hints = self._type_hints(function)
        param_hints = [hints.get(p.name, p.annotation) for p in params]

        return MethodDescriptor(
            name=name,
            function=function,
            binding=binding,
            param_names=[p.name for p in params],
            param_kinds=[resolve_kind(h) for h in param_hints],
            param_types=[type_name(h) for h in param_hints],
            roles=get_roles(function),
        )

    @staticmethod
    def _type_hints(function: Any) -> dict[str, Any]:
        try:
            return typing.get_type_hints(function)
        except (NameError, TypeError):
            # Unresolvable string annotations fall back to the raw values.
            return {}
