"""Resolution of ``module:Class`` targets given on the command line."""

import hashlib
import importlib
import importlib.util
import inspect
import sys
from pathlib import Path
from types import ModuleType

from suiterunner.errors import TargetLoadError


def _module_name(path: Path) -> str:
    # Private name so a target file never replaces an importable module.
    digest = hashlib.sha1(str(path).encode()).hexdigest()[:8]
    return f"_suiterunner_target_{path.stem}_{digest}"


def _import_file(path: Path) -> ModuleType:
    module_name = _module_name(path)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise TargetLoadError(f"Cannot import file: {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


def load_target(target: str) -> type:
    """Load the test class named by ``target``.

    Accepts ``package.module:ClassName`` or ``path/to/file.py:ClassName``.

    Raises:
        TargetLoadError: If the module cannot be imported or the attribute is
            missing or not a class
    """
    module_ref, sep, class_name = target.rpartition(":")
    if not sep or not module_ref or not class_name:
        raise TargetLoadError(f"Target must look like 'module:ClassName', got {target!r}")

    try:
        if module_ref.endswith(".py"):
            path = Path(module_ref)
            if not path.exists():
                raise TargetLoadError(f"File not found: {path}")
            module = _import_file(path.resolve())
        else:
            module = importlib.import_module(module_ref)
    except TargetLoadError:
        raise
    except Exception as e:
        # Import-time failures of user code (syntax errors, raising module bodies).
        raise TargetLoadError(f"Cannot import {module_ref}: {type(e).__name__}: {e}") from e

    unit = getattr(module, class_name, None)
    if unit is None:
        raise TargetLoadError(f"{module_ref} has no attribute {class_name}")
    if not inspect.isclass(unit):
        raise TargetLoadError(f"{target} is not a class")
    return unit
