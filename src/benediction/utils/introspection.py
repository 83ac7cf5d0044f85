# topmark:header:start
#
#   project      : Benediction
#   file         : introspection.py
#   file_relpath : src/benediction/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Import-target resolution and value descriptions for the CLI."""

from __future__ import annotations

import importlib
from inspect import getmodule
from typing import Any

from benediction.config.logging import BenedictionLogger, get_logger
from benediction.constants import TARGET_SEPARATOR

logger: BenedictionLogger = get_logger(__name__)


def import_target(target: str) -> Any:
    """Import the object named by ``target``.

    Targets have the form ``package.module:attr.path``. Without a ``:`` the whole
    target is imported as a module.

    Args:
        target: The import target.

    Returns:
        The resolved object.

    Raises:
        ImportError: If the module cannot be imported or the attribute path does
            not resolve.
    """
    module_name, sep, attr_path = target.strip().partition(TARGET_SEPARATOR)
    if not module_name or (sep and not attr_path):
        raise ImportError(f"Invalid import target {target!r} (expected 'module:attr')")

    logger.trace("Importing %s", module_name)
    obj: Any = importlib.import_module(module_name)
    if not attr_path:
        return obj
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ImportError(f"{target!r}: no attribute {part!r}") from exc
    return obj


def format_callable_pretty(obj: Any) -> str:
    """Return a human-friendly (module.qualname) for any callable.

    Handles functions, bound methods, callable instances, and partials. Falls
    back to the callable's class name when needed, and uses ``inspect.getmodule``
    as a last resort to resolve the module name.

    Args:
        obj: The callable object to describe.

    Returns:
        A string like ``"(package.module.QualifiedName)"`` or ``"(QualifiedName)"``
        if the module cannot be resolved.
    """
    mod_name: str | None = getattr(obj, "__module__", None)
    call_name: str | None = getattr(obj, "__qualname__", None)

    if call_name is None:
        call_name = getattr(obj, "__name__", None)
    if call_name is None:
        call_name = type(obj).__name__

    if not mod_name:
        mod = getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"({mod_name}.{call_name})" if mod_name else f"({call_name})"


def describe_kind(value: Any) -> str:
    """Return ``"callable"`` for callables, else the value's type name."""
    return "callable" if callable(value) else type(value).__name__
