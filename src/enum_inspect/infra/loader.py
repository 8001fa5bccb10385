"""Resolve ``"package.module:EnumName"`` references to enum classes.

Used by the CLI to turn a command-line target into a type.  Import
failures are re-raised as :class:`~enum_inspect.exceptions.EnumTypeError`
so that they cross the layer boundary as a typed error.
"""

from __future__ import annotations

import importlib
from enum import Enum

from enum_inspect.core.enum_service import is_enum_type
from enum_inspect.exceptions import EnumTypeError

_TARGET_HINT = "Use the form package.module:EnumName, e.g. http:HTTPStatus."


def load_enum_type(target: str) -> type[Enum]:
    """Import and return the enum class referenced by *target*.

    Nested classes are reached with dots after the colon
    (``pkg.mod:Outer.Inner``).

    Raises
    ------
    EnumTypeError
        When *target* is malformed, the module cannot be imported, the
        attribute is missing, or it is not an ``enum.Enum`` subclass.
    """
    module_name, sep, attr_path = target.strip().partition(":")
    if not sep or not module_name or not attr_path:
        raise EnumTypeError(f"Invalid enum target: {target!r}", hint=_TARGET_HINT)

    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise EnumTypeError(
            f"Cannot import module {module_name!r}: {exc}",
            hint=_TARGET_HINT,
        ) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise EnumTypeError(
                f"{module_name!r} has no attribute {attr_path!r}.",
                hint=_TARGET_HINT,
            ) from exc

    if not is_enum_type(obj):
        raise EnumTypeError(f"{target} is not an enum.Enum subclass.")
    return obj  # type: ignore[return-value]
