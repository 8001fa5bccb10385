"""Infrastructure layer — reflection over Python enum types.

This layer wraps all interaction with the ``enum`` module and with
``importlib``.  Every raw reflective exception must be caught here and
re-raised as a :class:`~enum_inspect.exceptions.EnumInspectError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from enum_inspect.infra.description_provider import MemberDescriptionProvider
from enum_inspect.infra.loader import load_enum_type
from enum_inspect.infra.python_enum_provider import PythonEnumCatalogProvider

__all__: list[str] = [
    "MemberDescriptionProvider",
    "PythonEnumCatalogProvider",
    "load_enum_type",
]
