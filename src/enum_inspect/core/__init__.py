"""Core / service layer — pure flag arithmetic and orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from enum_inspect.core.coercion import UINT64_MAX, coerce_uint64, try_coerce_uint64
from enum_inspect.core.enum_service import EnumService, is_enum_type
from enum_inspect.core.flag_decomposer import decompose, is_member, parse_with_default
from enum_inspect.core.models import (
    NO_NAMED_ZERO,
    EnumValue,
    FlagDecomposition,
    FlagEntry,
    NoNamedZero,
    ResidualBits,
    ValueCatalog,
)
from enum_inspect.core.protocols import DescriptionProvider, TypeCatalogProvider

__all__: list[str] = [
    "NO_NAMED_ZERO",
    "UINT64_MAX",
    "DescriptionProvider",
    "EnumService",
    "EnumValue",
    "FlagDecomposition",
    "FlagEntry",
    "NoNamedZero",
    "ResidualBits",
    "TypeCatalogProvider",
    "ValueCatalog",
    "coerce_uint64",
    "decompose",
    "is_enum_type",
    "is_member",
    "parse_with_default",
    "try_coerce_uint64",
]
