"""enum-inspect — runtime introspection for enumerated types.

Lists named values, splits combined bitmasks into named flags, tests
flag membership, parses names with a fallback default and renders
descriptions.
"""

from __future__ import annotations

import functools

from enum_inspect.core import (
    NO_NAMED_ZERO,
    EnumService,
    EnumValue,
    FlagDecomposition,
    NoNamedZero,
    ResidualBits,
    ValueCatalog,
    decompose,
    is_member,
    parse_with_default,
)
from enum_inspect.infra import MemberDescriptionProvider, PythonEnumCatalogProvider
from enum_inspect.version import __version__


@functools.lru_cache(maxsize=None)
def default_service() -> EnumService:
    """Return a shared :class:`EnumService` over Python ``enum`` types."""
    catalogs = PythonEnumCatalogProvider()
    return EnumService(catalogs, MemberDescriptionProvider(catalogs))


__all__: list[str] = [
    "NO_NAMED_ZERO",
    "EnumService",
    "EnumValue",
    "FlagDecomposition",
    "MemberDescriptionProvider",
    "NoNamedZero",
    "PythonEnumCatalogProvider",
    "ResidualBits",
    "ValueCatalog",
    "__version__",
    "decompose",
    "default_service",
    "is_member",
    "parse_with_default",
]
