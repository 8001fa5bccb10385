"""Python ``enum`` adapter implementing :class:`TypeCatalogProvider`.

Reads ``__members__`` of an ``enum.Enum`` subclass — declaration order,
aliases included — and turns it into an immutable
:class:`~enum_inspect.core.models.ValueCatalog`.  Catalogs are built once
per type and cached; class metadata is static, so cached catalogs never
go stale unless the type object itself is replaced.

Every reflective failure is re-raised as an
:class:`~enum_inspect.exceptions.EnumInspectError` subclass.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum, Flag

from enum_inspect.core.coercion import try_coerce_uint64
from enum_inspect.core.enum_service import is_enum_type
from enum_inspect.core.models import EnumValue, ValueCatalog
from enum_inspect.exceptions import CatalogError, EnumTypeError

log = logging.getLogger(__name__)


def _qualified_name(enum_type: type) -> str:
    return f"{enum_type.__module__}.{enum_type.__qualname__}"


def _require_enum(enum_type: object) -> type[Enum]:
    if not is_enum_type(enum_type):
        raise EnumTypeError(
            f"{enum_type!r} is not an enumerated type.",
            hint="Pass an enum.Enum subclass such as an IntEnum or IntFlag.",
        )
    return enum_type  # type: ignore[return-value]


@functools.lru_cache(maxsize=256)
def _build_catalog(enum_type: type[Enum]) -> ValueCatalog:
    """Build the catalog for *enum_type*; cached per type object."""
    type_name = _qualified_name(enum_type)
    entries: list[EnumValue] = []
    for name, member in enum_type.__members__.items():
        raw = member.value
        ok, number = try_coerce_uint64(raw) if isinstance(raw, int) else (False, 0)
        if not ok:
            raise CatalogError(
                f"{type_name}.{name} has value {raw!r}, "
                "which is not an unsigned 64-bit integer.",
                hint="Only enums with non-negative integer values can be inspected.",
            )
        entries.append(EnumValue(name=name, value=number))

    catalog = ValueCatalog(
        type_name=type_name,
        entries=tuple(entries),
        is_flags=issubclass(enum_type, Flag),
    )
    log.debug(
        "Built catalog for %s: %d entries, flags=%s",
        type_name,
        len(catalog),
        catalog.is_flags,
    )
    return catalog


class PythonEnumCatalogProvider:
    """Concrete :class:`TypeCatalogProvider` for ``enum.Enum`` subclasses.

    The provider itself is stateless; the catalog cache is shared by all
    instances and is safe to use from several threads.
    """

    def get_catalog(self, enum_type: type[Enum]) -> ValueCatalog:
        """Return the cached catalog of *enum_type*.

        Raises
        ------
        EnumTypeError
            If *enum_type* is not an ``enum.Enum`` subclass.
        CatalogError
            If a member value is not a non-negative integer below 2**64.
        """
        return _build_catalog(_require_enum(enum_type))

    def is_flags(self, enum_type: type[Enum]) -> bool:
        """``Flag`` and ``IntFlag`` subclasses are flag-combinable."""
        return issubclass(_require_enum(enum_type), Flag)

    def get_member(self, enum_type: type[Enum], name: str) -> Enum:
        """Return the member declared as *name* (aliases resolve)."""
        try:
            return _require_enum(enum_type).__members__[name]
        except KeyError as exc:
            raise EnumTypeError(
                f"{_qualified_name(enum_type)} has no member named {name!r}.",
            ) from exc

    @staticmethod
    def cache_clear() -> None:
        """Drop every cached catalog."""
        _build_catalog.cache_clear()
