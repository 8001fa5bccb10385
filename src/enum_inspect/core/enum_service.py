"""Core enum service — catalog lookups, flag splitting and parsing.

This is the central service class consumed by the CLI layer and by
library users.  It depends on a
:class:`~enum_inspect.core.protocols.TypeCatalogProvider` and a
:class:`~enum_inspect.core.protocols.DescriptionProvider` injected at
construction time (dependency inversion), keeping the core free of any
reflection code.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Only :class:`~enum_inspect.exceptions.EnumInspectError` subclasses escape.
* ``in_flags`` and ``parse`` never raise.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from enum_inspect.core.coercion import coerce_uint64
from enum_inspect.core.flag_decomposer import decompose, is_member, parse_with_default
from enum_inspect.core.models import (
    EnumValue,
    FlagDecomposition,
    NoNamedZero,
    ResidualBits,
    ValueCatalog,
)
from enum_inspect.core.protocols import DescriptionProvider, TypeCatalogProvider
from enum_inspect.exceptions import CoercionError, EnumInspectError

log = logging.getLogger(__name__)

_INT_WIDTHS: tuple[int, ...] = (8, 16, 32, 64)


def is_enum_type(candidate: object) -> bool:
    """Return ``True`` when *candidate* is an ``enum.Enum`` subclass."""
    return isinstance(candidate, type) and issubclass(candidate, Enum)


class EnumService:
    """Stateless façade over an enumerated type's reflective metadata.

    Parameters
    ----------
    catalog_provider:
        Any object satisfying the :class:`TypeCatalogProvider` protocol.
    description_provider:
        Any object satisfying the :class:`DescriptionProvider` protocol.
    """

    def __init__(
        self,
        catalog_provider: TypeCatalogProvider,
        description_provider: DescriptionProvider,
    ) -> None:
        self._catalogs: TypeCatalogProvider = catalog_provider
        self._descriptions: DescriptionProvider = description_provider

    # ------------------------------------------------------------------
    # Flag splitting
    # ------------------------------------------------------------------

    def get_catalog(self, enum_type: type[Enum]) -> ValueCatalog:
        """Return the value catalog of *enum_type*."""
        return self._catalogs.get_catalog(enum_type)

    def get_flag_list(self, enum_type: type[Enum], value: object) -> FlagDecomposition:
        """Split the combined *value* into the named flags of *enum_type*.

        Raises
        ------
        CoercionError
            If *value* cannot be read as an unsigned 64-bit integer.
        EnumTypeError
            If *enum_type* is not an enumerated type.
        """
        query = coerce_uint64(value)
        catalog = self._catalogs.get_catalog(enum_type)
        result = decompose(catalog, query)
        log.debug(
            "Decomposed %#x against %s into %s (residual=%s)",
            query,
            catalog.type_name,
            result.names,
            result.residual,
        )
        return result

    def get_flag_members(self, enum_type: type[Enum], value: object) -> list[Any]:
        """Split *value* and map every entry back to a member of *enum_type*.

        The absent-zero marker becomes ``None``.  Residual bits become
        ``enum_type(residual)`` when the type accepts undeclared values
        (``IntFlag`` does); otherwise the :class:`ResidualBits` entry is
        returned as is.
        """
        members: list[Any] = []
        for entry in self.get_flag_list(enum_type, value):
            if isinstance(entry, EnumValue):
                members.append(self._catalogs.get_member(enum_type, entry.name))
            elif isinstance(entry, NoNamedZero):
                members.append(None)
            else:
                members.append(self._residual_member(enum_type, entry))
        return members

    @staticmethod
    def _residual_member(enum_type: type[Enum], residual: ResidualBits) -> Any:
        try:
            return enum_type(residual.value)
        except ValueError:
            return residual

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def get_enum_list(self, enum_type: type[Enum]) -> list[Enum]:
        """Return one member per declared name, in declaration order."""
        catalog = self._catalogs.get_catalog(enum_type)
        return [self._catalogs.get_member(enum_type, name) for name in catalog.names]

    def get_enum_names(self, enum_type: type[Enum]) -> list[str]:
        return list(self._catalogs.get_catalog(enum_type).names)

    def get_values(self, enum_type: type[Enum]) -> list[int]:
        return list(self._catalogs.get_catalog(enum_type).values)

    def get_int_values(
        self,
        enum_type: type[Enum],
        bits: int = 32,
        *,
        signed: bool = True,
    ) -> list[int]:
        """Return the declared values checked against a fixed integer width.

        Signed widths reinterpret the unsigned catalog value in two's
        complement, so ``0xFFFFFFFF`` becomes ``-1`` for ``bits=32``.

        Raises
        ------
        CoercionError
            If *bits* is not 8, 16, 32 or 64, or a value does not fit.
        """
        if bits not in _INT_WIDTHS:
            raise CoercionError(
                f"Unsupported integer width: {bits}.",
                hint="Use one of 8, 16, 32 or 64.",
            )
        catalog = self._catalogs.get_catalog(enum_type)
        limit = 1 << bits
        result: list[int] = []
        for entry in catalog.entries:
            if entry.value >= limit:
                raise CoercionError(
                    f"{catalog.type_name}.{entry.name} = {entry.value} "
                    f"does not fit in {bits} bits.",
                )
            value = entry.value
            if signed and value >= limit >> 1:
                value -= limit
            result.append(value)
        return result

    # ------------------------------------------------------------------
    # Descriptions
    # ------------------------------------------------------------------

    def get_description(self, member: Enum, *, split_flags: bool = False) -> str:
        return self._descriptions.describe(member, split_flags=split_flags)

    def get_descriptions(
        self,
        enum_type: type[Enum],
        *,
        split_flags: bool = False,
    ) -> list[str]:
        """Return the description of every declared member."""
        return [
            self._descriptions.describe(member, split_flags=split_flags)
            for member in self.get_enum_list(enum_type)
        ]

    # ------------------------------------------------------------------
    # Flag predicates
    # ------------------------------------------------------------------

    def is_flags_enum(self, candidate: object) -> bool:
        """Return whether *candidate* is an enumerated type of bit flags."""
        if not is_enum_type(candidate):
            return False
        return self._catalogs.is_flags(candidate)  # type: ignore[arg-type]

    @staticmethod
    def in_flags(flags: object, value: object) -> bool:
        """Return whether *value* shares a bit with *flags*; never raises."""
        return is_member(flags, value)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, enum_type: type[Enum], text: object, default: Any = None) -> Any:
        """Return the member of *enum_type* named *text* (any case).

        Returns *default* unchanged when *text* names no member or when
        *enum_type* cannot be catalogued.
        """
        try:
            catalog = self._catalogs.get_catalog(enum_type)
        except EnumInspectError as exc:
            log.debug("Parse of %r fell back to default: %s", text, exc)
            return default

        entry = parse_with_default(catalog, text, None)
        if not isinstance(entry, EnumValue):
            log.debug("No member of %s named %r", catalog.type_name, text)
            return default
        return self._catalogs.get_member(enum_type, entry.name)
