"""Display text for enum members.

Implements :class:`~enum_inspect.core.protocols.DescriptionProvider`.
A member's text is taken from, in order:

* a ``description`` attribute (``str``),
* an ``info`` attribute (``str``),
* the member name.

Combined values of a flag type (``Perm.READ | Perm.WRITE``) are split
into their constituent flags on request and described one by one.
"""

from __future__ import annotations

from enum import Enum

from enum_inspect.core.flag_decomposer import decompose
from enum_inspect.core.models import EnumValue
from enum_inspect.core.protocols import TypeCatalogProvider

_TEXT_ATTRIBUTES: tuple[str, ...] = ("description", "info")

FLAG_SEPARATOR: str = ", "


def _member_text(member: Enum) -> str:
    for attribute in _TEXT_ATTRIBUTES:
        text = getattr(member, attribute, None)
        if isinstance(text, str) and text:
            return text
    if member.name is None:
        return str(member.value)
    return member.name


class MemberDescriptionProvider:
    """Describe members from their attributes, splitting flags on demand.

    Parameters
    ----------
    catalog_provider:
        Used to look up the type's catalog and members when splitting.
    """

    def __init__(self, catalog_provider: TypeCatalogProvider) -> None:
        self._catalogs: TypeCatalogProvider = catalog_provider

    def describe(self, member: Enum, *, split_flags: bool = False) -> str:
        """Return the display text of *member*.

        With *split_flags* a combined value of a flag type is described
        as its constituent flags joined by ``", "``; bits that match no
        flag are shown in hex.
        """
        enum_type = type(member)
        if not split_flags or not self._catalogs.is_flags(enum_type):
            return _member_text(member)

        catalog = self._catalogs.get_catalog(enum_type)
        result = decompose(catalog, int(member.value))
        if len(result) <= 1 and not result.has_residual:
            return _member_text(member)

        parts: list[str] = []
        for entry in result:
            if isinstance(entry, EnumValue):
                parts.append(_member_text(self._catalogs.get_member(enum_type, entry.name)))
            else:
                parts.append(hex(entry.value))
        return FLAG_SEPARATOR.join(parts)
