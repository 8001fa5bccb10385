"""Domain models for enum-inspect.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from enum_inspect.exceptions import CatalogError


# ---------------------------------------------------------------------------
# Catalog entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EnumValue:
    """One named value of an enumerated type."""

    name: str
    """Member name as declared (aliases keep their own name)."""

    value: int
    """Member value read as an unsigned 64-bit integer."""


# ---------------------------------------------------------------------------
# Value catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValueCatalog:
    """Ordered ``(name, value)`` pairs for one enumerated type.

    Entries keep declaration order.  Names are unique; values may repeat
    and need not be monotonic.
    """

    type_name: str
    """Qualified name of the enumerated type the catalog describes."""

    entries: tuple[EnumValue, ...]

    is_flags: bool = False
    """Whether the type's values are meant to be combined as bit flags."""

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for entry in self.entries:
            if entry.name in seen:
                raise CatalogError(
                    f"Duplicate name {entry.name!r} in catalog for {self.type_name}.",
                )
            seen.add(entry.name)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return len(self.entries) > 0

    def __iter__(self) -> Iterator[EnumValue]:
        return iter(self.entries)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(entry.value for entry in self.entries)

    def find(self, name: str, *, ignore_case: bool = False) -> EnumValue | None:
        """Return the first entry called *name*, or ``None``.

        With *ignore_case* the comparison uses :meth:`str.casefold`, and the
        earliest declared entry wins when several names fold together.
        """
        if ignore_case:
            wanted = name.casefold()
            for entry in self.entries:
                if entry.name.casefold() == wanted:
                    return entry
            return None
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None


# ---------------------------------------------------------------------------
# Decomposition outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResidualBits:
    """Bits of a query value that match no declared flag."""

    value: int

    @property
    def name(self) -> None:
        """Residual entries never carry a name."""
        return None


class NoNamedZero:
    """Marker for a zero query against a type without a named zero.

    Returned in place of a catalog entry when the value is ``0`` but the
    type's first entry is not zero.  There is exactly one instance,
    :data:`NO_NAMED_ZERO`.
    """

    _instance: NoNamedZero | None = None

    def __new__(cls) -> NoNamedZero:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def name(self) -> None:
        return None

    @property
    def value(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_NAMED_ZERO"


NO_NAMED_ZERO: NoNamedZero = NoNamedZero()

FlagEntry = EnumValue | ResidualBits | NoNamedZero
"""Anything that can appear in :attr:`FlagDecomposition.entries`."""


@dataclass(frozen=True, slots=True)
class FlagDecomposition:
    """Result of splitting one combined value into named flags.

    ``entries`` lists matched catalog entries in reverse declaration
    order, followed by at most one :class:`ResidualBits`.  A zero query
    yields exactly one entry: the named zero or :data:`NO_NAMED_ZERO`.
    """

    query: int
    entries: tuple[FlagEntry, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FlagEntry]:
        return iter(self.entries)

    @property
    def matched(self) -> tuple[EnumValue, ...]:
        return tuple(e for e in self.entries if isinstance(e, EnumValue))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(e.name for e in self.matched)

    @property
    def residual(self) -> int | None:
        """Unrecognised bits, or ``None`` when every bit was named."""
        for entry in self.entries:
            if isinstance(entry, ResidualBits):
                return entry.value
        return None

    @property
    def has_residual(self) -> bool:
        return self.residual is not None

    @property
    def is_absent_zero(self) -> bool:
        return any(isinstance(e, NoNamedZero) for e in self.entries)

    @property
    def total(self) -> int:
        """Sum of every entry's value; always equal to :attr:`query`."""
        return sum(entry.value for entry in self.entries)
