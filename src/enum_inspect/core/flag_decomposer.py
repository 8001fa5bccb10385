"""Pure flag arithmetic over value catalogs.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

Decomposition rules (enforced by :func:`decompose`):

1. **Zero** — a zero query maps to the catalog's first entry when that
   entry is zero, else to :data:`~enum_inspect.core.models.NO_NAMED_ZERO`.
2. **Greedy scan** — entries are tried from last declared to first; an
   entry matches when all of its bits are still unclaimed, and its bits
   are then claimed.
3. **Residual** — bits left unclaimed are reported as one
   :class:`~enum_inspect.core.models.ResidualBits` entry, last.
"""

from __future__ import annotations

from enum_inspect.core.coercion import UINT64_MAX, try_coerce_uint64
from enum_inspect.core.models import (
    NO_NAMED_ZERO,
    EnumValue,
    FlagDecomposition,
    FlagEntry,
    ResidualBits,
    ValueCatalog,
)
from enum_inspect.exceptions import CatalogError, CoercionError


# ---------------------------------------------------------------------------
# Decompose
# ---------------------------------------------------------------------------

def _check_query(query: int) -> None:
    # bool is an int subclass but never a valid bitmask here.
    if not isinstance(query, int) or isinstance(query, bool):
        raise CoercionError(
            f"Flag query must be an int, got {type(query).__name__}.",
            hint="Coerce the value with coerce_uint64() first.",
        )
    if query < 0 or query > UINT64_MAX:
        raise CoercionError(
            f"Flag query {query} is outside the unsigned 64-bit range.",
        )


def _zero_entry(catalog: ValueCatalog) -> FlagEntry:
    """Return the named zero of *catalog*, or the absent marker."""
    first = catalog.entries[0]
    if first.value == 0:
        return first
    return NO_NAMED_ZERO


def decompose(catalog: ValueCatalog, query: int) -> FlagDecomposition:
    """Split *query* into the named flags of *catalog*.

    Entries are matched greedily in reverse declaration order, so a
    later declaration wins when bit patterns overlap.  Matched bits are
    cleared before the scan continues, which guarantees no entry is
    matched twice and no bit is counted twice.

    Raises
    ------
    CatalogError
        If *catalog* has no entries.
    CoercionError
        If *query* is not an ``int`` in ``[0, 2**64)``.
    """
    if not catalog:
        raise CatalogError(
            f"Cannot decompose against the empty catalog of {catalog.type_name}.",
        )
    _check_query(query)

    if query == 0:
        return FlagDecomposition(query=0, entries=(_zero_entry(catalog),))

    remaining = query
    found: list[FlagEntry] = []
    for index in range(len(catalog.entries) - 1, -1, -1):
        entry = catalog.entries[index]
        # A zero entry matches any mask; only index 0 may be the named
        # zero and it has been handled above.
        if entry.value == 0:
            continue
        if remaining & entry.value == entry.value:
            remaining &= ~entry.value
            found.append(entry)
        if remaining == 0:
            break

    if remaining != 0:
        found.append(ResidualBits(value=remaining))

    return FlagDecomposition(query=query, entries=tuple(found))


# ---------------------------------------------------------------------------
# Membership
# ---------------------------------------------------------------------------

def is_member(flags: object, value: object) -> bool:
    """Return whether *flags* and *value* share at least one bit.

    Inputs that cannot be read as unsigned 64-bit integers are simply
    not members; this function never raises.
    """
    flags_ok, flags_bits = try_coerce_uint64(flags)
    value_ok, value_bits = try_coerce_uint64(value)
    if not (flags_ok and value_ok):
        return False
    return flags_bits & value_bits != 0


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_with_default(
    catalog: ValueCatalog,
    text: object,
    default: object = None,
) -> EnumValue | object:
    """Return the catalog entry named *text* ignoring case, else *default*.

    Only whole names match; the earliest declaration wins when several
    names differ only by case.  Non-string *text* resolves to *default*.
    """
    if not isinstance(text, str):
        return default
    entry = catalog.find(text, ignore_case=True)
    # Anything found is by construction one of the catalog's own entries.
    if entry is None:
        return default
    return entry
