"""Reading arbitrary inputs as unsigned 64-bit integers.

:func:`try_coerce_uint64` is the fallible primitive: it reports success
alongside the value instead of raising, so call sites that must fail
closed (membership tests, parsing) can collapse a failure to their
documented fallback.  :func:`coerce_uint64` is the raising form used at
boundaries that surface the failure to the caller.
"""

from __future__ import annotations

import operator
from enum import Enum

from enum_inspect.exceptions import CoercionError

UINT64_MAX: int = 2**64 - 1
"""Largest value representable in the 64-bit working precision."""


def _to_int(value: object) -> int | None:
    """Return *value* as a Python ``int`` or ``None`` when not integral."""
    if isinstance(value, Enum):
        value = value.value
        if isinstance(value, Enum):
            return None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text, 0)
        except ValueError:
            pass
        # Decimal with leading zeros, e.g. "010".
        try:
            return int(text, 10)
        except ValueError:
            return None
    # Floats expose no __index__, so 1.5 and 1.0 are both rejected here.
    try:
        return int(operator.index(value))
    except TypeError:
        return None


def try_coerce_uint64(value: object) -> tuple[bool, int]:
    """Attempt to read *value* as an unsigned 64-bit integer.

    Accepts enum members (through their ``value``), ``bool``, ``int`` and
    any object implementing ``__index__``, plus numeric strings in any
    base accepted by ``int(text, 0)``.

    Returns
    -------
    tuple[bool, int]
        ``(True, number)`` on success, ``(False, 0)`` otherwise.
    """
    number = _to_int(value)
    if number is None or number < 0 or number > UINT64_MAX:
        return False, 0
    return True, number


def coerce_uint64(value: object) -> int:
    """Read *value* as an unsigned 64-bit integer or raise.

    Raises
    ------
    CoercionError
        When *value* is not integral, is negative, or exceeds
        :data:`UINT64_MAX`.
    """
    ok, number = try_coerce_uint64(value)
    if not ok:
        raise CoercionError(
            f"Cannot interpret {value!r} as an unsigned 64-bit integer.",
            hint="Use a non-negative integer below 2**64, e.g. 5, 0x10 or 0b101.",
        )
    return number
