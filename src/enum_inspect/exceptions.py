"""Custom exception hierarchy for enum-inspect.

All exceptions that cross layer boundaries must inherit from
:class:`EnumInspectError`.  Raw exceptions raised while importing or
reflecting over user types (``ImportError``, ``AttributeError``,
``TypeError``) must NEVER propagate beyond the infrastructure layer —
they must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
EnumInspectError
├── CoercionError
├── CatalogError
├── EnumTypeError
└── EnvironmentError
"""

from __future__ import annotations


class EnumInspectError(Exception):
    """Base exception for all enum-inspect errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Values ----------------------------------------------------------------

class CoercionError(EnumInspectError):
    """Raised when a value cannot be read as an unsigned 64-bit integer."""


# --- Types / catalogs ------------------------------------------------------

class CatalogError(EnumInspectError):
    """Raised when an enumerated type yields an unusable value catalog."""


class EnumTypeError(EnumInspectError):
    """Raised when a target is not an enumerated type or cannot be loaded."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(EnumInspectError):
    """Raised when an optional runtime dependency is not available."""
