"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from enum_inspect.core.models import ValueCatalog


class TypeCatalogProvider(Protocol):
    """Contract for reflective access to enumerated types.

    Any object that implements these methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).  Implementations must be side-effect free and safe to
    call from several threads.
    """

    def get_catalog(self, enum_type: type[Enum]) -> ValueCatalog:
        """Return the value catalog of *enum_type* in declaration order.

        Raises
        ------
        EnumTypeError
            When *enum_type* is not an enumerated type.
        CatalogError
            When a member value cannot be read as an unsigned integer.
        """
        ...  # pragma: no cover

    def is_flags(self, enum_type: type[Enum]) -> bool:
        """Return whether *enum_type* is marked as flag-combinable."""
        ...  # pragma: no cover

    def get_member(self, enum_type: type[Enum], name: str) -> Enum:
        """Return the member of *enum_type* declared as *name*.

        Aliases resolve to their canonical member.

        Raises
        ------
        EnumTypeError
            When *name* is not declared on *enum_type*.
        """
        ...  # pragma: no cover


class DescriptionProvider(Protocol):
    """Contract for turning a single member into display text."""

    def describe(self, member: Enum, *, split_flags: bool = False) -> str:
        """Return a human-readable description of *member*.

        Parameters
        ----------
        member:
            A member (or combined flag value) of an enumerated type.
        split_flags:
            When true and the member combines several flags, describe
            each constituent flag instead of the combination.
        """
        ...  # pragma: no cover
