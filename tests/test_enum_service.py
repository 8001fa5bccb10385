"""Tests for the core enum service (core/enum_service.py).

The real Python-enum providers are used — they are pure and need no
mocking — except where a provider failure must be simulated.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from enum_inspect.core.enum_service import EnumService, is_enum_type
from enum_inspect.core.models import NO_NAMED_ZERO, EnumValue, ResidualBits
from enum_inspect.exceptions import CatalogError, CoercionError, EnumTypeError
from sample_enums import Access, Color, Level, Mixed, Named, Overlap, Permission, Wide


# ---------------------------------------------------------------------------
# get_flag_list / get_flag_members
# ---------------------------------------------------------------------------

class TestGetFlagList:
    def test_scenario_read_execute(self, service: EnumService) -> None:
        result = service.get_flag_list(Permission, 5)
        assert result.names == ("EXECUTE", "READ")
        assert result.residual is None

    def test_scenario_unknown_bit(self, service: EnumService) -> None:
        assert service.get_flag_list(Permission, 8).entries == (ResidualBits(8),)

    def test_scenario_zero(self, service: EnumService) -> None:
        assert service.get_flag_list(Permission, 0).entries == (EnumValue("NONE", 0),)

    def test_scenario_overlap(self, service: EnumService) -> None:
        assert service.get_flag_list(Overlap, 3).names == ("C", "B")

    def test_no_named_zero(self, service: EnumService) -> None:
        assert service.get_flag_list(Color, 0).entries == (NO_NAMED_ZERO,)

    def test_accepts_members_and_strings(self, service: EnumService) -> None:
        combined = Permission.READ | Permission.WRITE
        assert service.get_flag_list(Permission, combined).names == ("WRITE", "READ")
        assert service.get_flag_list(Permission, "0x6").names == ("EXECUTE", "WRITE")

    def test_alias_declared_later_wins(self, service: EnumService) -> None:
        assert service.get_flag_list(Level, 3).names == ("HIGH", "MINIMUM")

    @pytest.mark.parametrize("value", [-1, "lots", 2**64, None])
    def test_coercion_failure_surfaces(self, service: EnumService, value: object) -> None:
        with pytest.raises(CoercionError):
            service.get_flag_list(Permission, value)

    def test_non_enum_type(self, service: EnumService) -> None:
        with pytest.raises(EnumTypeError):
            service.get_flag_list(int, 1)  # type: ignore[arg-type]


class TestGetFlagMembers:
    def test_members(self, service: EnumService) -> None:
        assert service.get_flag_members(Permission, 5) == [
            Permission.EXECUTE,
            Permission.READ,
        ]

    def test_absent_zero_is_none(self, service: EnumService) -> None:
        assert service.get_flag_members(Color, 0) == [None]

    def test_int_flag_keeps_residual_as_member(self, service: EnumService) -> None:
        members = service.get_flag_members(Permission, 9)
        assert members[0] is Permission.READ
        assert isinstance(members[1], Permission)
        assert int(members[1]) == 8

    def test_plain_enum_residual_stays_residual(self, service: EnumService) -> None:
        assert service.get_flag_members(Color, 8) == [ResidualBits(8)]

    def test_alias_maps_to_canonical_member(self, service: EnumService) -> None:
        assert service.get_flag_members(Level, 1) == [Level.LOW]


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

class TestListing:
    def test_enum_list(self, service: EnumService) -> None:
        assert service.get_enum_list(Level) == [Level.LOW, Level.LOW, Level.HIGH]

    def test_names(self, service: EnumService) -> None:
        assert service.get_enum_names(Color) == ["RED", "GREEN", "BLUE"]

    def test_values(self, service: EnumService) -> None:
        assert service.get_values(Permission) == [0, 1, 2, 4]

    def test_int_values_signed(self, service: EnumService) -> None:
        assert service.get_int_values(Wide, 32) == [1, -1]

    def test_int_values_unsigned(self, service: EnumService) -> None:
        assert service.get_int_values(Wide, 32, signed=False) == [1, 0xFFFFFFFF]

    def test_int_values_overflow(self, service: EnumService) -> None:
        with pytest.raises(CoercionError, match="does not fit in 16 bits"):
            service.get_int_values(Wide, 16)

    def test_int_values_bad_width(self, service: EnumService) -> None:
        with pytest.raises(CoercionError, match="Unsupported integer width"):
            service.get_int_values(Wide, 12)

    def test_string_values_rejected(self, service: EnumService) -> None:
        with pytest.raises(CatalogError):
            service.get_values(Named)


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------

class TestDescriptions:
    def test_descriptions(self, service: EnumService) -> None:
        assert service.get_descriptions(Access) == [
            "No access",
            "Read access",
            "Write access",
            "Execute access",
        ]

    def test_single_description(self, service: EnumService) -> None:
        combined = Access.WRITE | Access.EXECUTE
        assert service.get_description(combined, split_flags=True) == (
            "Execute access, Write access"
        )

    def test_delegates_to_provider(self) -> None:
        catalogs = MagicMock()
        describer = MagicMock()
        describer.describe.return_value = "text"
        svc = EnumService(catalogs, describer)

        assert svc.get_description(Color.RED, split_flags=True) == "text"
        describer.describe.assert_called_once_with(Color.RED, split_flags=True)


# ---------------------------------------------------------------------------
# Flag predicates
# ---------------------------------------------------------------------------

class TestFlagPredicates:
    def test_is_flags_enum(self, service: EnumService) -> None:
        assert service.is_flags_enum(Permission)
        assert not service.is_flags_enum(Color)

    @pytest.mark.parametrize("candidate", [int, None, "Permission", Permission.READ])
    def test_non_enum_is_not_flags(self, service: EnumService, candidate: object) -> None:
        assert service.is_flags_enum(candidate) is False

    def test_in_flags(self, service: EnumService) -> None:
        flags = Permission.READ | Permission.EXECUTE
        assert service.in_flags(flags, Permission.EXECUTE)
        assert not service.in_flags(flags, Permission.WRITE)
        assert not service.in_flags(flags, Permission.NONE)

    def test_in_flags_never_raises(self, service: EnumService) -> None:
        assert service.in_flags(object(), Permission.READ) is False


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class TestParse:
    def test_parse_ignores_case(self, service: EnumService) -> None:
        assert service.parse(Permission, "write", Permission.NONE) is Permission.WRITE

    def test_unknown_name_returns_default(self, service: EnumService) -> None:
        assert service.parse(Color, "purple", Color.RED) is Color.RED

    def test_default_returned_unchanged(self, service: EnumService) -> None:
        sentinel = object()
        assert service.parse(Color, "purple", sentinel) is sentinel

    def test_alias_resolves(self, service: EnumService) -> None:
        assert service.parse(Level, "minimum") is Level.LOW

    def test_first_case_variant_wins(self, service: EnumService) -> None:
        assert service.parse(Mixed, "read") is Mixed.Read

    def test_non_enum_type_returns_default(self, service: EnumService) -> None:
        assert service.parse(int, "x", 7) == 7  # type: ignore[arg-type]

    def test_uncatalogable_type_returns_default(self, service: EnumService) -> None:
        assert service.parse(Named, "ALPHA", "fallback") == "fallback"

    def test_non_string_text_returns_default(self, service: EnumService) -> None:
        assert service.parse(Color, 1, Color.BLUE) is Color.BLUE


def test_is_enum_type() -> None:
    assert is_enum_type(Color)
    assert is_enum_type(Permission)
    assert not is_enum_type(Color.RED)
    assert not is_enum_type(int)
