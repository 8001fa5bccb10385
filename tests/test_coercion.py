"""Tests for unsigned 64-bit coercion (core/coercion.py)."""

from __future__ import annotations

from enum import Enum

import pytest

from enum_inspect.core.coercion import UINT64_MAX, coerce_uint64, try_coerce_uint64
from enum_inspect.exceptions import CoercionError
from sample_enums import Color, Permission


class TestTryCoerce:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (0, 0),
            (5, 5),
            (True, 1),
            (UINT64_MAX, UINT64_MAX),
            ("12", 12),
            (" 0x10 ", 16),
            ("0b101", 5),
            ("0o17", 15),
            ("1_000", 1000),
            ("010", 10),
            ("08", 8),
            (Permission.WRITE, 2),
            (Permission.READ | Permission.EXECUTE, 5),
            (Color.BLUE, 4),
        ],
    )
    def test_accepts(self, raw: object, expected: int) -> None:
        assert try_coerce_uint64(raw) == (True, expected)

    @pytest.mark.parametrize(
        "raw",
        [-1, UINT64_MAX + 1, 1.0, 2.5, None, "", "abc", "-3", "0x", object(), [1]],
    )
    def test_rejects(self, raw: object) -> None:
        assert try_coerce_uint64(raw) == (False, 0)

    def test_string_valued_enum_member(self) -> None:
        class Word(Enum):
            ONE = "1"

        assert try_coerce_uint64(Word.ONE) == (True, 1)


class TestCoerce:
    def test_returns_number(self) -> None:
        assert coerce_uint64("0xff") == 255

    def test_raises_with_hint(self) -> None:
        with pytest.raises(CoercionError) as exc_info:
            coerce_uint64(-5)
        assert "-5" in str(exc_info.value)
        assert exc_info.value.hint is not None
