# SPDX-License-Identifier: MIT
"""Tests for metadata part parsing and ordering."""

import pytest

from semver_value import IdentifierPart, NumericPart, compare_parts, parse_part
from semver_value.parts import as_part, part_key


class TestParsePart:
    """Tests for parse_part function."""

    def test_numeric(self):
        assert parse_part("42") == NumericPart(42)

    def test_leading_zeros(self):
        assert parse_part("007") == NumericPart(7)

    def test_identifier(self):
        assert parse_part("alpha") == IdentifierPart("alpha")

    def test_digits_then_letters(self):
        assert parse_part("1a") == IdentifierPart("1a")

    def test_negative_looking_field_is_identifier(self):
        assert parse_part("-1") == IdentifierPart("-1")

    def test_colon(self):
        assert parse_part("sha:1f2e") == IdentifierPart("sha:1f2e")

    @pytest.mark.parametrize("text", ["", "a.b", "a_b", "a b", "é"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_part(text)

    def test_overflow(self):
        with pytest.raises(OverflowError):
            parse_part("2147483648")

    def test_custom_max_value(self):
        assert parse_part("255", max_value=255) == NumericPart(255)
        with pytest.raises(OverflowError):
            parse_part("256", max_value=255)

    def test_str(self):
        assert str(parse_part("007")) == "7"
        assert str(parse_part("rc-1")) == "rc-1"


class TestPartConstruction:
    """Tests for direct part construction and coercion."""

    def test_negative_numeric(self):
        with pytest.raises(ValueError):
            NumericPart(-1)

    def test_numeric_above_limit(self):
        with pytest.raises(ValueError):
            NumericPart(2**31)

    def test_as_part_int_above_limit(self):
        with pytest.raises(ValueError):
            as_part(2**31)

    def test_bool_numeric(self):
        with pytest.raises(TypeError):
            NumericPart(True)  # type: ignore

    def test_numeric_identifier(self):
        with pytest.raises(ValueError):
            IdentifierPart("123")

    def test_empty_identifier(self):
        with pytest.raises(ValueError):
            IdentifierPart("")

    def test_as_part(self):
        assert as_part(3) == NumericPart(3)
        assert as_part("3") == NumericPart(3)
        assert as_part("rc") == IdentifierPart("rc")
        part = IdentifierPart("x")
        assert as_part(part) is part

    def test_as_part_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_part(1.5)  # type: ignore
        with pytest.raises(TypeError):
            as_part(False)  # type: ignore


class TestCompareParts:
    """Tests for compare_parts and part_key."""

    @pytest.mark.parametrize(
        "left,right",
        [
            ("1", "2"),
            ("2", "10"),
            ("alpha", "beta"),
            ("Zeta", "alpha"),
            ("rc10", "rc9"),
            ("1", "alpha"),
            ("1", ":x"),
            ("-x", "0"),
            ("-x", "alpha"),
            ("2", "1a"),
            ("10", "1a"),
            ("1a", "alpha"),
        ],
    )
    def test_less_than(self, left, right):
        a, b = parse_part(left), parse_part(right)
        assert compare_parts(a, b) == -1
        assert compare_parts(b, a) == 1
        assert part_key(a) < part_key(b)

    def test_equal(self):
        assert compare_parts(parse_part("01"), parse_part("1")) == 0
        assert compare_parts(parse_part("rc"), parse_part("rc")) == 0
        assert part_key(parse_part("01")) == part_key(parse_part("1"))
