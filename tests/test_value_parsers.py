"""Tests for typed value parsers and enum resolvers (core/value_parsers.py).

Every test is a pure function call — no I/O, no mocking.
"""

from __future__ import annotations

import math

import pytest

from pano_cli.core.models import MatchingType, ProjectionType, WaveCorrectionType
from pano_cli.core.value_parsers import (
    MATCHING_TYPES,
    PROJECTION_TYPES,
    WAVE_CORRECTION_TYPES,
    literals,
    parse_float,
    parse_int,
    resolve_matching_type,
    resolve_projection,
    resolve_wave_correction,
)


# ---------------------------------------------------------------------------
# parse_int
# ---------------------------------------------------------------------------

class TestParseInt:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", 0), ("42", 42), ("-3", -3), ("007", 7), ("5000", 5000)],
    )
    def test_accepts_whole_integers(self, text: str, expected: int) -> None:
        assert parse_int(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "12abc", "1.5", " 7", "7 ", "+7", "1_000", "abc", "-", "0x10", "١٢"],
    )
    def test_rejects_partial_or_foreign_input(self, text: str) -> None:
        assert parse_int(text) is None

    def test_32_bit_bounds_inclusive(self) -> None:
        assert parse_int("2147483647") == 2**31 - 1
        assert parse_int("-2147483648") == -(2**31)

    @pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
    def test_outside_32_bit_range_is_none(self, text: str) -> None:
        assert parse_int(text) is None


# ---------------------------------------------------------------------------
# parse_float
# ---------------------------------------------------------------------------

class TestParseFloat:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0.1", 0.1), ("1", 1.0), ("-0.5", -0.5), ("1e-2", 0.01), (".25", 0.25)],
    )
    def test_accepts_float_literals(self, text: str, expected: float) -> None:
        assert parse_float(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "  ", "0.1x", "abc", "0.1 ", "1_0.5", "1.2.3"])
    def test_rejects_invalid_input(self, text: str) -> None:
        assert parse_float(text) is None

    def test_leading_whitespace_allowed(self) -> None:
        assert parse_float(" 0.5") == pytest.approx(0.5)

    @pytest.mark.parametrize("text", ["1e50", "-1e50", "3.5e38", "1e400"])
    def test_beyond_single_precision_is_none(self, text: str) -> None:
        assert parse_float(text) is None

    def test_largest_single_precision_value_kept(self) -> None:
        assert parse_float("3.4e38") == pytest.approx(3.4e38)

    def test_spelled_out_infinity_kept(self) -> None:
        value = parse_float("-inf")
        assert value is not None
        assert math.isinf(value)

    def test_nan_parses_but_is_not_finite(self) -> None:
        value = parse_float("nan")
        assert value is not None
        assert math.isnan(value)


# ---------------------------------------------------------------------------
# Enum resolvers
# ---------------------------------------------------------------------------

class TestResolvers:
    def test_rectilinear_maps_to_compressed_rectilinear(self) -> None:
        assert resolve_projection("rectilinear") is ProjectionType.COMPRESSED_RECTILINEAR

    def test_single_maps_to_single_pano(self) -> None:
        assert resolve_matching_type("single") is MatchingType.SINGLE_PANO

    def test_wave_correction_literal(self) -> None:
        assert resolve_wave_correction("vertical") is WaveCorrectionType.VERTICAL

    @pytest.mark.parametrize("text", ["", "Spherical", "compressed-rectilinear", "sphere"])
    def test_unknown_projection_is_none(self, text: str) -> None:
        assert resolve_projection(text) is None

    def test_unknown_matching_type_is_none(self) -> None:
        assert resolve_matching_type("bogus") is None

    def test_unknown_wave_correction_is_none(self) -> None:
        assert resolve_wave_correction("diagonal") is None

    def test_tables_cover_every_variant(self) -> None:
        assert set(PROJECTION_TYPES.values()) == set(ProjectionType)
        assert set(MATCHING_TYPES.values()) == set(MatchingType)
        assert set(WAVE_CORRECTION_TYPES.values()) == set(WaveCorrectionType)

    def test_literals_rendering(self) -> None:
        assert literals(MATCHING_TYPES) == "auto, single, none"
