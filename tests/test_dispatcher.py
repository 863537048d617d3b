"""Tests for the token dispatcher (core/dispatcher.py).

No filesystem access: positional tokens come back verbatim.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import RecordingLogger
from pano_cli.core.dispatcher import dispatch_tokens
from pano_cli.core.models import Args, MatchingType, ProjectionType, WaveCorrectionType


def _record(tokens: list[str], logger: RecordingLogger) -> Args:
    args, _ = dispatch_tokens(tokens, logger)
    return args


def _positionals(tokens: list[str], logger: RecordingLogger) -> list[str]:
    _, positionals = dispatch_tokens(tokens, logger)
    return positionals


# ---------------------------------------------------------------------------
# Boolean flags
# ---------------------------------------------------------------------------

class TestBooleanFlags:
    def test_no_tokens_gives_defaults(self, logger: RecordingLogger) -> None:
        assert _record([], logger) == Args()

    @pytest.mark.parametrize(
        ("token", "field"),
        [("--gui", "run_gui"), ("--help", "print_help"), ("--version", "print_version")],
    )
    def test_sets_field(self, logger: RecordingLogger, token: str, field: str) -> None:
        args = _record([token], logger)
        assert getattr(args, field) is True

    def test_copy_metadata_pair_last_wins(self, logger: RecordingLogger) -> None:
        assert _record(["--copy-metadata"], logger).copy_metadata is True
        assert _record(["--no-copy-metadata"], logger).copy_metadata is False
        args = _record(["--copy-metadata", "--no-copy-metadata"], logger)
        assert args.copy_metadata is False

    def test_flags_are_case_sensitive(self, logger: RecordingLogger) -> None:
        args, positionals = dispatch_tokens(["--GUI"], logger)
        assert args.run_gui is False
        assert positionals == ["--GUI"]


# ---------------------------------------------------------------------------
# Value flags
# ---------------------------------------------------------------------------

class TestValueFlags:
    def test_all_value_flags(self, logger: RecordingLogger) -> None:
        args = _record(
            [
                "--output=out/pano.jpg",
                "--projection=panini",
                "--matching-type=single",
                "--match-threshold=10",
                "--min-shift=0.2",
                "--jpeg-quality=90",
                "--png-compression=5",
                "--wave-correction=horizontal",
                "--max-pano-mpx=200",
            ],
            logger,
        )
        assert args.output_path == Path("out/pano.jpg")
        assert args.projection is ProjectionType.PANINI
        assert args.matching_type is MatchingType.SINGLE_PANO
        assert args.match_threshold == 10
        assert args.min_shift == pytest.approx(0.2)
        assert args.jpeg_quality == 90
        assert args.png_compression == 5
        assert args.wave_correction is WaveCorrectionType.HORIZONTAL
        assert args.max_pano_mpx == 200
        assert args.input_paths == ()
        assert _positionals(["--max-pano-mpx=200"], logger) == []
        assert logger.records == []

    @pytest.mark.parametrize(
        ("token", "field"),
        [
            ("--projection=globe", "projection"),
            ("--wave-correction=diagonal", "wave_correction"),
            ("--match-threshold=ten", "match_threshold"),
            ("--min-shift=0.1.1", "min_shift"),
            ("--jpeg-quality=9O", "jpeg_quality"),
            ("--png-compression=", "png_compression"),
            ("--max-pano-mpx=1e3", "max_pano_mpx"),
        ],
    )
    def test_unparseable_values_are_silent(
        self, logger: RecordingLogger, token: str, field: str,
    ) -> None:
        args = _record([token], logger)
        assert getattr(args, field) is None
        assert logger.records == []

    def test_invalid_matching_type_warns(self, logger: RecordingLogger) -> None:
        args = _record(["--matching-type=bogus"], logger)
        assert args.matching_type is None
        assert len(logger.warnings) == 1
        warning = logger.warnings[0]
        assert "'bogus'" in warning
        assert "auto, single, none" in warning

    def test_zero_is_kept_as_a_value(self, logger: RecordingLogger) -> None:
        args = _record(["--match-threshold=0", "--jpeg-quality=0"], logger)
        assert args.match_threshold == 0
        assert args.jpeg_quality == 0

    def test_later_flag_overrides_earlier(self, logger: RecordingLogger) -> None:
        args = _record(["--jpeg-quality=80", "--jpeg-quality=70"], logger)
        assert args.jpeg_quality == 70

    def test_later_invalid_value_unsets_field(self, logger: RecordingLogger) -> None:
        args = _record(["--projection=fisheye", "--projection=nope"], logger)
        assert args.projection is None

    def test_bad_value_does_not_stop_later_tokens(self, logger: RecordingLogger) -> None:
        tokens = ["--jpeg-quality=x", "--png-compression=3", "a.jpg"]
        args, positionals = dispatch_tokens(tokens, logger)
        assert args.jpeg_quality is None
        assert args.png_compression == 3
        assert positionals == ["a.jpg"]

    def test_flag_without_equals_is_positional(self, logger: RecordingLogger) -> None:
        args, positionals = dispatch_tokens(["--jpeg-quality", "90"], logger)
        assert args.jpeg_quality is None
        assert positionals == ["--jpeg-quality", "90"]


# ---------------------------------------------------------------------------
# Positional paths
# ---------------------------------------------------------------------------

class TestPositionals:
    def test_encounter_order_and_duplicates_kept(self, logger: RecordingLogger) -> None:
        args, positionals = dispatch_tokens(["b.jpg", "--gui", "a.jpg", "b.jpg"], logger)
        assert positionals == ["b.jpg", "a.jpg", "b.jpg"]
        assert args.run_gui is True
        assert args.input_paths == ()

    def test_unknown_flag_is_positional(self, logger: RecordingLogger) -> None:
        assert _positionals(["--verbose"], logger) == ["--verbose"]

    def test_tokens_are_not_normalized(self, logger: RecordingLogger) -> None:
        assert _positionals(["", "./b.jpg", "a//c.jpg"], logger) == ["", "./b.jpg", "a//c.jpg"]
