"""Tests for fixed-layout string decoding."""

from __future__ import annotations

import logging

import pytest

from utctime._internal.parsing import parse_integer
from utctime.core import BrokenDownTime
from utctime.errors import (
    FieldParseError,
    LengthMismatchError,
    MissingArgumentError,
    ParseError,
    UtcTimeError,
)
from utctime.format import ENCODED_LENGTH, FIELDS, decode, decode_fields


class TestLayout:
    """Tests for the field table."""

    def test_expected_length(self) -> None:
        """Layout adds up to 24 characters."""
        assert ENCODED_LENGTH == 24

    def test_field_offsets(self) -> None:
        """Offsets account for the separator widths."""
        assert [(f.name, f.offset, f.width) for f in FIELDS] == [
            ("year", 0, 4),
            ("month", 5, 2),
            ("day", 8, 2),
            ("hour", 11, 2),
            ("minute", 14, 2),
            ("second", 17, 2),
        ]

    def test_extract(self) -> None:
        """Each field slices its own characters."""
        text = "2017-08-03T19:53:14+0000"
        assert [f.extract(text) for f in FIELDS] == ["2017", "08", "03", "19", "53", "14"]


class TestParseInteger:
    """Tests for parse_integer."""

    @pytest.mark.parametrize(("text", "expected"), [("0", 0), ("08", 8), ("2017", 2017)])
    def test_digits(self, text: str, expected: int) -> None:
        """Plain ASCII digits parse."""
        assert parse_integer(text) == expected

    @pytest.mark.parametrize("text", ["", "AB", "0A", " 8", "8 ", "-1", "+1", "1_0", "١٢"])
    def test_rejects_non_numeric(self, text: str) -> None:
        """Anything other than ASCII digits is rejected."""
        assert parse_integer(text) is None


class TestDecode:
    """Tests for decode."""

    def test_reference_value(self) -> None:
        """A well-formed string decodes to its epoch value."""
        assert decode("2017-08-03T19:53:14+0000") == 1501789994

    def test_epoch(self) -> None:
        """The epoch itself decodes to zero."""
        assert decode("1970-01-01T00:00:00+0000") == 0

    def test_pre_epoch(self) -> None:
        """Dates before 1970 decode to negative values."""
        assert decode("1969-12-31T23:59:59+0000") == -1
        assert decode("1900-01-01T00:00:00+0000") == -2208988800

    def test_leap_day(self) -> None:
        """February 29th in a leap year."""
        assert decode("2000-02-29T00:00:00+0000") == 951782400

    def test_postfix_is_not_interpreted(self) -> None:
        """Any 5-character postfix gives the same result."""
        expected = decode("2017-08-03T19:53:14+0000")
        assert decode("2017-08-03T19:53:14-0800") == expected
        assert decode("2017-08-03T19:53:14+0530") == expected
        assert decode("2017-08-03T19:53:14XXXXX") == expected

    def test_separators_are_not_inspected(self) -> None:
        """Separator characters are skipped by offset."""
        assert decode("2017/08/03 19.53.14+0000") == 1501789994

    def test_decode_fields(self) -> None:
        """decode_fields returns the UTC fields with is_dst False."""
        assert decode_fields("2017-08-03T19:53:14+0000") == BrokenDownTime(
            2017, 8, 3, 19, 53, 14, is_dst=False
        )


class TestDecodeErrors:
    """Failure kinds raised by decode."""

    def test_missing_postfix(self) -> None:
        """A string without the postfix is a length mismatch."""
        with pytest.raises(LengthMismatchError) as exc_info:
            decode("2017-08-03T19:53:14")
        assert exc_info.value.expected == 24
        assert exc_info.value.actual == 19
        assert exc_info.value.error_code == "LengthMismatch"

    @pytest.mark.parametrize(
        "text",
        ["", "2017-08-03T19:53:14+00000", "2017-08-03T19:53:14.000+0000"],
    )
    def test_wrong_lengths(self, text: str) -> None:
        """Any length other than 24 is rejected before parsing."""
        with pytest.raises(LengthMismatchError):
            decode(text)

    def test_non_numeric_month(self) -> None:
        """Letters in the month field fail with the field named."""
        with pytest.raises(FieldParseError) as exc_info:
            decode("2017-AB-03T19:53:14+0000")
        assert exc_info.value.field == "month"
        assert exc_info.value.text == "AB"
        assert exc_info.value.error_code == "FieldParseError"

    @pytest.mark.parametrize(
        ("text", "field"),
        [
            ("20X7-08-03T19:53:14+0000", "year"),
            ("2017-08- 3T19:53:14+0000", "day"),
            ("2017-08-03T-9:53:14+0000", "hour"),
            ("2017-08-03T19:5a:14+0000", "minute"),
            ("2017-08-03T19:53:1 +0000", "second"),
        ],
    )
    def test_each_field_is_checked(self, text: str, field: str) -> None:
        """Every field reports its own name."""
        with pytest.raises(FieldParseError) as exc_info:
            decode(text)
        assert exc_info.value.field == field

    def test_error_kinds_are_distinct(self) -> None:
        """Length and field failures are different classes sharing ParseError."""
        assert not issubclass(LengthMismatchError, FieldParseError)
        assert not issubclass(FieldParseError, LengthMismatchError)
        assert issubclass(LengthMismatchError, ParseError)
        assert issubclass(FieldParseError, ParseError)
        assert issubclass(ParseError, UtcTimeError)

    def test_none(self) -> None:
        """None is a missing argument, not a length mismatch."""
        with pytest.raises(MissingArgumentError) as exc_info:
            decode(None)  # type: ignore[arg-type]
        assert exc_info.value.error_code == "NullOutputParameter"

    def test_wrong_type(self) -> None:
        """Bytes are rejected with TypeError."""
        with pytest.raises(TypeError):
            decode(b"2017-08-03T19:53:14+0000")  # type: ignore[arg-type]

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """A decode failure emits one error record."""
        with caplog.at_level(logging.ERROR, logger="utctime.format.decoder"):
            with pytest.raises(LengthMismatchError):
                decode("short")
        assert len(caplog.records) == 1
        assert "convert_iso8601_to_unix_failed" in caplog.records[0].getMessage()
