"""Tests for millisecond time point encoding."""

from __future__ import annotations

import datetime as _datetime

import pytest

from utctime.core import BrokenDownTime
from utctime.errors import CalendarLookupError, FormatError, MissingArgumentError
from utctime.format import Iso8601Encoder
from utctime.format.encoder import ENCODED_OUTPUT_LENGTH, format_date_time, to_epoch_millis
from utctime.system import SafeCalendarAccess


@pytest.fixture
def encoder() -> Iso8601Encoder:
    return Iso8601Encoder(SafeCalendarAccess())


class TestEncode:
    """Tests for Iso8601Encoder.encode with the platform calendar."""

    def test_epoch(self, encoder: Iso8601Encoder) -> None:
        """Zero milliseconds is the epoch."""
        assert encoder.encode(0) == "1970-01-01T00:00:00.000Z"

    def test_millisecond_padding(self, encoder: Iso8601Encoder) -> None:
        """Milliseconds are always three digits."""
        assert encoder.encode(1005) == "1970-01-01T00:00:01.005Z"
        assert encoder.encode(1050) == "1970-01-01T00:00:01.050Z"
        assert encoder.encode(1999) == "1970-01-01T00:00:01.999Z"

    def test_reference_value(self, encoder: Iso8601Encoder) -> None:
        """A recent instant."""
        assert encoder.encode(1501789994123) == "2017-08-03T19:53:14.123Z"

    def test_leap_day(self, encoder: Iso8601Encoder) -> None:
        """February 29th 2000."""
        assert encoder.encode(951782400000) == "2000-02-29T00:00:00.000Z"

    def test_negative_millis_borrow_from_seconds(self, encoder: Iso8601Encoder) -> None:
        """Pre-epoch remainders are non-negative with a borrow."""
        assert encoder.encode(-1) == "1969-12-31T23:59:59.999Z"
        assert encoder.encode(-1000) == "1969-12-31T23:59:59.000Z"
        assert encoder.encode(-1001) == "1969-12-31T23:59:58.999Z"

    def test_output_length(self, encoder: Iso8601Encoder) -> None:
        """Successful output is always 24 characters."""
        for millis in (0, 7, 86_399_999, 1501789994123, 253402300799999):
            assert len(encoder.encode(millis)) == ENCODED_OUTPUT_LENGTH == 24

    def test_last_representable_instant(self, encoder: Iso8601Encoder) -> None:
        """9999-12-31T23:59:59.999Z still fits the layout."""
        assert encoder.encode(253402300799999) == "9999-12-31T23:59:59.999Z"

    def test_aware_datetime(self, encoder: Iso8601Encoder) -> None:
        """Aware datetimes are converted to UTC; microseconds truncated."""
        dt = _datetime.datetime(
            2017, 8, 3, 21, 53, 14, 123999,
            tzinfo=_datetime.timezone(_datetime.timedelta(hours=2)),
        )
        assert encoder.encode(dt) == "2017-08-03T19:53:14.123Z"


class TestEncodeErrors:
    """Failure kinds raised by the encoder."""

    def test_calendar_lookup_failed(self, fake_calendar_access) -> None:
        """A None breakdown is a calendar lookup failure."""
        access = fake_calendar_access(None)
        with pytest.raises(CalendarLookupError) as exc_info:
            Iso8601Encoder(access).encode(5000)
        assert exc_info.value.seconds == 5
        assert exc_info.value.error_code == "CalendarLookupFailed"
        assert access.requests == [5]

    def test_platform_out_of_range(self, encoder: Iso8601Encoder) -> None:
        """Values beyond a 64-bit counter fail the lookup."""
        with pytest.raises(CalendarLookupError):
            encoder.encode(10**25)

    def test_five_digit_year(self, fake_calendar_access) -> None:
        """A year past 9999 cannot be formatted in the fixed layout."""
        access = fake_calendar_access(BrokenDownTime(10000, 1, 1))
        with pytest.raises(FormatError) as exc_info:
            Iso8601Encoder(access).encode(0)
        assert exc_info.value.error_code == "FormatError"

    def test_negative_year(self, fake_calendar_access) -> None:
        """A negative year keeps the length but not the layout."""
        access = fake_calendar_access(BrokenDownTime(-1, 1, 1))
        with pytest.raises(FormatError):
            Iso8601Encoder(access).encode(0)

    @pytest.mark.parametrize(
        "time_point",
        [
            _datetime.datetime(1, 1, 1, tzinfo=_datetime.timezone(_datetime.timedelta(hours=1))),
            _datetime.datetime(
                9999, 12, 31, 23, 30, tzinfo=_datetime.timezone(_datetime.timedelta(hours=-1))
            ),
        ],
    )
    def test_datetime_shifted_out_of_range(
        self, encoder: Iso8601Encoder, time_point: _datetime.datetime
    ) -> None:
        """An offset that moves the instant past year 1 or 9999 is a FormatError."""
        with pytest.raises(FormatError) as exc_info:
            encoder.encode(time_point)
        assert isinstance(exc_info.value.__cause__, OverflowError)

    def test_none(self, encoder: Iso8601Encoder) -> None:
        """None is a missing argument."""
        with pytest.raises(MissingArgumentError):
            encoder.encode(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [True, 1.5, "0"])
    def test_wrong_type(self, encoder: Iso8601Encoder, value: object) -> None:
        """Bools, floats and strings are rejected."""
        with pytest.raises(TypeError):
            encoder.encode(value)  # type: ignore[arg-type]

    def test_naive_datetime(self, encoder: Iso8601Encoder) -> None:
        """Naive datetimes have no UTC instant."""
        with pytest.raises(ValueError):
            encoder.encode(_datetime.datetime(2017, 8, 3))

    def test_missing_calendar_access(self) -> None:
        """An encoder needs a calendar access."""
        with pytest.raises(MissingArgumentError):
            Iso8601Encoder(None)  # type: ignore[arg-type]


class TestHelpers:
    """Tests for format_date_time and to_epoch_millis."""

    def test_format_date_time_pads(self) -> None:
        """Fields are zero padded to 4/2/2/2/2/2 digits."""
        assert format_date_time(BrokenDownTime(33, 1, 2, 3, 4, 5)) == "0033-01-02T03:04:05"

    def test_to_epoch_millis_int_passthrough(self) -> None:
        """Integers are returned unchanged."""
        assert to_epoch_millis(-42) == -42

    def test_to_epoch_millis_utc_datetime(self) -> None:
        """UTC datetimes use integer arithmetic."""
        dt = _datetime.datetime(1969, 12, 31, 23, 59, 59, 999000, tzinfo=_datetime.timezone.utc)
        assert to_epoch_millis(dt) == -1
