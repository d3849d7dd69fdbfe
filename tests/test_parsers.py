"""Input parser tests."""

import pytest

from timestamp_converter_cli.errors import FormatError
from timestamp_converter_cli.models import Instant
from timestamp_converter_cli.parsers import (
    PARSERS,
    detect_unix_unit,
    parse_auto_unix,
    parse_rfc3339,
    parse_rfc3339_nano,
    parse_unix_seconds,
)

JUNE_FIRST = 1717245296  # 2024-06-01T12:34:56Z


@pytest.mark.parametrize(
    ("fmt", "value", "expected"),
    [
        ("rfc3339", "2024-06-01T12:34:56Z", Instant.from_unix(JUNE_FIRST)),
        ("rfc3339nano", "2024-06-01T12:34:56.123456789Z", Instant.from_unix(JUNE_FIRST, 123456789)),
        ("rfc3339nano", "2024-06-01T12:34:56Z", Instant.from_unix(JUNE_FIRST)),
        ("unix", "1748705359", Instant.from_unix(1748705359)),
        ("unixms", "1748705359000", Instant.from_unix(1748705359)),
        ("unixus", "1748705359000000", Instant.from_unix(1748705359)),
        ("unixns", "1748705359000000000", Instant.from_unix(1748705359)),
        ("autounix", "1748705359", Instant.from_unix(1748705359)),
        ("autounix", "1748705359000", Instant.from_unix(1748705359)),
        ("autounix", "1748705359000000", Instant.from_unix(1748705359)),
        ("autounix", "1748705359000000000", Instant.from_unix(1748705359)),
    ],
)
def test_parsers(fmt, value, expected):
    assert PARSERS[fmt](value) == expected


@pytest.mark.parametrize(
    ("fmt", "value"),
    [
        ("rfc3339nano", "invalid"),
        ("unix", "notanumber"),
        ("autounix", "notanumber"),
        ("unixms", ""),
        ("unixus", "1.5"),
        ("unixns", " 42"),
    ],
)
def test_parsers_reject_malformed_input(fmt, value):
    with pytest.raises(FormatError) as excinfo:
        PARSERS[fmt](value)
    assert excinfo.value.format_name == fmt
    assert excinfo.value.text == value


def test_parser_table_is_read_only():
    with pytest.raises(TypeError):
        PARSERS["bogus"] = parse_unix_seconds


class TestRfc3339:
    def test_offset_is_normalized_to_utc(self):
        assert parse_rfc3339("2024-06-01T14:34:56+02:00") == Instant.from_unix(JUNE_FIRST)
        assert parse_rfc3339("2024-06-01T07:04:56-05:30") == Instant.from_unix(JUNE_FIRST)

    def test_nanosecond_component_is_exact(self):
        assert parse_rfc3339_nano("2024-06-01T12:34:56.123456789Z").nanosecond == 123456789

    def test_short_fraction_is_zero_filled(self):
        assert parse_rfc3339_nano("2024-06-01T12:34:56.5Z").nanosecond == 500_000_000

    def test_fraction_beyond_nanoseconds_is_truncated(self):
        assert parse_rfc3339_nano("2024-06-01T12:34:56.1234567899Z").nanosecond == 123456789

    def test_rfc3339_also_accepts_fraction(self):
        assert parse_rfc3339("2024-06-01T12:34:56.25Z").nanosecond == 250_000_000

    def test_offset_crossing_date_line(self):
        instant = parse_rfc3339("2024-01-01T00:30:00+01:00")
        assert str(instant) == "2023-12-31T23:30:00.000000000Z"

    @pytest.mark.parametrize(
        "value",
        [
            "2024-06-01 12:34:56Z",
            "2024-06-01t12:34:56z",
            "2024-06-01T12:34:56",
            "2024-06-01T12:34Z",
            "2024-6-1T12:34:56Z",
            "2024-13-01T00:00:00Z",
            "2024-02-30T00:00:00Z",
            "2024-06-01T24:00:00Z",
            "2024-06-01T12:34:60Z",
            "2024-06-01T12:34:56+24:00",
            "2024-06-01T12:34:56+01:60",
            "2024-06-01T12:34:56+0100",
            "2024-06-01T12:34:56.Z",
            " 2024-06-01T12:34:56Z",
        ],
    )
    def test_rejects_malformed(self, value):
        with pytest.raises(FormatError):
            parse_rfc3339(value)

    def test_year_zero_is_accepted(self):
        assert parse_rfc3339("0000-01-01T00:00:00Z").seconds == -62167219200

    def test_offset_can_cross_into_year_zero(self):
        instant = parse_rfc3339("0001-01-01T00:00:00+01:00")
        assert instant.seconds == -62135596800 - 3600
        assert str(instant) == "0000-12-31T23:00:00.000000000Z"

    def test_year_9999_with_negative_offset_reaches_year_10000(self):
        assert str(parse_rfc3339("9999-12-31T23:00:00-01:00")) == "10000-01-01T00:00:00.000000000Z"


class TestUnixSeconds:
    def test_signs(self):
        assert parse_unix_seconds("+42") == Instant.from_unix(42)
        assert parse_unix_seconds("-1") == Instant.from_unix(-1)
        assert str(parse_unix_seconds("-1")) == "1969-12-31T23:59:59.000000000Z"

    def test_rejects_underscores(self):
        with pytest.raises(FormatError):
            parse_unix_seconds("1_000")

    def test_rejects_values_outside_int64(self):
        with pytest.raises(FormatError):
            parse_unix_seconds("9223372036854775808")

    def test_calendar_bounds(self):
        assert str(parse_unix_seconds("-62135596800")) == "0001-01-01T00:00:00.000000000Z"
        assert str(parse_unix_seconds("253402300799")) == "9999-12-31T23:59:59.000000000Z"

    def test_past_year_9999(self):
        assert str(parse_unix_seconds("253402300800")) == "10000-01-01T00:00:00.000000000Z"

    def test_before_year_zero(self):
        assert str(parse_unix_seconds("-62167219201")) == "-0001-12-31T23:59:59.000000000Z"

    @pytest.mark.parametrize("value", ["9223372036854775807", "-9223372036854775808"])
    def test_int64_extremes_are_accepted(self, value):
        assert parse_unix_seconds(value).seconds == int(value)


class TestAutoUnix:
    @pytest.mark.parametrize(
        ("value", "expected_nanos"),
        [
            ("99999999999", 99999999999 * 10**9),
            ("100000000000", 100000000000 * 10**6),
            ("99999999999999", 99999999999999 * 10**6),
            ("100000000000000", 100000000000000 * 10**3),
            ("99999999999999999", 99999999999999999 * 10**3),
            ("100000000000000000", 100000000000000000),
        ],
    )
    def test_thresholds(self, value, expected_nanos):
        assert parse_auto_unix(value).unix_nanos == expected_nanos

    def test_negative_values_use_magnitude(self):
        assert parse_auto_unix("-100000000000").unix_nanos == -100000000000 * 10**6
        assert parse_auto_unix("-9999999999").unix_nanos == -9999999999 * 10**9

    def test_detect_unit(self):
        assert detect_unix_unit(0) == 10**9
        assert detect_unix_unit(10**11) == 10**6
        assert detect_unix_unit(10**14) == 10**3
        assert detect_unix_unit(10**17) == 1
