"""Utility helpers for the timestamp converter CLI."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, time

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

SECONDS_PER_DAY = 86_400
# The Gregorian calendar repeats every 400 years, which is this many days.
DAYS_PER_CYCLE = 146_097
EPOCH_ORDINAL = date(1970, 1, 1).toordinal()

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_RFC3339_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})"
)


@dataclass(frozen=True, slots=True)
class DateTimeFields:
    """An RFC 3339 date-time split into UTC epoch seconds and nanoseconds."""

    seconds: int
    nanosecond: int


def parse_int64(value: str) -> int:
    """Parse a base-10 signed integer that must fit in 64 bits.

    Only an optional sign followed by ASCII digits is accepted, unlike
    ``int()`` which also allows whitespace and underscores.
    """
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError(f"invalid integer {value!r}")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"integer {value!r} out of 64-bit range")
    return number


def parse_fraction(digits: str | None) -> int:
    if not digits:
        return 0
    # Digits past nanosecond resolution are dropped, not rounded.
    return int(digits[:9].ljust(9, "0"))


def epoch_days(year: int, month: int, day: int) -> int:
    """Days from 1970-01-01 to the given proleptic Gregorian date.

    Year 0 is valid; it is validated one 400-year cycle later since ``date``
    starts at year 1.
    """
    shift = 0
    if year < 1:
        year += 400
        shift = DAYS_PER_CYCLE
    return date(year, month, day).toordinal() - shift - EPOCH_ORDINAL


def civil_date(days: int) -> tuple[int, int, int]:
    """Inverse of ``epoch_days`` for any day count, including years past 9999."""
    cycles, offset = divmod(days + EPOCH_ORDINAL - 1, DAYS_PER_CYCLE)
    day = date.fromordinal(offset + 1)
    return day.year + 400 * cycles, day.month, day.day


def parse_rfc3339(value: str) -> DateTimeFields:
    match = _RFC3339_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"{value!r} is not an RFC 3339 date-time")

    offset_text = match["offset"]
    offset = 0
    if offset_text != "Z":
        hours, minutes = int(offset_text[1:3]), int(offset_text[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f"offset {offset_text!r} out of range")
        offset = hours * 3600 + minutes * 60
        if offset_text[0] == "-":
            offset = -offset

    days = epoch_days(int(match["year"]), int(match["month"]), int(match["day"]))
    clock = time(int(match["hour"]), int(match["minute"]), int(match["second"]))
    seconds = (
        days * SECONDS_PER_DAY
        + clock.hour * 3600
        + clock.minute * 60
        + clock.second
        - offset
    )
    return DateTimeFields(seconds=seconds, nanosecond=parse_fraction(match["fraction"]))


def format_rfc3339(seconds: int) -> str:
    """Render epoch seconds as ``YYYY-MM-DDThh:mm:ss`` in UTC, without a suffix.

    Years past 9999 print in full and years before 0 carry a leading ``-``.
    """
    days, second_of_day = divmod(seconds, SECONDS_PER_DAY)
    year, month, day = civil_date(days)
    hour, remainder = divmod(second_of_day, 3600)
    minute, second = divmod(remainder, 60)
    year_text = f"{year:04d}" if year >= 0 else f"-{-year:04d}"
    return f"{year_text}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
