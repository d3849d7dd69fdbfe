"""Input parsers keyed by format identifier.

Every parser takes the raw ``--input`` text and returns a UTC ``Instant`` or
raises ``FormatError``.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from .errors import FormatError
from .models import (
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SECOND,
    Instant,
    TimestampFormat,
)
from .utils import parse_int64, parse_rfc3339 as split_rfc3339

ParseFunc = Callable[[str], Instant]

# autounix magnitude thresholds: below SECONDS is seconds, below MILLIS is
# milliseconds, below MICROS is microseconds, anything larger is nanoseconds.
AUTO_SECONDS_LIMIT = 10**11
AUTO_MILLIS_LIMIT = 10**14
AUTO_MICROS_LIMIT = 10**17


def _read_int(fmt: TimestampFormat, value: str) -> int:
    try:
        return parse_int64(value)
    except ValueError as exc:
        raise FormatError(f"{fmt.value}: {exc}", fmt.value, value) from exc


def _parse_rfc3339_text(fmt: TimestampFormat, value: str) -> Instant:
    try:
        fields = split_rfc3339(value)
    except ValueError as exc:
        raise FormatError(f"{fmt.value}: {exc}", fmt.value, value) from exc
    return Instant.from_unix(fields.seconds, fields.nanosecond)


def parse_rfc3339(value: str) -> Instant:
    return _parse_rfc3339_text(TimestampFormat.RFC3339, value)


def parse_rfc3339_nano(value: str) -> Instant:
    return _parse_rfc3339_text(TimestampFormat.RFC3339_NANO, value)


def parse_unix_seconds(value: str) -> Instant:
    seconds = _read_int(TimestampFormat.UNIX, value)
    return Instant(seconds * NANOS_PER_SECOND)


def parse_unix_milliseconds(value: str) -> Instant:
    millis = _read_int(TimestampFormat.UNIX_MS, value)
    return Instant(millis * NANOS_PER_MILLI)


def parse_unix_microseconds(value: str) -> Instant:
    micros = _read_int(TimestampFormat.UNIX_US, value)
    return Instant(micros * NANOS_PER_MICRO)


def parse_unix_nanoseconds(value: str) -> Instant:
    nanos = _read_int(TimestampFormat.UNIX_NS, value)
    return Instant(nanos)


def detect_unix_unit(number: int) -> int:
    """Guess the resolution of an epoch integer from its magnitude.

    Returns the number of nanoseconds per unit. The thresholds are decade
    boundaries, so values close to them are ambiguous: a seconds timestamp
    past year 5138 reads as milliseconds.
    """
    magnitude = abs(number)
    if magnitude < AUTO_SECONDS_LIMIT:
        return NANOS_PER_SECOND
    if magnitude < AUTO_MILLIS_LIMIT:
        return NANOS_PER_MILLI
    if magnitude < AUTO_MICROS_LIMIT:
        return NANOS_PER_MICRO
    return 1


def parse_auto_unix(value: str) -> Instant:
    number = _read_int(TimestampFormat.AUTO_UNIX, value)
    return Instant(number * detect_unix_unit(number))


PARSERS: Mapping[str, ParseFunc] = MappingProxyType(
    {
        TimestampFormat.RFC3339.value: parse_rfc3339,
        TimestampFormat.RFC3339_NANO.value: parse_rfc3339_nano,
        TimestampFormat.UNIX.value: parse_unix_seconds,
        TimestampFormat.UNIX_MS.value: parse_unix_milliseconds,
        TimestampFormat.UNIX_US.value: parse_unix_microseconds,
        TimestampFormat.UNIX_NS.value: parse_unix_nanoseconds,
        TimestampFormat.AUTO_UNIX.value: parse_auto_unix,
    }
)
