"""Output formatters keyed by format identifier."""
from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from .models import (
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    Instant,
    TimestampFormat,
)
from .utils import format_rfc3339 as format_fields

FormatFunc = Callable[[Instant], str]


def format_rfc3339(instant: Instant) -> str:
    return f"{format_fields(instant.seconds)}Z"


def format_rfc3339_nano(instant: Instant) -> str:
    """Render with the fraction trimmed of trailing zeros, omitted when zero."""
    fraction = f"{instant.nanosecond:09d}".rstrip("0")
    if fraction:
        return f"{format_fields(instant.seconds)}.{fraction}Z"
    return format_rfc3339(instant)


def format_unix_seconds(instant: Instant) -> str:
    return str(instant.seconds)


def format_unix_milliseconds(instant: Instant) -> str:
    return str(instant.unix_nanos // NANOS_PER_MILLI)


def format_unix_microseconds(instant: Instant) -> str:
    return str(instant.unix_nanos // NANOS_PER_MICRO)


def format_unix_nanoseconds(instant: Instant) -> str:
    return str(instant.unix_nanos)


FORMATTERS: Mapping[str, FormatFunc] = MappingProxyType(
    {
        TimestampFormat.RFC3339.value: format_rfc3339,
        TimestampFormat.RFC3339_NANO.value: format_rfc3339_nano,
        TimestampFormat.UNIX.value: format_unix_seconds,
        TimestampFormat.UNIX_MS.value: format_unix_milliseconds,
        TimestampFormat.UNIX_US.value: format_unix_microseconds,
        TimestampFormat.UNIX_NS.value: format_unix_nanoseconds,
    }
)
