"""Domain models and constants for the timestamp converter CLI."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from .errors import TimestampRangeError
from .utils import format_rfc3339

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Bounds of what datetime can hold, expressed as epoch seconds.
MIN_DATETIME_SECONDS = int((datetime(1, 1, 1, tzinfo=timezone.utc) - EPOCH).total_seconds())
MAX_DATETIME_SECONDS = int(
    (datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc) - EPOCH).total_seconds()
)


class TimestampFormat(str, Enum):
    RFC3339 = "rfc3339"
    RFC3339_NANO = "rfc3339nano"
    UNIX = "unix"
    UNIX_MS = "unixms"
    UNIX_US = "unixus"
    UNIX_NS = "unixns"
    AUTO_UNIX = "autounix"

    @classmethod
    def list(cls) -> list[str]:
        return [fmt.value for fmt in cls]


@dataclass(frozen=True, slots=True)
class Instant:
    """A point in time in UTC with nanosecond resolution.

    The value is kept as a single count of nanoseconds since the Unix epoch,
    since ``datetime`` stops at microseconds and at year 9999. Any integer is
    a valid instant.
    """

    unix_nanos: int

    @classmethod
    def from_unix(cls, seconds: int, nanos: int = 0) -> "Instant":
        return cls(seconds * NANOS_PER_SECOND + nanos)

    @classmethod
    def from_datetime(cls, value: datetime, nanosecond: int | None = None) -> "Instant":
        """Build an instant from ``value``, treating naive datetimes as UTC.

        When ``nanosecond`` is given it replaces the microsecond field of
        ``value`` as the sub-second component.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            value = value.astimezone(timezone.utc)
        whole = value.replace(microsecond=0)
        delta = whole - EPOCH
        seconds = delta.days * 86_400 + delta.seconds
        if nanosecond is None:
            nanosecond = value.microsecond * NANOS_PER_MICRO
        return cls.from_unix(seconds, nanosecond)

    @property
    def seconds(self) -> int:
        return self.unix_nanos // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self.unix_nanos % NANOS_PER_SECOND

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime, truncated to microseconds.

        Raises ``TimestampRangeError`` outside years 0001-9999.
        """
        if not MIN_DATETIME_SECONDS <= self.seconds <= MAX_DATETIME_SECONDS:
            raise TimestampRangeError(f"{self} is outside the datetime range 0001-9999")
        return EPOCH + timedelta(
            seconds=self.seconds, microseconds=self.nanosecond // NANOS_PER_MICRO
        )

    def __str__(self) -> str:
        return f"{format_rfc3339(self.seconds)}.{self.nanosecond:09d}Z"
