"""The Instant value type: a UTC point in time with nanosecond resolution."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from time import time_ns as time_nano

import ciso8601

from tsconv._constants import (
    MAX_NANOSECOND,
    MAX_UNIX_SECONDS,
    MILLIS_PER_SECOND,
    MIN_UNIX_SECONDS,
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SECOND,
)
from tsconv._errors import (
    ERR_MSG_INVALID_RFC3339,
    ERR_MSG_NANOSECOND_RANGE,
    ERR_MSG_SECONDS_RANGE,
    InputParseError,
    InstantRangeError,
)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

FRACTION_RE = re.compile(r"\.([0-9]+)")


@dataclass(frozen=True)
class Instant:
    """Whole seconds since the Unix epoch plus a nanosecond-of-second.

    ``nanosecond`` must lie in ``[0, 999_999_999]`` and ``seconds`` must fall
    inside the calendar range a ``datetime`` can represent.
    """

    seconds: int
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanosecond <= MAX_NANOSECOND:
            raise InstantRangeError(
                ERR_MSG_NANOSECOND_RANGE,
                f"nanosecond component {self.nanosecond} outside [0, {MAX_NANOSECOND}]",
            )
        if not MIN_UNIX_SECONDS <= self.seconds <= MAX_UNIX_SECONDS:
            raise InstantRangeError(
                ERR_MSG_SECONDS_RANGE,
                f"seconds {self.seconds} outside "
                f"[{MIN_UNIX_SECONDS}, {MAX_UNIX_SECONDS}]",
            )

    @classmethod
    def now(cls) -> Instant:
        """Read the current wall-clock time."""
        seconds, nanosecond = divmod(time_nano(), NANOS_PER_SECOND)
        return cls(seconds, nanosecond)

    @classmethod
    def from_rfc3339(cls, text: str) -> Instant:
        """Parse an RFC 3339 timestamp, keeping up to nine fraction digits.

        ciso8601 validates the text and resolves the UTC offset; the fraction
        digits are re-read from the text because it stops at microseconds.

        Raises:
            InputParseError: If the text is not a valid RFC 3339 timestamp.
            InstantRangeError: If the instant is outside the calendar range.
        """
        try:
            dt = ciso8601.parse_rfc3339(text)
        except ValueError as e:
            raise InputParseError(
                ERR_MSG_INVALID_RFC3339,
                f"{text!r} is not an RFC 3339 timestamp: {e}",
                wrapped=e,
            ) from e

        fraction = FRACTION_RE.search(text)
        digits = fraction[1] if fraction else "0"
        if len(digits) > 9:
            raise InputParseError(
                ERR_MSG_INVALID_RFC3339,
                f"{text!r} has more than nine fraction digits",
            )

        seconds = (dt.replace(microsecond=0) - UNIX_EPOCH) // timedelta(seconds=1)
        return cls(seconds, int(digits.ljust(9, "0")))

    @property
    def timestamp_millis(self) -> int:
        """Total milliseconds since the epoch."""
        return self.seconds * MILLIS_PER_SECOND + self.nanosecond // NANOS_PER_MILLI

    @property
    def timestamp_nanos(self) -> int:
        """Total nanoseconds since the epoch."""
        return self.seconds * NANOS_PER_SECOND + self.nanosecond

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime, truncated to microseconds."""
        return UNIX_EPOCH + timedelta(
            seconds=self.seconds, microseconds=self.nanosecond // NANOS_PER_MICRO
        )
