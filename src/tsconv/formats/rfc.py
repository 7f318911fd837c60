"""Calendar (RFC 2822 / RFC 3339) output formats."""

from __future__ import annotations

from email.utils import format_datetime
from typing import TYPE_CHECKING

from tsconv._constants import NANOS_PER_MICRO, NANOS_PER_MILLI
from tsconv.formats._base import OutputFormat, OutputMode

if TYPE_CHECKING:
    from tsconv._instant import Instant

UTC_OFFSET = "+00:00"


def _fraction(nanosecond: int) -> str:
    """Shortest exact fraction of 0, 3, 6 or 9 digits, with leading dot."""
    if nanosecond == 0:
        return ""
    if nanosecond % NANOS_PER_MILLI == 0:
        return f".{nanosecond // NANOS_PER_MILLI:03d}"
    if nanosecond % NANOS_PER_MICRO == 0:
        return f".{nanosecond // NANOS_PER_MICRO:06d}"
    return f".{nanosecond:09d}"


class Rfc2822Format(OutputFormat):
    """e.g. ``Wed, 28 Jul 2021 18:30:05 +0000``; sub-seconds are dropped."""

    mode = OutputMode.RFC2822

    def render(self, instant: Instant) -> str:
        return format_datetime(instant.to_datetime())


class Rfc3339Format(OutputFormat):
    """e.g. ``2021-07-28T18:30:05.123456789+00:00``."""

    mode = OutputMode.RFC3339

    def render(self, instant: Instant) -> str:
        dt = instant.to_datetime()
        date_part = dt.date().isoformat()
        time_part = dt.time().replace(microsecond=0).isoformat()
        return f"{date_part}T{time_part}{_fraction(instant.nanosecond)}{UTC_OFFSET}"
