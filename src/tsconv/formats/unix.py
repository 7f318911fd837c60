"""Integer Unix-time output formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tsconv.formats._base import OutputFormat, OutputMode

if TYPE_CHECKING:
    from tsconv._instant import Instant


class SecondsFormat(OutputFormat):
    """Whole seconds since the epoch."""

    mode = OutputMode.SECS

    def render(self, instant: Instant) -> str:
        return str(instant.seconds)


class MillisFormat(OutputFormat):
    """Whole milliseconds since the epoch."""

    mode = OutputMode.MILLIS

    def render(self, instant: Instant) -> str:
        return str(instant.timestamp_millis)


class NanosFormat(OutputFormat):
    """Nanoseconds since the epoch."""

    mode = OutputMode.NANOS

    def render(self, instant: Instant) -> str:
        return str(instant.timestamp_nanos)
