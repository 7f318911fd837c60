"""tsconv - Convert between Unix timestamps and calendar time formats."""

from __future__ import annotations

try:
    from tsconv._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from tsconv._errors import InputParseError, InstantRangeError, TimestampError
from tsconv._instant import Instant
from tsconv._resolver import InputMode, instant_from_unix, resolve_timestamp
from tsconv.formats import OutputMode, format_instant, get_format

__all__ = [
    "convert",
    "format_instant",
    "get_format",
    "instant_from_unix",
    "resolve_timestamp",
    "Instant",
    "InputMode",
    "OutputMode",
    "InputParseError",
    "InstantRangeError",
    "TimestampError",
]


def convert(
    value: str | None = None,
    *,
    input_mode: InputMode = InputMode.NOW,
    output_mode: OutputMode = OutputMode.SECS,
) -> str:
    """Convert a timestamp in one pass.

    Args:
        value: Textual integer input. Ignored when ``input_mode`` is ``NOW``.
        input_mode: How ``value`` is interpreted. Defaults to the current time.
        output_mode: Output format. Defaults to whole seconds.

    Returns:
        The formatted timestamp.

    Raises:
        InputParseError: If the value is missing or not a signed 64-bit integer.
        InstantRangeError: If the value does not describe a valid instant.
    """
    instant = resolve_timestamp(input_mode, value)
    return format_instant(instant, output_mode)
