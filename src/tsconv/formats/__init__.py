"""Output formats for rendering an Instant."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tsconv.formats._base import OutputFormat, OutputMode
from tsconv.formats.rfc import Rfc2822Format, Rfc3339Format
from tsconv.formats.unix import MillisFormat, NanosFormat, SecondsFormat

if TYPE_CHECKING:
    from tsconv._instant import Instant

__all__ = [
    "OutputFormat",
    "OutputMode",
    "MillisFormat",
    "NanosFormat",
    "Rfc2822Format",
    "Rfc3339Format",
    "SecondsFormat",
    "format_instant",
    "get_format",
]

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, type[OutputFormat]] = {
    OutputMode.SECS: SecondsFormat,
    OutputMode.MILLIS: MillisFormat,
    OutputMode.NANOS: NanosFormat,
    OutputMode.RFC2822: Rfc2822Format,
    OutputMode.RFC3339: Rfc3339Format,
}


def get_format(name: str) -> OutputFormat:
    """Get an output format instance by name.

    Args:
        name: Format name ("secs", "millis", "nanos", "rfc2822", "rfc3339").

    Returns:
        An OutputFormat instance.

    Raises:
        ValueError: If the format name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown output format: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()


def format_instant(instant: Instant, mode: OutputMode = OutputMode.SECS) -> str:
    """Render an Instant in the requested output mode."""
    fmt = get_format(mode)
    logger.debug("rendering %s with %s", instant, type(fmt).__name__)
    return fmt.render(instant)
