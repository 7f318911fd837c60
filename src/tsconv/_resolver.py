"""Resolve an input mode and value to an Instant."""

from __future__ import annotations

import enum
import logging

from tsconv._constants import MILLIS_PER_SECOND, NANOS_PER_MILLI, NANOS_PER_SECOND
from tsconv._errors import ERR_MSG_MISSING_VALUE, InputParseError
from tsconv._instant import Instant
from tsconv._utils import parse_i64, truncating_divmod

logger = logging.getLogger(__name__)


class InputMode(enum.StrEnum):
    """How the input value is interpreted."""

    NOW = "now"
    SECS = "secs"
    MILLIS = "millis"
    NANOS = "nanos"


INPUT_MODE_ALIASES: dict[str, InputMode] = {
    "now": InputMode.NOW,
    "secs": InputMode.SECS,
    "s": InputMode.SECS,
    "millis": InputMode.MILLIS,
    "m": InputMode.MILLIS,
    "nanos": InputMode.NANOS,
    "n": InputMode.NANOS,
}
"""Every spelling accepted by ``--from``, mapped to its mode."""


def instant_from_unix(value: int, mode: InputMode) -> Instant:
    """Build an Instant from an integer count of seconds, millis or nanos.

    Sub-second units are split with truncating division, so a negative value
    that is not a whole number of seconds yields a negative nanosecond
    component and is rejected with InstantRangeError.
    """
    if mode is InputMode.SECS:
        return Instant(value, 0)
    if mode is InputMode.MILLIS:
        seconds, millis = truncating_divmod(value, MILLIS_PER_SECOND)
        nanosecond = millis * NANOS_PER_MILLI
    elif mode is InputMode.NANOS:
        seconds, nanosecond = truncating_divmod(value, NANOS_PER_SECOND)
    else:
        raise ValueError(f"input mode {mode!r} does not take a value")
    logger.debug("split %d %s into seconds=%d nanosecond=%d", value, mode, seconds, nanosecond)
    return Instant(seconds, nanosecond)


def resolve_timestamp(mode: InputMode, value: str | None = None) -> Instant:
    """Resolve the input to an absolute point in time.

    Args:
        mode: The input mode.
        value: The textual integer value. Ignored for ``InputMode.NOW``,
            required otherwise.

    Returns:
        The resolved Instant.

    Raises:
        InputParseError: If the value is missing or not a signed 64-bit integer.
        InstantRangeError: If the derived seconds/nanosecond pair is invalid.
    """
    if mode is InputMode.NOW:
        instant = Instant.now()
        logger.debug("read wall clock: %s", instant)
        return instant
    if value is None:
        raise InputParseError(ERR_MSG_MISSING_VALUE, f"input mode {mode} requires a value")
    return instant_from_unix(parse_i64(value), mode)
