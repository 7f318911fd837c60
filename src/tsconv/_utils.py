"""Integer parsing and truncating arithmetic helpers."""

from __future__ import annotations

import re

from tsconv._constants import I64_MAX, I64_MIN
from tsconv._errors import (
    ERR_MSG_EMPTY_INTEGER,
    ERR_MSG_INTEGER_TOO_LARGE,
    ERR_MSG_INTEGER_TOO_SMALL,
    ERR_MSG_INVALID_DIGIT,
    InputParseError,
)

INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_i64(text: str) -> int:
    """Parse a signed 64-bit integer literal.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and non-ASCII digits are rejected.
    """
    if not text:
        raise InputParseError(ERR_MSG_EMPTY_INTEGER, "empty input value")
    if not INTEGER_RE.fullmatch(text):
        raise InputParseError(
            ERR_MSG_INVALID_DIGIT,
            f"input value {text!r} is not an integer literal",
        )
    value = int(text)
    if value > I64_MAX:
        raise InputParseError(
            ERR_MSG_INTEGER_TOO_LARGE,
            f"input value {text} exceeds {I64_MAX}",
        )
    if value < I64_MIN:
        raise InputParseError(
            ERR_MSG_INTEGER_TOO_SMALL,
            f"input value {text} is below {I64_MIN}",
        )
    return value


def truncating_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide rounding the quotient toward zero.

    The remainder takes the sign of ``value``, unlike the builtin ``divmod``
    which floors the quotient. ``divisor`` must be positive.
    """
    quotient, remainder = divmod(abs(value), divisor)
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder
