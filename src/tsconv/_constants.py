"""Numeric limits for timestamp conversion."""

MILLIS_PER_SECOND = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000
NANOS_PER_SECOND = 1_000_000_000

MAX_NANOSECOND = NANOS_PER_SECOND - 1
"""Largest valid nanosecond-of-second component."""

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
"""Bounds of a signed 64-bit integer input value."""

MIN_UNIX_SECONDS = -62_135_596_800
"""0001-01-01T00:00:00Z, the earliest instant a datetime can hold."""

MAX_UNIX_SECONDS = 253_402_300_799
"""9999-12-31T23:59:59Z, the latest instant a datetime can hold."""
