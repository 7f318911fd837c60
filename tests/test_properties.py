"""Property-based tests for conversion arithmetic and formatting."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from tsconv import Instant, InputMode, OutputMode, format_instant, resolve_timestamp
from tsconv._constants import MAX_NANOSECOND, MAX_UNIX_SECONDS, MIN_UNIX_SECONDS
from tsconv._utils import truncating_divmod


def instants() -> st.SearchStrategy[Instant]:
    return st.builds(
        Instant,
        st.integers(min_value=MIN_UNIX_SECONDS, max_value=MAX_UNIX_SECONDS),
        st.integers(min_value=0, max_value=MAX_NANOSECOND),
    )


@given(instants())
def test_nanos_output_identity(instant):
    expected = instant.seconds * 1_000_000_000 + instant.nanosecond
    assert int(format_instant(instant, OutputMode.NANOS)) == expected


@given(instants())
def test_millis_output_identity(instant):
    expected = instant.seconds * 1000 + instant.nanosecond // 1_000_000
    assert int(format_instant(instant, OutputMode.MILLIS)) == expected


@given(instants())
def test_seconds_output_identity(instant):
    assert int(format_instant(instant, OutputMode.SECS)) == instant.seconds


@given(instants())
def test_rfc3339_round_trip(instant):
    text = format_instant(instant, OutputMode.RFC3339)
    assert Instant.from_rfc3339(text) == instant


@given(instants(), st.sampled_from(list(OutputMode)))
def test_format_idempotent(instant, mode):
    assert format_instant(instant, mode) == format_instant(instant, mode)


@given(st.integers(min_value=-(2**63), max_value=2**63 - 1), st.sampled_from([1000, 10**9]))
def test_truncating_divmod_rounds_toward_zero(value, divisor):
    quotient, remainder = truncating_divmod(value, divisor)
    assert quotient * divisor + remainder == value
    assert abs(remainder) < divisor
    assert remainder == 0 or (remainder < 0) == (value < 0)


@given(st.integers(min_value=0, max_value=MAX_UNIX_SECONDS * 1000))
def test_non_negative_millis_input_round_trip(value):
    instant = resolve_timestamp(InputMode.MILLIS, str(value))
    assert format_instant(instant, OutputMode.MILLIS) == str(value)


@given(st.integers(min_value=0, max_value=2**63 - 1))
def test_non_negative_nanos_input_round_trip(value):
    instant = resolve_timestamp(InputMode.NANOS, str(value))
    assert format_instant(instant, OutputMode.NANOS) == str(value)
