"""Utility function tests."""

import pytest

from tsconv._errors import InputParseError
from tsconv._utils import parse_i64, truncating_divmod


class TestParseI64:
    def test_positive(self):
        assert parse_i64("1627497005") == 1627497005

    def test_negative(self):
        assert parse_i64("-42") == -42

    def test_explicit_plus_sign(self):
        assert parse_i64("+7") == 7

    def test_zero(self):
        assert parse_i64("0") == 0

    def test_leading_zeros(self):
        assert parse_i64("000123") == 123

    def test_max(self):
        assert parse_i64("9223372036854775807") == 2**63 - 1

    def test_min(self):
        assert parse_i64("-9223372036854775808") == -(2**63)

    def test_empty(self):
        with pytest.raises(InputParseError, match="empty string"):
            parse_i64("")

    @pytest.mark.parametrize(
        "text",
        ["abc", "12a", "1.5", "1e3", " 12", "12 ", "1_000", "-", "+", "--5", "5\n", "٣"],
    )
    def test_invalid_digit(self, text):
        with pytest.raises(InputParseError, match="invalid digit"):
            parse_i64(text)

    def test_too_large(self):
        with pytest.raises(InputParseError, match="too large"):
            parse_i64("9223372036854775808")

    def test_too_small(self):
        with pytest.raises(InputParseError, match="too small"):
            parse_i64("-9223372036854775809")

    def test_internal_details_name_the_value(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_i64("12a")
        assert "'12a'" in exc_info.value.internal()


class TestTruncatingDivmod:
    def test_exact(self):
        assert truncating_divmod(3000, 1000) == (3, 0)

    def test_positive_remainder(self):
        assert truncating_divmod(1500, 1000) == (1, 500)

    def test_negative_rounds_toward_zero(self):
        assert truncating_divmod(-1500, 1000) == (-1, -500)

    def test_negative_exact(self):
        assert truncating_divmod(-2000, 1000) == (-2, 0)

    def test_negative_below_one_unit(self):
        assert truncating_divmod(-1, 1000) == (0, -1)

    def test_differs_from_floored_divmod(self):
        assert divmod(-1500, 1000) == (-2, 500)
        assert truncating_divmod(-1500, 1000) != divmod(-1500, 1000)
