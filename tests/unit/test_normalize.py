from decimal import Decimal as D

import hypothesis.strategies as st
import pytest
from hypothesis import given

from taxcalc.core.normalize import parse_amount


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "abc", "12abc", "-", ".", "NaN", "Infinity", "-Infinity", "sNaN", "-5", "-0.01", True],
)
def test_unusable_input_normalizes_to_zero(raw):
    value = parse_amount(raw)
    assert value == D("0")
    assert not value.is_signed()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("100000", D("100000")),
        (" 100000 ", D("100000")),
        ("$1,234.50", D("1234.50")),
        ("1_000", D("1000")),
        ("1e3", D("1000")),
        ("-0", D("0")),
        (1.1, D("1.1")),
        (42, D("42")),
        (D("57375"), D("57375")),
    ],
)
def test_valid_input(raw, expected: D):
    assert parse_amount(raw) == expected


@given(st.text())
def test_never_raises(raw: str):
    value = parse_amount(raw)
    assert value >= 0
    assert value.is_finite()


@pytest.mark.parametrize("raw", ["1e999999999", "1e16", "12345678901234567", 10**20, D("1E+30")])
def test_out_of_range_magnitude_is_zero(raw):
    assert parse_amount(raw) == D("0")


def test_largest_accepted_amount():
    assert parse_amount("999,999,999,999,999.99") == D("999999999999999.99")
