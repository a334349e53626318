from decimal import Decimal as D

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from taxcalc.core.engine import calculate, calculate_raw
from taxcalc.core.jurisdictions import JurisdictionRegistry, default_registry
from taxcalc.core.models import CalculationInput
from taxcalc.errors import ConfigurationError


def test_ontario_100k_breakdown():
    calc = calculate(CalculationInput(income="100000", province="on"))

    assert calc.tax_year == 2025
    assert calc.province == "ON"
    assert calc.province_name == "Ontario"

    assert [line.amount for line in calc.federal.lines] == [
        D("8606.25"),
        D("8738.125"),
        D("0"),
        D("0"),
        D("0"),
    ]
    assert calc.federal.total == D("17344.375")
    assert calc.federal.lines[0].label == "before $57,375.00"
    assert calc.federal.lines[-1].label == "over $253,414.00"

    assert calc.provincial.total == D("6981.674")
    assert calc.cpp.total == D("4430.10")

    assert calc.annual.gross == D("100000")
    assert calc.annual.net_income == D("75673.951")
    assert calc.annual.take_home == D("71243.851")


def test_cpp_lines_include_exempt_band():
    calc = calculate(CalculationInput(income="50000", province="ON"))
    lines = calc.cpp.lines
    assert len(lines) == 3
    assert lines[0].exempt and lines[0].label == "$0.00 – $3,500.00"
    assert [line.amount for line in lines[1:]] == [D("2766.75"), D("0")]
    assert lines[2].label == "$71,300.00 – $81,200.00"


def test_supplementary_income_is_taxed_but_not_pensionable():
    base = calculate(CalculationInput(income="50000", province="SK"))
    with_extra = calculate(
        CalculationInput(income="50000", supplementary_income="10000", province="SK")
    )
    assert with_extra.annual.gross == D("60000")
    assert with_extra.annual.federal_tax > base.annual.federal_tax
    assert with_extra.annual.provincial_tax > base.annual.provincial_tax
    assert with_extra.annual.cpp == base.annual.cpp == D("2766.75")


def test_malformed_input_gives_zero_based_result():
    calc = calculate_raw("not a number", "MB", supplementary_income="")
    assert calc.income == D("0")
    assert calc.annual.gross == D("0")
    assert calc.federal.total == calc.provincial.total == calc.cpp.total == D("0")
    assert all(line.amount == 0 for line in calc.federal.lines)
    assert len(calc.provincial.lines) == 3
    assert calc.monthly.net_income == D("0")


def test_monthly_summary_identity():
    calc = calculate(CalculationInput(income="87654.32", province="BC"))
    monthly = calc.monthly
    assert monthly.gross == D("87654.32") / 12
    assert monthly.net_income == monthly.gross - monthly.federal_tax - monthly.provincial_tax
    assert monthly.federal_tax == calc.annual.federal_tax / 12


def test_custom_periods():
    calc = calculate(CalculationInput(income="52000", province="ON"), periods_per_year=26)
    assert calc.periods_per_year == 26
    assert calc.monthly.gross == D("2000")


def test_older_tax_year():
    calc = calculate(CalculationInput(income="100000", province="ON", tax_year=2024))
    assert calc.tax_year == 2024
    assert calc.federal.lines[0].label == "before $55,867.00"
    assert calc.cpp.lines[-1].label == "$68,500.00 – $73,200.00"


@pytest.mark.parametrize(
    "inputs",
    [
        CalculationInput(income="1000", province="ZZ"),
        CalculationInput(income="1000", province="FED"),
        CalculationInput(income="1000", province="MB", tax_year=2024),
        CalculationInput(income="1000", province="ON", tax_year=2026),
        CalculationInput(income="1000"),
    ],
)
def test_unknown_jurisdiction_is_a_configuration_error(inputs: CalculationInput):
    with pytest.raises(ConfigurationError):
        calculate(inputs)


def test_synthetic_registry(synthetic_registry: JurisdictionRegistry):
    calc = calculate(CalculationInput(income="15", province="XA"), registry=synthetic_registry)
    assert calc.tax_year == 2030
    assert calc.federal.total == D("2.0")
    assert calc.provincial.total == D("0.75")
    assert calc.cpp.total == D("5.0")
    assert calc.cpp.name == "Test pension"
    assert calc.provincial.lines[0].label == "over $0.00"


def test_result_is_immutable():
    calc = calculate(CalculationInput(income="1000", province="ON"))
    with pytest.raises(Exception):
        calc.annual.gross = D("5")  # type: ignore[misc]


@settings(max_examples=50)
@given(
    st.decimals(min_value=0, max_value=500_000, places=2, allow_nan=False, allow_infinity=False),
    st.sampled_from(default_registry().supported_provinces()),
)
def test_net_income_consistency(income: D, province: str):
    calc = calculate(CalculationInput(income=income, province=province))
    assert calc.annual.net_income == income - calc.federal.total - calc.provincial.total
    assert calc.annual.take_home == calc.annual.net_income - calc.cpp.total
    assert calc.annual.federal_tax >= 0 and calc.annual.provincial_tax >= 0
    assert len(calc.federal.lines) == 5


@given(st.decimals(min_value=0, max_value=500_000, places=2, allow_nan=False, allow_infinity=False))
def test_engine_is_pure(income: D):
    inputs = CalculationInput(income=income, province="ON")
    assert calculate(inputs) == calculate(inputs)
