from decimal import Decimal as D

from taxcalc.core.allocation import allocate
from taxcalc.core.jurisdictions import default_registry
from taxcalc.core.summary import total


def _tax(code: str, amount: D, year: int | None = None) -> D:
    table = default_registry().brackets_for(code, year)
    return total(allocate(amount, table.widths, table.rates))


def test_federal_bracket_edges_2025():
    assert _tax("FED", D("57375")) == D("8606.25")
    assert _tax("FED", D("57376")) > D("8606.25")

    for edge in (D("114750"), D("177882"), D("253414")):
        assert _tax("FED", edge) > _tax("FED", edge - 1)


def test_every_province_is_progressive_across_its_edges():
    registry = default_registry()
    for year in registry.years:
        for code in registry.supported_provinces(year):
            table = registry.brackets_for(code, year)
            for edge in table.thresholds:
                below = _tax(code, edge - 1, year)
                at = _tax(code, edge, year)
                above = _tax(code, edge + 1, year)
                assert below < at < above, (year, code, edge)


def test_ontario_first_bracket_2025():
    first = _tax("ON", D("52886"))
    assert first == D("52886") * D("0.0505")
    assert _tax("ON", D("52887")) == first + D("0.0915")
