from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from taxcalc.core.allocation import allocate, allocate_with_exemption
from taxcalc.core.jurisdictions import (
    FEDERAL_CODE,
    BracketTable,
    ContributionSchedule,
    JurisdictionRegistry,
    default_registry,
)
from taxcalc.core.labels import contribution_label_for, label_for
from taxcalc.core.models import (
    BracketLine,
    Calculation,
    CalculationInput,
    SchemeBreakdown,
    Summary,
)
from taxcalc.core.summary import MONTHS_PER_YEAR, monthly_summary, summarize, total

D = Decimal

logger = logging.getLogger("taxcalc.engine")

_ZERO = D("0")


def bracket_lines(table: BracketTable, taxed: Sequence[D]) -> tuple[BracketLine, ...]:
    # brackets the amount never reached still get a row, at zero
    lines = []
    for index, rate in enumerate(table.rates):
        amount = taxed[index] if index < len(taxed) else _ZERO
        lines.append(
            BracketLine(label=label_for(table.widths, index), rate=rate, amount=amount)
        )
    return tuple(lines)


def contribution_lines(
    schedule: ContributionSchedule, contributed: Sequence[D]
) -> tuple[BracketLine, ...]:
    lines = [
        BracketLine(
            label=contribution_label_for(schedule.exemption, schedule.widths, -1),
            rate=_ZERO,
            amount=_ZERO,
            exempt=True,
        )
    ]
    for index, rate in enumerate(schedule.rates):
        lines.append(
            BracketLine(
                label=contribution_label_for(schedule.exemption, schedule.widths, index),
                rate=rate,
                amount=contributed[index],
            )
        )
    return tuple(lines)


def _progressive_breakdown(
    code: str, name: str, table: BracketTable, amount: D
) -> tuple[SchemeBreakdown, tuple[D, ...]]:
    taxed = allocate(amount, table.widths, table.rates)
    breakdown = SchemeBreakdown(
        code=code,
        name=name,
        lines=bracket_lines(table, taxed),
        total=total(taxed),
    )
    return breakdown, taxed


def calculate(
    inputs: CalculationInput,
    registry: JurisdictionRegistry | None = None,
    periods_per_year: int = MONTHS_PER_YEAR,
) -> Calculation:
    """Full itemized breakdown for one input snapshot.

    Federal and provincial tax apply to income plus the supplementary amount;
    CPP applies to ``income`` only. Lookups happen before any allocation, so
    an unknown province or year raises ``ConfigurationError`` with nothing
    computed.
    """
    registry = registry or default_registry()
    tables = registry.tables(inputs.tax_year)
    federal = registry.jurisdiction(FEDERAL_CODE, tables.year)
    province = registry.province(inputs.province, tables.year)
    schedule = tables.contribution

    gross = inputs.gross
    federal_breakdown, federal_taxed = _progressive_breakdown(
        federal.code, federal.name, federal.table, gross
    )
    provincial_breakdown, provincial_taxed = _progressive_breakdown(
        province.code, province.name, province.table, gross
    )
    contributed = allocate_with_exemption(
        inputs.income, schedule.exemption, schedule.widths, schedule.rates
    )
    cpp_breakdown = SchemeBreakdown(
        code="CPP",
        name=schedule.name,
        lines=contribution_lines(schedule, contributed),
        total=total(contributed),
    )

    annual: Summary = summarize(gross, federal_taxed, provincial_taxed, contributed)
    logger.debug(
        "Computed %s/%s: gross=%s federal=%s provincial=%s cpp=%s",
        tables.year,
        province.code,
        gross,
        annual.federal_tax,
        annual.provincial_tax,
        annual.cpp,
    )
    return Calculation(
        tax_year=tables.year,
        province=province.code,
        province_name=province.name,
        income=inputs.income,
        supplementary_income=inputs.supplementary_income,
        federal=federal_breakdown,
        provincial=provincial_breakdown,
        cpp=cpp_breakdown,
        annual=annual,
        monthly=monthly_summary(annual, periods_per_year),
        periods_per_year=periods_per_year,
    )


def calculate_raw(
    income: str | None,
    province: str,
    supplementary_income: str | None = None,
    tax_year: int | None = None,
    registry: JurisdictionRegistry | None = None,
    periods_per_year: int = MONTHS_PER_YEAR,
) -> Calculation:
    """Convenience wrapper taking the raw field strings an input form holds."""
    inputs = CalculationInput(
        income=income,
        supplementary_income=supplementary_income,
        province=province,
        tax_year=tax_year,
    )
    return calculate(inputs, registry=registry, periods_per_year=periods_per_year)


__all__ = [
    "bracket_lines",
    "calculate",
    "calculate_raw",
    "contribution_lines",
]
