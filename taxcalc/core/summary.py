from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from taxcalc.core.models import Summary

D = Decimal

MONTHS_PER_YEAR = 12


def total(result: Iterable[D]) -> D:
    return sum(result, D("0"))


def net_income(gross: D, results: Iterable[Sequence[D]]) -> D:
    return gross - sum((total(r) for r in results), D("0"))


def monthly(annual: D, periods: int = MONTHS_PER_YEAR) -> D:
    if periods < 1:
        raise ValueError("periods must be at least 1")
    return annual / D(periods)


def summarize(
    gross: D,
    federal: Sequence[D],
    provincial: Sequence[D],
    cpp: Sequence[D],
) -> Summary:
    federal_tax = total(federal)
    provincial_tax = total(provincial)
    cpp_total = total(cpp)
    net = net_income(gross, (federal, provincial))
    return Summary(
        gross=gross,
        federal_tax=federal_tax,
        provincial_tax=provincial_tax,
        cpp=cpp_total,
        net_income=net,
        take_home=net - cpp_total,
    )


def monthly_summary(annual: Summary, periods: int = MONTHS_PER_YEAR) -> Summary:
    """Per-period view of ``annual``.

    Each component is divided on its own and the net figures are derived from
    the divided components, so monthly net always equals monthly gross minus
    monthly taxes exactly. Nothing is rounded here.
    """
    gross = monthly(annual.gross, periods)
    federal_tax = monthly(annual.federal_tax, periods)
    provincial_tax = monthly(annual.provincial_tax, periods)
    cpp = monthly(annual.cpp, periods)
    net = gross - federal_tax - provincial_tax
    return Summary(
        gross=gross,
        federal_tax=federal_tax,
        provincial_tax=provincial_tax,
        cpp=cpp,
        net_income=net,
        take_home=net - cpp,
    )


__all__ = [
    "MONTHS_PER_YEAR",
    "monthly",
    "monthly_summary",
    "net_income",
    "summarize",
    "total",
]
