"""Bracket allocation and aggregation engine."""
from __future__ import annotations

from taxcalc.core.allocation import allocate, allocate_with_exemption
from taxcalc.core.engine import calculate, calculate_raw
from taxcalc.core.jurisdictions import JurisdictionRegistry, default_registry
from taxcalc.core.labels import format_currency, label_for
from taxcalc.core.normalize import parse_amount
from taxcalc.core.summary import monthly, net_income, total

__all__ = [
    "JurisdictionRegistry",
    "allocate",
    "allocate_with_exemption",
    "calculate",
    "calculate_raw",
    "default_registry",
    "format_currency",
    "label_for",
    "monthly",
    "net_income",
    "parse_amount",
    "total",
]
