from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Callable, Sequence

D = Decimal

_CENT = D("0.01")
RANGE_DASH = "–"

Formatter = Callable[[D], str]


def format_currency(value: D | int | float) -> str:
    amount = value if isinstance(value, Decimal) else D(str(value))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        rounded = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    if rounded < 0:
        return f"-${rounded.copy_negate():,.2f}"
    return f"${rounded:,.2f}"


def format_rate(rate: D | float) -> str:
    percent = (rate if isinstance(rate, Decimal) else D(str(rate))) * 100
    return f"{percent.quantize(_CENT, rounding=ROUND_HALF_UP)}%"


def cumulative_before(widths: Sequence[D], index: int) -> D:
    return sum(widths[:index], D("0"))


def label_for(widths: Sequence[D], index: int, fmt: Formatter = format_currency) -> str:
    """Human-readable range for bracket ``index`` of a table with ``widths``.

    ``index == len(widths)`` addresses the open top bracket.
    """
    if index < 0 or index > len(widths):
        raise ValueError(f"Bracket index {index} outside 0..{len(widths)}")
    if index == 0:
        if not widths:
            return f"over {fmt(D('0'))}"
        return f"before {fmt(cumulative_before(widths, 1))}"
    if index == len(widths):
        return f"over {fmt(cumulative_before(widths, index))}"
    low = cumulative_before(widths, index)
    high = cumulative_before(widths, index + 1)
    return f"{fmt(low)} {RANGE_DASH} {fmt(high)}"


def contribution_label_for(
    exemption: D,
    widths: Sequence[D],
    index: int,
    fmt: Formatter = format_currency,
) -> str:
    """Range for contribution tier ``index``; ``-1`` is the exempt band."""
    if index == -1:
        return f"{fmt(D('0'))} {RANGE_DASH} {fmt(exemption)}"
    if index < 0 or index >= len(widths):
        raise ValueError(f"Contribution tier {index} outside 0..{len(widths) - 1}")
    low = exemption + cumulative_before(widths, index)
    high = exemption + cumulative_before(widths, index + 1)
    return f"{fmt(low)} {RANGE_DASH} {fmt(high)}"


__all__ = [
    "RANGE_DASH",
    "contribution_label_for",
    "cumulative_before",
    "format_currency",
    "format_rate",
    "label_for",
]
