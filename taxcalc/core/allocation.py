from __future__ import annotations

from decimal import Decimal
from typing import Iterator, Sequence

D = Decimal

AllocationResult = tuple[D, ...]
ContributionResult = tuple[D, ...]

_ZERO = D("0")


def _walk(
    start: D,
    widths: Sequence[D | None],
    rates: Sequence[D],
) -> Iterator[tuple[D, D | None, D]]:
    """Yield ``(remaining, width, rate)`` for each bracket in table order.

    ``remaining`` is what is left to place before the bracket is applied. A
    missing or ``None`` width is the open top bracket and drains the rest.
    """
    remaining = start
    for index, rate in enumerate(rates):
        width = widths[index] if index < len(widths) else None
        yield remaining, width, rate
        if width is None:
            remaining = _ZERO
        else:
            remaining -= width


def allocate(
    amount: D,
    widths: Sequence[D | None],
    rates: Sequence[D],
) -> AllocationResult:
    """Split ``amount`` across marginal brackets and apply each bracket's rate.

    Stops at the first bracket with nothing left to place, so the result only
    covers the brackets the amount actually reaches.
    """
    taxed: list[D] = []
    for remaining, width, rate in _walk(amount, widths, rates):
        if remaining <= 0:
            break
        portion = remaining if width is None else min(width, remaining)
        taxed.append(portion * rate)
    return tuple(taxed)


def allocate_with_exemption(
    amount: D,
    exemption: D,
    widths: Sequence[D],
    rates: Sequence[D],
) -> ContributionResult:
    """Contribution per tier on ``amount - exemption``, capped at the last tier.

    Always reports one entry per tier; tiers the base does not reach are zero.
    """
    if len(widths) != len(rates):
        raise ValueError("Contribution widths and rates must be the same length")
    contributed: list[D] = []
    for remaining, width, rate in _walk(amount - exemption, widths, rates):
        if remaining > 0:
            contributed.append(min(width, remaining) * rate)
        else:
            contributed.append(_ZERO)
    return tuple(contributed)


__all__ = [
    "AllocationResult",
    "ContributionResult",
    "allocate",
    "allocate_with_exemption",
]
