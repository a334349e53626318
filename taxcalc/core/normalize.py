from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

D = Decimal

logger = logging.getLogger("taxcalc.normalize")

_ZERO = D("0")
# largest accepted order of magnitude (999 trillion)
_MAX_ADJUSTED = 14
_DECORATION = ("$", ",", "_", " ", "\u00a0")


def _clean(text: str) -> str:
    cleaned = text.strip()
    for token in _DECORATION:
        cleaned = cleaned.replace(token, "")
    return cleaned.replace("−", "-").replace("–", "-")


def parse_amount(raw: str | int | float | Decimal | None) -> D:
    """Normalize user input to a non-negative Decimal.

    Anything that is not a finite, non-negative decimal numeral becomes zero;
    this never raises, so the caller always has something to compute on.
    """
    if raw is None:
        return _ZERO
    if isinstance(raw, bool):
        logger.debug("Ignoring boolean amount %r; defaulting to 0", raw)
        return _ZERO
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)):
        value = D(str(raw))
    else:
        cleaned = _clean(str(raw))
        if not cleaned:
            return _ZERO
        try:
            value = D(cleaned)
        except InvalidOperation:
            logger.debug("Could not parse amount %r; defaulting to 0", raw)
            return _ZERO
    if not value.is_finite():
        logger.debug("Non-finite amount %r; defaulting to 0", raw)
        return _ZERO
    if value < 0:
        logger.debug("Negative amount %r; defaulting to 0", raw)
        return _ZERO
    if value and value.adjusted() > _MAX_ADJUSTED:
        logger.debug("Amount %r is out of range; defaulting to 0", raw)
        return _ZERO
    # drops the sign bit of -0 without applying context precision
    return value.copy_abs()


__all__ = ["parse_amount"]
