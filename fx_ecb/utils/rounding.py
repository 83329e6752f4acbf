"""Fixed-point rounding helpers."""

from __future__ import annotations

import math

from fx_ecb.ingestion.models import ExchangeRate

MIN_PRECISION = 1


def float_to_fixed(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` fractional digits, half away from zero.

    Precision below one is promoted to one digit.
    """

    if precision < MIN_PRECISION:
        precision = MIN_PRECISION
    try:
        exp = 10.0**precision
    except OverflowError:
        return value
    shifted = abs(value) * exp
    if not math.isfinite(shifted):
        # No fractional digits are representable at this magnitude.
        return value
    scaled = math.floor(shifted + 0.5)
    return math.copysign(scaled / exp, value)


def rounded_rate(rate: ExchangeRate, precision: int) -> ExchangeRate:
    """Return a copy of ``rate`` with its value rounded to ``precision``."""

    return ExchangeRate(currency=rate.currency, rate=float_to_fixed(rate.rate, precision))


__all__ = ["MIN_PRECISION", "float_to_fixed", "rounded_rate"]
