"""ECB-specific constants and invariants used across the package."""

from __future__ import annotations

from typing import Final

ECB_90D_FEED_URL: Final[str] = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-hist-90d.xml"

# Every published rate is quoted against the euro, which never appears in the feed.
REFERENCE_CURRENCY: Final[str] = "EUR"
REFERENCE_RATE: Final[float] = 1.0

XREF_DATE_FORMAT: Final[str] = "%Y-%m-%d"
ECB_WINDOW_MESSAGE: Final[str] = (
    "Records are only available for past 90 days, excluding present day."
)

# Amounts are always rounded to cents before being multiplied by a cross-rate.
AMOUNT_PRECISION: Final[int] = 2


__all__ = [
    "AMOUNT_PRECISION",
    "ECB_90D_FEED_URL",
    "ECB_WINDOW_MESSAGE",
    "REFERENCE_CURRENCY",
    "REFERENCE_RATE",
    "XREF_DATE_FORMAT",
]
