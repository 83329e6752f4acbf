"""Exceptions raised by the fx_ecb client.

Every error is local to the call that raised it; the client instance stays
usable afterwards and previously cached feed data is never discarded.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from fx_ecb.utils.ecb import ECB_WINDOW_MESSAGE


class FxEcbError(Exception):
    """Base class for all fx_ecb errors."""


class FetchFailedError(FxEcbError):
    """The feed could not be downloaded or deserialised."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Unable to fetch exchange rates from {url}: {reason}")


class DateNotFoundError(FxEcbError, LookupError):
    """No usable rates were published for the requested day."""

    def __init__(self, rate_date: str) -> None:
        self.rate_date = rate_date
        super().__init__(f"Currency data for {rate_date} doesn't exist. {ECB_WINDOW_MESSAGE}")


class UnknownCurrencyError(FxEcbError, LookupError):
    """At least one leg of a conversion is not quoted on the requested day."""

    def __init__(
        self, source: str, target: str, available: Sequence[str], rate_date: date | str
    ) -> None:
        self.source = source
        self.target = target
        self.available = list(available)
        self.rate_date = rate_date
        day = rate_date.isoformat() if isinstance(rate_date, date) else rate_date
        super().__init__(
            f"Invalid currencies selected: {source}, {target}. "
            f"List of available currency rates: {', '.join(self.available)} for {day}"
        )


class MalformedRateError(FxEcbError, ValueError):
    """A rate string in the feed is not a finite number."""

    def __init__(self, currency: str, raw_rate: str) -> None:
        self.currency = currency
        self.raw_rate = raw_rate
        super().__init__(f"Invalid input rate value for {currency}, {raw_rate}")


class InvalidAmountError(FxEcbError, ValueError):
    """Conversion amounts must not be negative."""

    def __init__(self, amount: float) -> None:
        self.amount = amount
        super().__init__(f"Amount of conversion currency can't be negative: {amount}")


__all__ = [
    "DateNotFoundError",
    "FetchFailedError",
    "FxEcbError",
    "InvalidAmountError",
    "MalformedRateError",
    "UnknownCurrencyError",
]
