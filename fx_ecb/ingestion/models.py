"""Data models shared across ingestion modules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True)
class RawExchangeRate:
    """Single currency record as published in the ECB XML feed.

    ``rate`` stays unparsed until a lookup consumes it.
    """

    currency: str
    rate: str


@dataclass(frozen=True, slots=True)
class RawDayEntry:
    """All currency records published for one calendar day."""

    rate_time: str
    rates: tuple[RawExchangeRate, ...] = ()


@dataclass(frozen=True, slots=True)
class FeedDocument:
    """Deserialised ECB document; days are most-recent-first as published."""

    days: tuple[RawDayEntry, ...] = ()

    def find_day(self, rate_time: str) -> RawDayEntry | None:
        """Return the first day whose date stamp equals ``rate_time``."""

        for day in self.days:
            if day.rate_time == rate_time:
                return day
        return None


@dataclass(slots=True)
class ExchangeRate:
    """Parsed and rounded rate of ``currency`` relative to the reference currency."""

    currency: str
    rate: float


@dataclass(slots=True)
class DayRates(Sequence):
    """Ordered collection of :class:`ExchangeRate` values for one day."""

    items: list[ExchangeRate] = field(default_factory=list)

    def __getitem__(self, index):  # type: ignore[override]
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ExchangeRate]:
        return iter(self.items)

    @property
    def currencies(self) -> list[str]:
        return [item.currency for item in self.items]

    def get(self, currency: str) -> ExchangeRate | None:
        """Return the entry for ``currency`` (exact, case-sensitive) or ``None``."""

        for item in self.items:
            if item.currency == currency:
                return item
        return None

    def as_dict(self) -> dict[str, float]:
        """Collapse the collection into a ``{currency: rate}`` mapping."""

        return {item.currency: item.rate for item in self.items}


__all__ = ["DayRates", "ExchangeRate", "FeedDocument", "RawDayEntry", "RawExchangeRate"]
