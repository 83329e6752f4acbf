"""Abstractions for pluggable feed sources and rate providers."""

from __future__ import annotations

from datetime import date
from typing import Protocol

from fx_ecb.ingestion.models import DayRates, FeedDocument


class FeedSource(Protocol):
    """Contract for retrieving the raw ECB document.

    Implementations perform a single blocking download and return the fully
    deserialised document, raising :class:`fx_ecb.errors.FetchFailedError` on
    any transport or parse failure.
    """

    def fetch(self) -> FeedDocument:
        ...  # pragma: no cover - protocol definition


class ExchangeRateProvider(Protocol):
    """Capabilities exposed by :func:`fx_ecb.new`."""

    def rate(self, rate_date: date | str) -> DayRates:
        ...  # pragma: no cover - protocol definition

    def rates(self) -> dict[date, DayRates]:
        ...  # pragma: no cover - protocol definition

    def convert(
        self, amount: float, source: str, target: str, rate_date: date | str
    ) -> float:
        ...  # pragma: no cover - protocol definition


__all__ = ["ExchangeRateProvider", "FeedSource"]
