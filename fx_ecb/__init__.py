"""Public interface for the fx_ecb package."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from importlib import metadata as importlib_metadata
from typing import Callable, Dict, List, Optional

import requests

from fx_ecb.errors import (
    DateNotFoundError,
    FetchFailedError,
    FxEcbError,
    InvalidAmountError,
    MalformedRateError,
    UnknownCurrencyError,
)
from fx_ecb.ingestion.ecb_xml import EcbFeedClient
from fx_ecb.ingestion.models import (
    DayRates,
    ExchangeRate,
    FeedDocument,
    RawDayEntry,
    RawExchangeRate,
)
from fx_ecb.ingestion.strategy import ExchangeRateProvider, FeedSource
from fx_ecb.utils.date_range import format_xref_date, parse_date
from fx_ecb.utils.ecb import (
    AMOUNT_PRECISION,
    ECB_90D_FEED_URL,
    REFERENCE_CURRENCY,
    REFERENCE_RATE,
)
from fx_ecb.utils.logger import get_logger
from fx_ecb.utils.rounding import float_to_fixed, rounded_rate

__all__ = [
    "__version__",
    "ClientSettings",
    "DateNotFoundError",
    "DayRates",
    "ExchangeRate",
    "ExchangeRateProvider",
    "FetchFailedError",
    "FxEcb",
    "FxEcbError",
    "InvalidAmountError",
    "MalformedRateError",
    "UnknownCurrencyError",
    "float_to_fixed",
    "new",
]

try:
    __version__ = importlib_metadata.version("fx-ecb")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Immutable configuration injected into :class:`FxEcb` at construction.

    ``feed_url`` and ``timeout`` are ``None`` when the client reads from an
    injected :class:`FeedSource` instead of the HTTP transport. The cache
    lifetime lives on :attr:`FxEcb.refresh_interval` since it may change at
    runtime.
    """

    precision: int
    feed_url: str | None = ECB_90D_FEED_URL
    reference_currency: str = REFERENCE_CURRENCY
    reference_rate: float = REFERENCE_RATE
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError("precision must not be negative")


@dataclass(frozen=True, slots=True)
class _CacheState:
    document: FeedDocument
    fetched_at: datetime
    fetched_clock: float


class FxEcb:
    """Converts amounts between currencies using ECB reference rates.

    The client keeps the last successfully downloaded 90-day feed in memory and
    re-downloads it lazily, once ``refresh_interval`` seconds have elapsed. A
    ``refresh_interval`` of zero disables caching so every call hits the feed.
    Instances are not synchronised; share one across threads only with
    external locking.
    """

    __slots__ = ("settings", "refresh_interval", "_source", "_clock", "_cache")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(
        self,
        precision: int = 4,
        refresh_interval: int = 0,
        *,
        feed_url: str = ECB_90D_FEED_URL,
        reference_currency: str = REFERENCE_CURRENCY,
        reference_rate: float = REFERENCE_RATE,
        timeout: float | None = None,
        session: Optional[requests.Session] = None,
        source: FeedSource | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Configure rounding, caching and where the feed comes from.

        ``session`` lets callers tune the HTTP transport (timeouts, adapters,
        proxies). ``source`` replaces the transport altogether and takes
        precedence over ``feed_url``/``session``/``timeout``.
        """

        if refresh_interval < 0:
            raise ValueError("refresh_interval must not be negative")
        self.settings = ClientSettings(
            precision=precision,
            feed_url=feed_url if source is None else None,
            reference_currency=reference_currency,
            reference_rate=reference_rate,
            timeout=timeout if source is None else None,
        )
        self.refresh_interval = refresh_interval
        self._source: FeedSource = source or EcbFeedClient(
            url=feed_url, session=session, timeout=timeout
        )
        self._clock = clock
        self._cache: _CacheState | None = None

    @property
    def precision(self) -> int:
        return self.settings.precision

    @property
    def last_fetched(self) -> datetime | None:
        """UTC timestamp of the last successful download, if any."""

        return self._cache.fetched_at if self._cache is not None else None

    def refresh(self) -> FeedDocument:
        """Download the feed now, replacing the cache only on success."""

        document = self._source.fetch()
        self._cache = _CacheState(
            document=document,
            fetched_at=datetime.now(timezone.utc),
            fetched_clock=self._clock(),
        )
        return document

    def _ensure_fresh(self) -> FeedDocument:
        cache = self._cache
        if cache is not None and self.refresh_interval > 0:
            elapsed = self._clock() - cache.fetched_clock
            if elapsed < self.refresh_interval:
                LOGGER.debug("Using cached ECB feed fetched %.1fs ago", elapsed)
                return cache.document
        return self.refresh()

    def rate(self, rate_date: date | str) -> DayRates:
        """Return the rates published for ``rate_date``, rounded to ``precision``."""

        document = self._ensure_fresh()
        try:
            rate_time = format_xref_date(rate_date)
        except ValueError as exc:
            raise DateNotFoundError(str(rate_date)) from exc
        day = document.find_day(rate_time)
        if day is None:
            raise DateNotFoundError(rate_time)
        return self._resolve_day(day)

    def rates(self) -> Dict[date, DayRates]:
        """Return every published day keyed by date.

        Days without any rates are skipped; a malformed rate on any day aborts
        the whole enumeration.
        """

        document = self._ensure_fresh()
        resolved: Dict[date, DayRates] = {}
        for day in document.days:
            if not day.rates:
                continue
            resolved[parse_date(day.rate_time)] = self._resolve_day(day)
        return resolved

    def convert(
        self,
        amount: float,
        source: str,
        target: str,
        rate_date: date | str,
    ) -> float:
        """Convert ``amount`` of ``source`` currency into ``target`` on ``rate_date``."""

        if not math.isfinite(amount) or amount < 0:
            raise InvalidAmountError(amount)
        day_rates = self.rate(rate_date)
        source_leg, target_leg = self._resolve_pair(day_rates, source, target, rate_date)
        return self._compute_exchange_value(amount, source_leg, target_leg)

    def _resolve_day(self, day: RawDayEntry) -> DayRates:
        if not day.rates:
            raise DateNotFoundError(day.rate_time)
        return DayRates([self._parse_rate(raw) for raw in day.rates])

    def _parse_rate(self, raw: RawExchangeRate) -> ExchangeRate:
        if not raw.currency:
            raise MalformedRateError(raw.currency, raw.rate)
        try:
            value = float(raw.rate)
        except ValueError as exc:
            raise MalformedRateError(raw.currency, raw.rate) from exc
        if not math.isfinite(value):
            raise MalformedRateError(raw.currency, raw.rate)
        return rounded_rate(ExchangeRate(currency=raw.currency, rate=value), self.precision)

    def _reference_leg(self) -> ExchangeRate:
        return ExchangeRate(
            currency=self.settings.reference_currency,
            rate=self.settings.reference_rate,
        )

    def _resolve_pair(
        self,
        day_rates: DayRates,
        source: str,
        target: str,
        rate_date: date | str,
    ) -> tuple[ExchangeRate, ExchangeRate]:
        # The reference currency is implicit in the feed, so it is synthesised.
        legs: List[ExchangeRate | None] = []
        for code in (source, target):
            if code == self.settings.reference_currency:
                legs.append(self._reference_leg())
            else:
                legs.append(day_rates.get(code))
        source_leg, target_leg = legs
        if source_leg is None or target_leg is None:
            raise UnknownCurrencyError(source, target, day_rates.currencies, rate_date)
        return source_leg, target_leg

    def _compute_exchange_value(
        self, amount: float, source_leg: ExchangeRate, target_leg: ExchangeRate
    ) -> float:
        if source_leg.currency == target_leg.currency:
            return self._round(amount)
        if source_leg.rate == 0:
            # A rate rounded down to zero cannot anchor a cross-rate.
            raise MalformedRateError(source_leg.currency, str(source_leg.rate))
        # (target/EUR) / (source/EUR) == target/source
        cross_rate = self._round(target_leg.rate / source_leg.rate)
        return self._round(self._round(amount, AMOUNT_PRECISION) * cross_rate)

    def _round(self, value: float, precision: int | None = None) -> float:
        return float_to_fixed(value, self.precision if precision is None else precision)


def new(
    precision: int = 4,
    refresh_interval: int = 0,
    **options,
) -> ExchangeRateProvider:
    """Return a rate provider backed by a fresh :class:`FxEcb` client.

    ``precision`` sets the rounding of rates and results; ``refresh_interval``
    is how many seconds a downloaded feed stays valid (0 re-downloads on every
    call). Remaining keyword options are forwarded to :class:`FxEcb`.
    """

    return FxEcb(precision, refresh_interval, **options)
