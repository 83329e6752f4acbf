"""Download and deserialise the ECB euro foreign exchange reference rate feed."""

from __future__ import annotations

import warnings
from typing import Optional

import requests
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from fx_ecb.errors import FetchFailedError
from fx_ecb.ingestion.models import FeedDocument, RawDayEntry, RawExchangeRate
from fx_ecb.utils.date_range import is_xref_date
from fx_ecb.utils.ecb import ECB_90D_FEED_URL
from fx_ecb.utils.logger import get_logger

LOGGER = get_logger(__name__)


def parse_ecb_feed(document: str | bytes) -> FeedDocument:
    """Parse the ECB ``<Cube>`` hierarchy into a :class:`FeedDocument`.

    The envelope nests one ``<Cube time="YYYY-MM-DD">`` per day inside an
    outer ``<Cube>``, and each day holds ``<Cube currency=".." rate=".."/>``
    entries. Rate values stay unparsed; only the envelope and day stamps are
    validated here.
    ``html.parser`` folds tag and attribute names to lower case, which is why
    lookups below use ``cube``.
    """

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        soup = BeautifulSoup(document, "html.parser")
    root = soup.find("cube")
    if root is None:
        raise ValueError("No rate cube found in supplied document")

    days: list[RawDayEntry] = []
    for day in root.find_all("cube", attrs={"time": True}):
        rate_time = day["time"].strip()
        if not is_xref_date(rate_time):
            raise ValueError(f"Invalid date stamp in feed: {rate_time!r}")
        rates: list[RawExchangeRate] = []
        for entry in day.find_all("cube"):
            # Missing attributes surface as malformed rates when the day is looked up.
            currency = entry.get("currency", "")
            rate = entry.get("rate", "")
            rates.append(RawExchangeRate(currency=currency.strip(), rate=rate.strip()))
        days.append(RawDayEntry(rate_time=rate_time, rates=tuple(rates)))
    return FeedDocument(days=tuple(days))


class EcbFeedClient:
    """Blocking, single-shot downloader for the ECB reference rate XML."""

    def __init__(
        self,
        *,
        url: str = ECB_90D_FEED_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self) -> FeedDocument:
        """Download and parse the feed, raising :class:`FetchFailedError` on failure."""

        LOGGER.debug("Downloading ECB reference rates from %s", self.url)
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchFailedError(self.url, str(exc)) from exc
        try:
            document = parse_ecb_feed(response.content)
        except ValueError as exc:
            raise FetchFailedError(self.url, str(exc)) from exc
        LOGGER.debug("Fetched %s days of ECB reference rates", len(document.days))
        return document

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "EcbFeedClient":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # pragma: no cover - trivial
        self.close()


__all__ = ["EcbFeedClient", "parse_ecb_feed"]
