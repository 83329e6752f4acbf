from __future__ import annotations

from typing import Callable

import pytest
import requests

from fx_ecb.ingestion.ecb_xml import parse_ecb_feed
from fx_ecb.ingestion.models import FeedDocument

ECB_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
    <gesmes:subject>Reference rates</gesmes:subject>
    <gesmes:Sender>
        <gesmes:name>European Central Bank</gesmes:name>
    </gesmes:Sender>
    <Cube>
        <Cube time="2016-11-11">
            <Cube currency="USD" rate="1.002"/>
            <Cube currency="CHF" rate="1.03"/>
            <Cube currency="PLN" rate="0.321"/>
            <Cube currency="XYZ" rate="1.9999999"/>
        </Cube>
        <Cube time="2016-11-10">
            <Cube currency="USD" rate="1.003123142"/>
            <Cube currency="PLN" rate="0.3211231231"/>
            <Cube currency="XYZ" rate="2.00001999"/>
        </Cube>
        <Cube time="2016-11-09">
            <Cube currency="USD" rate="2.999999"/>
        </Cube>
        <Cube time="2016-11-08">
        </Cube>
    </Cube>
</gesmes:Envelope>
"""


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Stand-in for ``requests.Session`` that replays queued responses."""

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self.responses = list(responses) or [FakeResponse(ECB_XML)]
        self.calls: list[tuple[str, float | None]] = []

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        self.calls.append((url, timeout))
        # The last queued response is replayed once the queue is drained.
        outcome = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        return None


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def ecb_xml() -> bytes:
    return ECB_XML


@pytest.fixture
def feed_document() -> FeedDocument:
    return parse_ecb_feed(ECB_XML)


@pytest.fixture
def session_factory() -> Callable[..., FakeSession]:
    return FakeSession


@pytest.fixture
def response_factory() -> Callable[..., FakeResponse]:
    return FakeResponse


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
