"""Utility helpers for normalising ECB reference dates."""

from __future__ import annotations

from datetime import date, datetime

from fx_ecb.utils.ecb import XREF_DATE_FORMAT


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`.

    ``datetime`` instances are truncated to their calendar day.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), XREF_DATE_FORMAT).date()


def format_xref_date(value: str | date) -> str:
    """Return ``value`` in the ``YYYY-MM-DD`` layout used by the ECB feed."""

    return parse_date(value).strftime(XREF_DATE_FORMAT)


def is_xref_date(value: str) -> bool:
    """Return True when ``value`` is a valid ``YYYY-MM-DD`` date stamp."""

    try:
        parse_date(value)
    except ValueError:
        return False
    return True


__all__ = ["format_xref_date", "is_xref_date", "parse_date"]
