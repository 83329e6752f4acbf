"""Logging utilities for the fx_ecb package."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "fx_ecb") -> logging.Logger:
    """Return a module-level logger under the ``fx_ecb`` hierarchy.

    The package root only carries a ``NullHandler``; applications decide where
    records go by configuring logging themselves.
    """
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("fx_ecb")
        _LOGGER.addHandler(logging.NullHandler())
    return logging.getLogger(name)
