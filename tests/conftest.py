"""Pytest configuration for the jres test suite."""

from __future__ import annotations

import logging
import os
from typing import Iterator

import pytest

from packages.jres.config import get_response_settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop JRES_* variables and the cached settings around every test."""
    for key in list(os.environ):
        if key.startswith("JRES_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    get_response_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_response_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolated_logging() -> Iterator[None]:
    """Restore root logging handlers and level after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
