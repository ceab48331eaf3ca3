"""Shared fixtures."""

from __future__ import annotations

import pytest

from belgian_nrn.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; re-read them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
