"""Shared test configuration and fixtures."""

import pytest

from gemtext.config import HEADING_MODE_ENV, PRESERVE_PRE_NEWLINES_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep parser options from the developer's shell or .env out of the tests."""
    monkeypatch.delenv(HEADING_MODE_ENV, raising=False)
    monkeypatch.delenv(PRESERVE_PRE_NEWLINES_ENV, raising=False)
