"""Shared pytest fixtures."""

import pytest

from formfields.settings import reset_settings


@pytest.fixture(autouse=True)
def default_settings():
    """Restore the library-wide settings around every test."""
    reset_settings()
    yield
    reset_settings()
