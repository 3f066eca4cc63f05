"""Pytest configuration and shared fixtures."""

import pytest

from fieldvalidate.config import reset_settings


@pytest.fixture(autouse=True)
def reset_message_settings():
    """Reset the cached settings before and after each test.

    Settings are read from the environment on first use, so monkeypatched
    variables only take effect once the cache is cleared.
    """
    reset_settings()
    yield
    reset_settings()
