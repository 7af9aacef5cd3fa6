"""
Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides
shared fixtures for all tests.
"""

import pytest

from featspace.colset import ColSet
from featspace.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """
    Give each test freshly loaded default settings.

    Clears any FEATSPACE_* variables from the environment and drops the
    cached Settings so overrides in one test cannot leak into another.
    """
    for name in ("FEATSPACE_LOG_LEVEL", "FEATSPACE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def foo_bar_baz():
    """The three-feature list used throughout the examples."""
    return ["foo", "bar", "baz"]


@pytest.fixture
def foo_bar_baz_colset(foo_bar_baz):
    return ColSet.new(foo_bar_baz)
