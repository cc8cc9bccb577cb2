"""Shared fixtures for all tests."""

import os

import pytest

from buildstate.config import Settings, get_settings
from buildstate.variables import VariableManager, VariableStore


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Keep BUILDSTATE_* variables from the environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("BUILDSTATE_"):
            monkeypatch.delenv(key)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults and no .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def store(settings: Settings) -> VariableStore:
    """A fresh character store seeded from the default registry."""
    return VariableStore("CHARACTER", settings=settings)


@pytest.fixture
def manager(settings: Settings) -> VariableManager:
    """A manager with no stores created yet."""
    return VariableManager(settings=settings)
