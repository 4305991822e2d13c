"""Pytest configuration and shared fixtures."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskparse import config as config_module  # noqa: E402
from taskparse.languages import ENGLISH, FRENCH, GERMAN, SPANISH  # noqa: E402
from taskparse.parser import TaskParser  # noqa: E402


# A Monday
REFERENCE = date(2026, 10, 19)


@pytest.fixture
def reference():
    return REFERENCE


@pytest.fixture
def en():
    return TaskParser(ENGLISH)


@pytest.fixture
def de():
    return TaskParser(GERMAN)


@pytest.fixture
def fr():
    return TaskParser(FRENCH)


@pytest.fixture
def es():
    return TaskParser(SPANISH)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's configuration file."""
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.yaml")
    config_module.Config._instance = None
    yield
    config_module.Config._instance = None
