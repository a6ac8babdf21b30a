"""
Pytest configuration and shared fixtures for gemserver client tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Isolates tests from GEMSERVER_* variables in the environment
"""

import os
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

FakeSession = _common.FakeSession
CountingResolver = _common.CountingResolver
make_backend = _common.make_backend


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove GEMSERVER_* variables and reset the default config."""
    from gemserver.config import set_default_config

    for name in list(os.environ):
        if name.startswith("GEMSERVER_"):
            monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def session():
    """Provide a FakeSession replying 200 OK."""
    return FakeSession()


@pytest.fixture
def resolver():
    """Provide a CountingResolver."""
    return CountingResolver()


@pytest.fixture
def backend(session):
    """Provide a Backend bound to gems.example.com sending through `session`."""
    return make_backend(session)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
