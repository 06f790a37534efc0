"""
Shared test fixtures for debugstr tests.
Patches config module so tests never depend on a real .env or on flags
left behind by a previous CLI run.
"""

import os
import sys

import pytest

# Add project root to path so imports work without an install
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from debugstr import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "MAX_LINE_LENGTH", config.DEFAULT_MAX_LINE_LENGTH)
    monkeypatch.setattr(config, "LOG_ENABLED", False)
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)
