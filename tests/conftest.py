"""
Shared test fixtures for anki-connect tests.
Patches config module to avoid loading a real .env and talking to Anki.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state.
    Prevents tests from reading the real .env or sharing runtime flags."""
    from anki_connect import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "BASE_URL", "http://localhost:8765")
    monkeypatch.setattr(config, "API_KEY", "")
    monkeypatch.setattr(config, "API_VERSION", 6)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "RUNTIME_FORMAT", "text")
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
