"""Test configuration helpers and shared fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("SETTINGS_SKIP_DOTENV", "1")


@pytest.fixture(autouse=True)
def _restore_settings():
    """Put the settings singleton back after tests that rebuild or replace it."""

    from delamain import config

    original = config.settings
    yield
    config.settings = original


@pytest.fixture
def use_settings(monkeypatch):
    """Install a :class:`Settings` instance built from explicit overrides."""

    from delamain import config

    def _install(**overrides):
        replacement = config.Settings(**overrides)
        monkeypatch.setattr(config, "settings", replacement)
        return replacement

    return _install
