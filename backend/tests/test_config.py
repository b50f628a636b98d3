"""Tests for settings and logging configuration."""
import logging

import pytest

from diy_tracker.core.config import Settings
from diy_tracker.core.logging import configure_from_settings

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.store_backend == "file"
    assert settings.store_key == "diy-project-store"
    assert settings.seed_demo_projects is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "redis")
    monkeypatch.setenv("SEED_DEMO_PROJECTS", "true")

    settings = Settings(_env_file=None)

    assert settings.store_backend == "redis"
    assert settings.seed_demo_projects is True


def test_unknown_backend_rejected(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "sqlite")

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_debug_switches_root_level():
    configure_from_settings(Settings(_env_file=None, debug=True))
    assert logging.getLogger().level == logging.DEBUG

    configure_from_settings(Settings(_env_file=None))
    assert logging.getLogger().level == logging.INFO
