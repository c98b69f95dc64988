from __future__ import annotations

import logging

from friendbook.core import config as core_config
from friendbook.core.logging_config import setup_logging


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp.db")
    monkeypatch.setenv("SEED_COUNT", "not-a-number")
    monkeypatch.setenv("CREATE_TABLES", "no")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.app_env == "prod"
        assert settings.database_url == "sqlite:///tmp.db"
        assert settings.seed_count == 50
        assert settings.create_tables is False
    finally:
        core_config.get_settings.cache_clear()


def test_setup_logging_does_not_stack_handlers(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("debug", str(tmp_path / "app.log"))
    setup_logging("info")

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    for handler in root.handlers:
        handler.close()
