import logging

from config.logging_config import apply_logging_config, get_logging_config

PROFILE_KEYS = {"default_level", "console_format", "suppress_modules", "environment"}


def test_development_profile(monkeypatch):
    monkeypatch.delenv("RENDER", raising=False)
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.setenv("DEBUG", "false")
    config = get_logging_config()
    assert config["environment"] == "development"
    assert config["default_level"] == "INFO"
    assert set(config) == PROFILE_KEYS


def test_production_profile_suppresses_engine_modules(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("DEBUG", "false")
    config = get_logging_config()
    assert config["environment"] == "production"
    assert "palette_engine.generation.accessible_search" in config["suppress_modules"]
    assert set(config) == PROFILE_KEYS


def test_debug_profile_wins(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("DEBUG", "true")
    config = get_logging_config()
    assert config["environment"] == "debug"
    assert set(config) == PROFILE_KEYS


def test_apply_sets_levels(monkeypatch):
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("DEBUG", "false")
    try:
        apply_logging_config()
        assert root.level == logging.WARNING
        assert logging.getLogger("palette_engine.generation.accessible_search").level == logging.WARNING
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
        logging.getLogger("palette_engine.generation.accessible_search").setLevel(logging.NOTSET)
