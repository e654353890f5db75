import logging

import pytest

from wordfinder.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings, log_level_value


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_defaults(monkeypatch):
    for name in ("MAX_RESULTS", "SHOW_GRID", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    cfg = _fresh_settings()
    assert cfg.MAX_RESULTS == 10
    assert cfg.SHOW_GRID is True
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.DEBUG is False


def test_environment_override(monkeypatch):
    monkeypatch.setenv("MAX_RESULTS", "5")
    monkeypatch.setenv("SHOW_GRID", "false")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    cfg = _fresh_settings()
    assert cfg.MAX_RESULTS == 5
    assert cfg.SHOW_GRID is False
    assert cfg.DEBUG is True
    assert cfg.LOG_LEVEL == "warning"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS
    assert result["SHOW_GRID"] == cfg.SHOW_GRID


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=7)
    assert errors == {}
    assert cfg.MAX_RESULTS == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="3")
    assert errors == {}
    assert cfg.MAX_RESULTS == 3


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, SHOW_GRID="true")
    assert errors == {}
    assert cfg.SHOW_GRID is True

    errors = update_settings(cfg, SHOW_GRID="false")
    assert errors == {}
    assert cfg.SHOW_GRID is False


def test_update_string_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, LOG_LEVEL="DEBUG")
    assert errors == {}
    assert cfg.LOG_LEVEL == "DEBUG"


def test_update_invalid_int_returns_error():
    cfg = _fresh_settings()
    before = cfg.MAX_RESULTS
    errors = update_settings(cfg, MAX_RESULTS="many")
    assert "MAX_RESULTS" in errors
    assert cfg.MAX_RESULTS == before


def test_update_invalid_log_level_returns_error():
    cfg = _fresh_settings()
    before = cfg.LOG_LEVEL
    errors = update_settings(cfg, LOG_LEVEL="loud")
    assert "LOG_LEVEL" in errors
    assert cfg.LOG_LEVEL == before


def test_log_level_value():
    assert log_level_value("debug") == logging.DEBUG
    assert log_level_value(" WARNING ") == logging.WARNING
    with pytest.raises(ValueError):
        log_level_value("loud")


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, LOG_FORMAT="%(message)s")
    assert "LOG_FORMAT" in errors


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=4, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 4
