"""Tests for settings loading."""

from app.core.config import BoardConfig, Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("TASKBOARD_BOARD_PASSWORD", raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.database_url.startswith("sqlite+aiosqlite://")
    assert cfg.board_title == "Task Board"
    assert cfg.log_format == "json"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TASKBOARD_BOARD_PASSWORD", "4865")
    monkeypatch.setenv("TASKBOARD_BOARD_TITLE", "Tablero LIDE")
    cfg = Settings(_env_file=None)
    assert cfg.board_password == "4865"
    assert cfg.board_title == "Tablero LIDE"


def test_board_config_from_settings():
    cfg = Settings(_env_file=None, board_password="pw", board_title="Sprint")
    assert cfg.board_config() == BoardConfig(password="pw", title="Sprint")
