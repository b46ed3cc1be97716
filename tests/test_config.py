"""Tests for environment configuration."""

import importlib

from skillrouter import config


def test_application_id_read_from_environment(monkeypatch):
    monkeypatch.setenv("SKILL_APPLICATION_ID", "amzn1.ask.skill.env")
    monkeypatch.setenv("SKILL_PORT", "9001")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.SKILL_APPLICATION_ID == "amzn1.ask.skill.env"
        assert reloaded.PORT == 9001
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_defaults(monkeypatch):
    monkeypatch.delenv("SKILL_APPLICATION_ID", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: False)
    try:
        reloaded = importlib.reload(config)
        assert reloaded.SKILL_APPLICATION_ID == ""
        assert reloaded.LOG_LEVEL == "INFO"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
