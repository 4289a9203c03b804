"""Tests for settings and logging processors."""

import pytest
from pydantic import ValidationError

from core.config import Settings
from core.logging import LoggerRegistry, _redact_subjects, get_shared_processors


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("LOG_LEVEL", "LOG_JSON", "REGISTRY_TRACE"):
            monkeypatch.delenv(key, raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False
        assert settings.REGISTRY_TRACE is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("REGISTRY_TRACE", "true")
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.REGISTRY_TRACE is True

    def test_unknown_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:
    def test_subjects_redacted(self):
        event = {"event": "x", "subject": "secret@example.com", "predicate": "isEmail",
                 "extra": {"value": "abc", "kept": 1}}
        redacted = _redact_subjects(None, "info", event)
        assert redacted["subject"] == "[REDACTED]"
        assert redacted["predicate"] == "isEmail"
        assert redacted["extra"] == {"value": "[REDACTED]", "kept": 1}

    def test_redaction_runs_last(self):
        assert get_shared_processors()[-1] is _redact_subjects

    def test_logger_registry_caches_by_name(self):
        assert LoggerRegistry.get("registry") is LoggerRegistry.get("registry")
