"""Tests for application settings and logging setup."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from sitesearch.config.settings import ObservabilitySettings, Settings
from sitesearch.observability.logging import setup_logging


class TestSettings:
    """Tests for defaults, env overrides and YAML loading."""

    def test_defaults(self, settings: Settings) -> None:
        assert settings.search.default_limit == 10
        assert settings.search.max_limit == 100
        assert settings.search.snippet_context_length == 100
        assert settings.search.corpus_path is None
        assert settings.observability.log_format == "json"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITESEARCH_SEARCH__DEFAULT_LIMIT", "5")
        monkeypatch.setenv("SITESEARCH_SERVER__PORT", "9090")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.search.default_limit == 5
        assert settings.server.port == 9090

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "sitesearch-config.yaml"
        path.write_text("search:\n  corpus_path: content.json\n  max_limit: 20\nobservability:\n  log_format: console\n")

        settings = Settings.from_yaml(path)

        assert settings.search.corpus_path == Path("content.json")
        assert settings.search.max_limit == 20
        assert settings.observability.log_format == "console"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "missing.yaml")

    def test_default_limit_cannot_exceed_max(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, search={"default_limit": 50, "max_limit": 20})  # type: ignore[call-arg]


class TestSetupLogging:
    """Tests for the structlog and stdlib logging setup."""

    @pytest.fixture(autouse=True)
    def _restore_root_logger(self) -> None:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_writes_to_given_stream(self) -> None:
        stream = io.StringIO()
        setup_logging(ObservabilitySettings(log_level="debug"), stream=stream)

        logging.getLogger("sitesearch.test").debug("hello %s", "there")

        assert "hello there" in stream.getvalue()

    def test_json_renderer_for_structlog_loggers(self) -> None:
        import structlog

        stream = io.StringIO()
        setup_logging(ObservabilitySettings(log_level="info", log_format="json"), stream=stream)

        structlog.get_logger("sitesearch.test").info("search_served", total=3)

        line = stream.getvalue().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "search_served"
        assert payload["total"] == 3
        assert payload["service"] == "sitesearch"

    def test_unknown_level_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(ObservabilitySettings(log_level="verbose"))
