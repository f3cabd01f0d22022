"""Tests for JSON-lines logging setup."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from strictnum.core.config import LogConfig
from strictnum.core.exceptions import ConfigError
from strictnum.core.logging import JsonLinesFormatter, configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging(LogConfig())


def _lines(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestConfigureLogging:
    def test_writes_json_lines(self, tmp_path):
        configure_logging(LogConfig(path=str(tmp_path), default_file="app.log"))
        logging.getLogger("strictnum.services.txt").warning(
            "Text key missing", extra={"context": {"key": "hello"}}
        )

        [entry] = _lines(tmp_path / "app.log")
        assert entry["level"] == "warning"
        assert entry["category"] == "strictnum.services.txt"
        assert entry["message"] == "Text key missing"
        assert entry["context"] == {"key": "hello"}

    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "var" / "logs"
        configure_logging(LogConfig(path=str(target)))
        logging.getLogger("strictnum").info("started")
        assert (target / "strictnum_app.log").is_file()

    def test_level_filters(self, tmp_path):
        configure_logging(LogConfig(path=str(tmp_path), level="warning"))
        logger = logging.getLogger("strictnum.api")
        logger.info("hidden")
        logger.error("shown")
        assert [e["message"] for e in _lines(tmp_path / "strictnum_app.log")] == ["shown"]

    def test_reconfigure_replaces_handler(self, tmp_path):
        configure_logging(LogConfig(path=str(tmp_path), default_file="first.log"))
        configure_logging(LogConfig(path=str(tmp_path), default_file="second.log"))
        logging.getLogger("strictnum").warning("once")
        assert _lines(tmp_path / "first.log") == []
        assert len(_lines(tmp_path / "second.log")) == 1

    def test_missing_directory_without_auto_create(self, tmp_path):
        with pytest.raises(ConfigError):
            configure_logging(LogConfig(path=str(tmp_path / "absent"), auto_create=False))


class TestValidation:
    def test_max_bytes_minimum(self):
        with pytest.raises(ConfigError):
            configure_logging(LogConfig(max_bytes=512))

    def test_max_files_minimum(self):
        with pytest.raises(ConfigError):
            configure_logging(LogConfig(max_files=0))

    @pytest.mark.parametrize("name", ["", "logs/app.log", "..", "."])
    def test_default_file_must_be_basename(self, name):
        with pytest.raises(ConfigError):
            configure_logging(LogConfig(default_file=name))

    def test_unknown_level(self):
        with pytest.raises(ConfigError):
            configure_logging(LogConfig(level="LOUD"))


class TestJsonLinesFormatter:
    def test_exception_fields(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.getLogger("strictnum").makeRecord(
                "strictnum", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
            )
        entry = json.loads(JsonLinesFormatter().format(record))
        assert entry["error.type"] == "ValueError"
        assert entry["error.message"] == "boom"
        assert "Traceback" in entry["error.stack_trace"]
        assert "context" not in entry
