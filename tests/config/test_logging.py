"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from roadhub.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("roadhub").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("roadhub").level == logging.WARNING

    def test_human_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        structlog.get_logger("roadhub.test").warning("hello roads", city=3)
        captured = capfd.readouterr()
        assert "hello roads" in captured.err
        assert captured.out == ""

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("roadhub.test").warning("json test", capital=3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["capital"] == 3
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "roadhub.test"
        assert "timestamp" in parsed

    def test_stdlib_loggers_get_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("roadhub.domain.capital").debug("Election over 4 cities")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Election over 4 cities"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "roadhub.domain.capital"

    def test_debug_hidden_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("roadhub.domain.roads").debug("Built road map")
        assert capfd.readouterr().err == ""

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("networkx").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
