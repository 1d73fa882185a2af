"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from numkit.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger and structlog state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    numkit = logging.getLogger("numkit")
    numkit_level = numkit.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    numkit.setLevel(numkit_level)
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("numkit").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("numkit").level == logging.WARNING

    def test_human_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        structlog.get_logger("numkit.test").warning("hello world", key="val")
        captured = capfd.readouterr()
        assert "hello world" in captured.err

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("numkit.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "numkit.test"
        assert "timestamp" in parsed

    def test_stdlib_module_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("numkit.services.compress").debug("compress: 3 chars via matching")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "compress: 3 chars via matching"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "numkit.services.compress"

    def test_json_mode_renders_exceptions(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        try:
            raise RuntimeError("sieve exploded")
        except RuntimeError:
            logging.getLogger("numkit.services.primes").exception("primes failed")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "primes failed"
        assert parsed["level"] == "error"
        assert "RuntimeError: sieve exploded" in parsed["exception"]
        assert "exc_info" not in parsed

    def test_json_mode_has_only_expected_keys(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("numkit.test").warning("lean")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert set(parsed) == {"event", "level", "logger", "timestamp"}

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("numkit.services.palindrome").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
