"""Tests for the top-level numkit package surface and bootstrap."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

import numkit
from numkit.services.telemetry import get_current_span, traced


@pytest.fixture
def _restore_logging() -> Generator[None]:
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("numkit").setLevel(logging.NOTSET)
    structlog.reset_defaults()


class TestPublicApi:
    def test_version(self) -> None:
        assert numkit.__version__ == "0.1.0"

    def test_exports(self) -> None:
        for name in numkit.__all__:
            assert hasattr(numkit, name), name

    def test_operations_reachable_from_package(self) -> None:
        assert numkit.next_palindrome(999) == 1001
        assert numkit.primes(10, 30) == [11, 13, 17, 19, 23, 29]
        assert numkit.compress("aaabccc", numkit.CompressStrategy.SCANNING) == "a3bc3"
        assert numkit.is_palindrome(1001)

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(numkit.NumkitError):
            numkit.next_palindrome([1, 2, 3])
        with pytest.raises(numkit.NumkitError):
            numkit.primes(5, 1)

    def test_import_does_not_configure_logging(self) -> None:
        assert logging.getLogger("numkit").level == logging.NOTSET


@pytest.mark.usefixtures("_restore_logging")
class TestBootstrap:
    def test_defaults_quiet(self, tmp_path: Path) -> None:
        settings = numkit.bootstrap(numkit.NumkitSettings.load(start=tmp_path))
        assert settings.verbose is False
        assert logging.getLogger("numkit").level == logging.WARNING

    def test_verbose_enables_telemetry(self, tmp_path: Path) -> None:
        @traced
        def current_span_inside() -> object:
            return get_current_span()

        numkit.bootstrap(numkit.NumkitSettings.load(start=tmp_path, verbose=True))
        assert logging.getLogger("numkit").level == logging.DEBUG
        assert current_span_inside() is not None

    def test_uses_discovered_settings(self, tmp_path: Path) -> None:
        (tmp_path / "numkit.toml").write_text("verbose = true\nlog_json = true\n")
        settings = numkit.bootstrap()
        assert settings.verbose is True
        assert settings.log_json is True
