"""Shared pytest fixtures and test helpers for numkit tests."""

from __future__ import annotations

import numbers
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from numkit.config.settings import reset_settings
from numkit.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test in an empty directory with no NUMKIT_* env vars.

    Keeps a developer's own numkit.toml or environment from leaking into
    the cached settings.
    """
    for key in list(os.environ):
        if key.startswith("NUMKIT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
    disable_telemetry()
    _current_span.set(None)


def brute_force_next_palindrome(n: int) -> int:
    """Reference oracle: count upward until a palindrome appears."""
    candidate = n + 1
    while str(candidate) != str(candidate)[::-1]:
        candidate += 1
    return candidate


class Word:
    """Minimal non-``int`` integer type, like a numpy ``int64`` scalar."""

    def __init__(self, value: int) -> None:
        self.value = value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


numbers.Integral.register(Word)
