"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides from the caller
  2. Env vars     — ``NUMKIT_*`` prefix
  3. TOML file    — ``numkit.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`numkit.config.discovery`.
"""

from __future__ import annotations

import functools
import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from numkit.config.discovery import find_config, read_toml
from numkit.config.models import CompressConfig, PalindromeConfig, SieveConfig
from numkit.errors import ConfigError


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``numkit.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class NumkitSettings(BaseSettings):
    """Unified settings for every numkit operation.

    Merges explicit overrides, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Enable DEBUG logging and span telemetry in :func:`numkit.bootstrap`.
        log_json: Emit JSON log lines instead of console-rendered ones.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NUMKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    verbose: bool = False
    log_json: bool = False

    palindrome: PalindromeConfig = Field(default_factory=PalindromeConfig)
    sieve: SieveConfig = Field(default_factory=SieveConfig)
    compress: CompressConfig = Field(default_factory=CompressConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> NumkitSettings:
        """Construct settings, discovering ``numkit.toml`` unless *config_path* is given.

        Discovery walks up from *start* (default: cwd). *overrides* take
        priority over every other source.

        Raises:
            ConfigError: *config_path* is not a file, or the TOML is invalid.
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                raise ConfigError(
                    f"Config file not found: {toml_path}", detail={"path": str(toml_path)}
                )
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


@functools.cache
def get_settings() -> NumkitSettings:
    """Process-wide settings, discovered once from the current directory."""
    return NumkitSettings.load()


def reset_settings() -> None:
    """Forget cached settings so the next :func:`get_settings` re-discovers them."""
    get_settings.cache_clear()
