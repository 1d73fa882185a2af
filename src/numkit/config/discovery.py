"""Config file discovery and TOML parsing.

Walk-up finder locates numkit.toml, similar to how git finds .git/.
Supports the NUMKIT_CONFIG env var override.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from numkit.errors import ConfigError

CONFIG_FILENAME = "numkit.toml"
CONFIG_ENV_VAR = "NUMKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for numkit.toml.

    Returns the path to the config file, or None if not found.
    Checks NUMKIT_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, raising :class:`ConfigError` on bad syntax."""
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path}: {exc}", detail={"path": str(path)}
        ) from exc
