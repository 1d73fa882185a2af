"""One-call runtime setup for applications embedding numkit.

Configures structured logging from settings and enables span telemetry
when verbose. Importing numkit never does this implicitly.
"""

from __future__ import annotations

from numkit.config.logging import configure_logging
from numkit.config.settings import NumkitSettings, get_settings
from numkit.services.telemetry import disable_telemetry, enable_telemetry


def bootstrap(settings: NumkitSettings | None = None) -> NumkitSettings:
    """Apply *settings* (default: discovered settings) to logging and telemetry.

    Returns the settings that were applied.
    """
    settings = settings or get_settings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    if settings.verbose:
        enable_telemetry()
    else:
        disable_telemetry()
    return settings
