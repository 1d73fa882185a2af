"""Public run-length compression with strategy selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from numkit.config.settings import get_settings
from numkit.domain.compress import STRATEGIES
from numkit.domain.types import CompressStrategy
from numkit.errors import InvalidArgumentError, InvalidTypeError
from numkit.services.telemetry import get_current_span, traced

if TYPE_CHECKING:
    from numkit.config.settings import NumkitSettings

logger = logging.getLogger(__name__)


def resolve_strategy(
    algorithm: CompressStrategy | str | None, default: CompressStrategy
) -> CompressStrategy:
    """Map a strategy name (or None for *default*) to a :class:`CompressStrategy`."""
    if algorithm is None:
        return default
    try:
        return CompressStrategy(algorithm)
    except ValueError:
        valid = ", ".join(s.value for s in CompressStrategy)
        raise InvalidArgumentError(
            f"unknown compression strategy {algorithm!r}; expected one of: {valid}",
            detail={"algorithm": str(algorithm)},
        ) from None


@traced
def compress(
    text: Any,
    algorithm: CompressStrategy | str | None = None,
    *,
    settings: NumkitSettings | None = None,
) -> str:
    """Run-length encode *text*: ``"aaabccc" -> "a3bc3"``.

    Args:
        text: Any string, including the empty string.
        algorithm: ``"matching"``, ``"lookahead"`` or ``"scanning"``; None
            uses ``settings.compress.default_strategy``.
    """
    if not isinstance(text, str):
        raise InvalidTypeError(
            f"compress expects a str, got {type(text).__name__}",
            detail={"type": type(text).__name__},
        )
    cfg = settings or get_settings()
    strategy = resolve_strategy(algorithm, cfg.compress.default_strategy)

    span = get_current_span()
    if span:
        span.annotate("strategy", strategy.value)
    logger.debug("compress: %d chars via %s", len(text), strategy.value)
    return STRATEGIES[strategy](text)
