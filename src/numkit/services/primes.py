"""Public prime sieve with bound validation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from numkit.config.settings import get_settings
from numkit.domain.sieve import sieve_primes
from numkit.errors import InvalidArgumentError, InvalidTypeError
from numkit.services.normalize import integral_value
from numkit.services.telemetry import get_current_span, traced

if TYPE_CHECKING:
    from numkit.config.settings import NumkitSettings

logger = logging.getLogger(__name__)


def _check_bound(name: str, bound: Any) -> int:
    value = integral_value(bound)
    if value is None:
        logger.debug("primes.rejected: %s is %s", name, type(bound).__name__)
        raise InvalidTypeError(
            f"{name} must be an integer, got {type(bound).__name__}",
            detail={name: repr(bound)},
        )
    if value < 0:
        logger.debug("primes.rejected: negative %s", name)
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}", detail={name: value})
    return value


@traced
def primes(start: int, end: int, *, settings: NumkitSettings | None = None) -> list[int]:
    """Return all primes ``p`` with ``start <= p <= end``, ascending.

    Raises:
        InvalidTypeError: A bound is not an int.
        InvalidArgumentError: A bound is negative, ``start > end``, or
            ``end`` exceeds ``settings.sieve.max_end``.
    """
    cfg = settings or get_settings()
    start = _check_bound("start", start)
    end = _check_bound("end", end)

    if start > end:
        logger.debug("primes.rejected: start %d > end %d", start, end)
        raise InvalidArgumentError(
            f"start ({start}) must not exceed end ({end})",
            detail={"start": start, "end": end},
        )
    if end > cfg.sieve.max_end:
        logger.debug("primes.rejected: end %d above max_end %d", end, cfg.sieve.max_end)
        raise InvalidArgumentError(
            f"end ({end}) exceeds the configured sieve limit ({cfg.sieve.max_end})",
            detail={"end": end, "max_end": cfg.sieve.max_end},
        )

    found = sieve_primes(start, end)
    span = get_current_span()
    if span:
        span.annotate("count", len(found))
    return found
