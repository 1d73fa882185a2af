"""Public palindrome operations: ``next_palindrome`` and ``is_palindrome``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from numkit.config.settings import get_settings
from numkit.domain.digits import is_palindrome_digits
from numkit.domain.palindrome import next_palindrome_digits
from numkit.services.normalize import normalize, prepare_palindrome_digits
from numkit.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from numkit.config.settings import NumkitSettings

logger = logging.getLogger(__name__)


@traced
def next_palindrome(value: Any, *, settings: NumkitSettings | None = None) -> int:
    """Return the smallest palindrome strictly greater than *value*.

    *value* may be an ``int``, an integral ``float`` no larger than
    ``2**53 - 1``, or a decimal digit string of up to
    ``settings.palindrome.max_digits`` digits.

    Examples:
        >>> next_palindrome(123)
        131
        >>> next_palindrome("999")
        1001
    """
    cfg = settings or get_settings()

    with trace_span("normalize") as span:
        normalized = normalize(value, max_digits=cfg.palindrome.max_digits)
        if span:
            span.annotate("kind", normalized.kind.value)
            span.annotate("digits", len(normalized.digits))

    with trace_span("mirror"):
        result = next_palindrome_digits(prepare_palindrome_digits(normalized.digits))

    logger.debug(
        "next_palindrome: %s input of %d digits",
        normalized.kind.value,
        len(normalized.digits),
    )
    return result


@traced
def is_palindrome(value: Any, *, settings: NumkitSettings | None = None) -> bool:
    """Whether the non-negative *value* reads the same forwards and backwards."""
    cfg = settings or get_settings()
    normalized = normalize(value, max_digits=cfg.palindrome.max_digits, allow_zero=True)
    return is_palindrome_digits(normalized.digits)
