"""Input normalizer — resolves caller values into canonical digit strings.

Accepted representations, resolved once here so the core only ever sees
a digit string:

- ``str``: decimal digits with an optional leading ``-`` (``DIGIT_STRING``)
- ``numbers.Integral``: Python ``int`` and friends (``BIG_INT``)
- ``float``: the precision-limited native numeric (``NATIVE_INT``); only
  integral values up to ``MAX_SAFE_INTEGER`` are exact

Anything else (lists, tuples, dicts, bytes, ``None``, ``bool``) is rejected
with :class:`~numkit.errors.InvalidTypeError`.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from typing import Any

from pydantic import BaseModel

from numkit.domain.digits import int_to_digits, is_all_nines
from numkit.domain.types import InputKind
from numkit.errors import (
    InvalidArgumentError,
    InvalidTypeError,
    NumkitError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)

MAX_SAFE_INTEGER = 2**53 - 1

_DIGIT_STRING = re.compile(r"-?[0-9]+")


class NormalizedInput(BaseModel):
    """A validated, canonical (no sign, no leading zeros) digit string."""

    model_config = {"frozen": True}

    kind: InputKind
    digits: str


def integral_value(value: Any) -> int | None:
    """``int(value)`` for integer-like values, or None.

    Integer-like means ``numbers.Integral`` (``int``, numpy integers) but not
    ``bool``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return None
    return int(value)


def _reject(error: type[NumkitError], message: str, value: Any) -> NumkitError:
    logger.debug("normalize.rejected: %s (%s)", message, type(value).__name__)
    return error(message, detail={"type": type(value).__name__})


def _resolve(value: Any) -> tuple[InputKind, bool, str]:
    """Return ``(kind, negative, magnitude_digits)`` for *value*."""
    if isinstance(value, bool):
        raise _reject(InvalidTypeError, "expected a number or numeric string, got a bool", value)

    if isinstance(value, str):
        if _DIGIT_STRING.fullmatch(value) is None:
            raise _reject(
                InvalidArgumentError,
                f"expected a decimal digit string, got {value[:32]!r}",
                value,
            )
        negative = value.startswith("-")
        return InputKind.DIGIT_STRING, negative, value.lstrip("-")

    n = integral_value(value)
    if n is not None:
        return InputKind.BIG_INT, n < 0, int_to_digits(abs(n))

    if isinstance(value, float):
        if math.isnan(value) or (math.isfinite(value) and not value.is_integer()):
            raise _reject(InvalidTypeError, f"expected an integral value, got {value!r}", value)
        if abs(value) > MAX_SAFE_INTEGER:
            raise _reject(
                OutOfRangeError,
                f"native numbers must be within ±{MAX_SAFE_INTEGER}; "
                "pass an int or a digit string instead",
                value,
            )
        n = int(value)
        return InputKind.NATIVE_INT, n < 0, str(abs(n))

    raise _reject(
        InvalidTypeError,
        f"expected a numeric string, int, or float, but received {type(value).__name__}",
        value,
    )


def normalize(value: Any, *, max_digits: int, allow_zero: bool = False) -> NormalizedInput:
    """Validate *value* and convert it to its canonical digit string.

    Args:
        value: Caller-supplied number or numeric string.
        max_digits: Longest accepted canonical digit string.
        allow_zero: Accept ``0`` (negative values are always rejected).

    Raises:
        InvalidTypeError: Not integer-like or string-like.
        InvalidArgumentError: A string that is not a decimal integer.
        OutOfRangeError: Non-positive (or negative with *allow_zero*),
            beyond native precision, or longer than *max_digits*.
    """
    kind, negative, magnitude = _resolve(value)
    digits = magnitude.lstrip("0") or "0"

    is_zero = digits == "0"
    if (negative and not is_zero) or (is_zero and not allow_zero):
        expected = "a non-negative" if allow_zero else "a positive (> 0)"
        raise _reject(OutOfRangeError, f"expected {expected} value", value)
    if len(digits) > max_digits:
        raise _reject(
            OutOfRangeError,
            f"value has {len(digits)} digits; the limit is {max_digits}",
            value,
        )

    return NormalizedInput(kind=kind, digits=digits)


def prepare_palindrome_digits(digits: str) -> str:
    """Pre-pad all-nines input with ``"0"`` so the core carries into the next length."""
    if is_all_nines(digits):
        return "0" + digits
    return digits
