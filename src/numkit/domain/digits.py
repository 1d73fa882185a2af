"""Digit-string primitives used by the palindrome generator.

A digit string is a non-empty ``str`` of ASCII ``0-9`` characters
representing a non-negative base-10 integer.

CPython refuses ``int(s)`` / ``str(n)`` beyond ``sys.get_int_max_str_digits()``
digits (4300 by default). :func:`digits_to_int` and :func:`int_to_digits`
split the work into chunks below the interpreter's minimum limit so that
million-digit values convert exactly without touching the global setting.
"""

from __future__ import annotations

import functools
import math

# Below the smallest value sys.set_int_max_str_digits() accepts (640).
_CHUNK_DIGITS = 512
_CHUNK_LIMIT = 10**_CHUNK_DIGITS
_LOG10_2 = math.log10(2)


def reverse(s: str) -> str:
    """Return *s* with its character order inverted."""
    return s[::-1]


def drop_last(s: str) -> str:
    """Return *s* without its final character.

    The caller guarantees *s* is non-empty.
    """
    return s[:-1]


def is_odd_length(s: str) -> bool:
    return len(s) % 2 == 1


def is_all_nines(s: str) -> bool:
    """True for ``"9"``, ``"99"``, ...; False for the empty string."""
    return bool(s) and s.strip("9") == ""


def is_palindrome_digits(s: str) -> bool:
    return s == reverse(s)


def increment_digits(s: str) -> str:
    """Add one to a digit string by carry propagation.

    Leading zeros survive unless the carry reaches them.

    Examples:
        >>> increment_digits("129")
        '130'
        >>> increment_digits("09")
        '10'
        >>> increment_digits("999")
        '1000'
    """
    head = s.rstrip("9")
    carried = len(s) - len(head)
    if not head:
        return "1" + "0" * carried
    return head[:-1] + str(int(head[-1]) + 1) + "0" * carried


@functools.lru_cache(maxsize=64)
def _pow10(exponent: int) -> int:
    return 10**exponent


def digits_to_int(s: str) -> int:
    """Parse a digit string of any length into an ``int``."""
    if len(s) <= _CHUNK_DIGITS:
        return int(s)
    low_len = len(s) // 2
    high = digits_to_int(s[:-low_len])
    low = digits_to_int(s[-low_len:])
    return high * _pow10(low_len) + low


def int_to_digits(n: int) -> str:
    """Render a non-negative ``int`` of any size as a digit string."""
    if n < _CHUNK_LIMIT:
        return str(n)
    # bit_length * log10(2) never overestimates the digit count by a whole
    # digit, so the high part is always non-zero.
    low_len = max(_CHUNK_DIGITS, int(n.bit_length() * _LOG10_2) // 2)
    high, low = divmod(n, _pow10(low_len))
    return int_to_digits(high) + int_to_digits(low).zfill(low_len)
