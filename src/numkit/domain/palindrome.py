"""Next-palindrome core — symmetric digit manipulation, no search.

Nomenclature for a digit string ``D`` of length ``L``:

- even ``L`` (``"123456"``): left | middle | right = ``"123" | "" | "456"``
- odd ``L`` (``"1234567"``): left | middle | right = ``"123" | "4" | "567"``

The *basis* is ``left + middle``; mirroring ``left`` onto the right half
always yields a palindrome. It exceeds ``D`` exactly when the original
right half is smaller than the mirror, otherwise the basis is bumped by one
first (which may lengthen it, e.g. ``"099" -> "100"``).

INVARIANT: Input must not be all nines. Callers pre-pad such strings with a
leading ``"0"`` so the carry produces the next-length palindrome
(``"999" -> "0999" -> 1001``).
"""

from __future__ import annotations

from typing import NamedTuple

from numkit.domain.digits import (
    digits_to_int,
    drop_last,
    increment_digits,
    is_odd_length,
    reverse,
)


class DigitSplit(NamedTuple):
    """A digit string cut around its midpoint."""

    left: str
    middle: str
    right: str

    @property
    def is_odd(self) -> bool:
        return self.middle != ""

    @property
    def basis(self) -> str:
        return self.left + self.middle

    @property
    def mirror(self) -> str:
        return reverse(self.left)


def split_digits(digits: str) -> DigitSplit:
    """Cut *digits* into ``(left, middle, right)``.

    Examples:
        >>> split_digits("123456")
        DigitSplit(left='123', middle='', right='456')
        >>> split_digits("1234567")
        DigitSplit(left='123', middle='4', right='567')
    """
    pivot = len(digits) // 2
    if is_odd_length(digits):
        return DigitSplit(digits[:pivot], digits[pivot], digits[pivot + 1 :])
    return DigitSplit(digits[:pivot], "", digits[pivot:])


def next_palindrome_digits(digits: str) -> int:
    """Return the smallest palindrome strictly greater than *digits*."""
    split = split_digits(digits)
    basis = split.basis
    mirror = split.mirror

    # Equal-length strings compare lexicographically as numbers do.
    if split.right >= mirror:
        basis = increment_digits(basis)
        mirror = reverse(drop_last(basis) if split.is_odd else basis)

    return digits_to_int(basis + mirror)
