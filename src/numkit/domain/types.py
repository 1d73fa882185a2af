"""Classification enums shared by the domain and service layers."""

from __future__ import annotations

from enum import StrEnum


class InputKind(StrEnum):
    """How a caller's value was represented before normalization."""

    NATIVE_INT = "native_int"
    BIG_INT = "big_int"
    DIGIT_STRING = "digit_string"


class CompressStrategy(StrEnum):
    """Interchangeable run-length encoding algorithms."""

    MATCHING = "matching"
    LOOKAHEAD = "lookahead"
    SCANNING = "scanning"
