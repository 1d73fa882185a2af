"""Tests for domain type enums — parametrized."""

import pytest

from numkit.domain.types import CompressStrategy, InputKind

ENUM_CASES = [
    (InputKind, {"native_int", "big_int", "digit_string"}),
    (CompressStrategy, {"matching", "lookahead", "scanning"}),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_values(enum_cls: type, expected_values: set[str]) -> None:
    assert {member.value for member in enum_cls} == expected_values
