"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, numkit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from numkit.domain.types import CompressStrategy


class PalindromeConfig(BaseModel):
    """[palindrome] section."""

    model_config = {"frozen": True}

    max_digits: int = Field(default=1_000_000, gt=0)


class SieveConfig(BaseModel):
    """[sieve] section."""

    model_config = {"frozen": True}

    max_end: int = Field(default=10_000_000, ge=0)


class CompressConfig(BaseModel):
    """[compress] section."""

    model_config = {"frozen": True}

    default_strategy: CompressStrategy = CompressStrategy.MATCHING
