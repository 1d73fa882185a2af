"""numkit — next palindromes, prime sieves, and run-length compression."""

from __future__ import annotations

__version__ = "0.1.0"

from numkit.bootstrap import bootstrap
from numkit.config.settings import NumkitSettings, get_settings, reset_settings
from numkit.domain.types import CompressStrategy
from numkit.errors import (
    ConfigError,
    InvalidArgumentError,
    InvalidTypeError,
    NumkitError,
    OutOfRangeError,
)
from numkit.services.compress import compress
from numkit.services.palindrome import is_palindrome, next_palindrome
from numkit.services.primes import primes

__all__ = [
    "CompressStrategy",
    "ConfigError",
    "InvalidArgumentError",
    "InvalidTypeError",
    "NumkitError",
    "NumkitSettings",
    "OutOfRangeError",
    "__version__",
    "bootstrap",
    "compress",
    "get_settings",
    "is_palindrome",
    "next_palindrome",
    "primes",
    "reset_settings",
]
