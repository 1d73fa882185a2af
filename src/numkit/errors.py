"""Error taxonomy for numkit.

INVARIANT: Validation happens at the service boundary. Domain functions
assume validated input and never raise these errors themselves.

Each error subclasses the matching builtin (``TypeError`` / ``ValueError``)
so callers that only know the builtins still catch them.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field


class ErrorPayload(BaseModel):
    """Structured, serializable view of a :class:`NumkitError`."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class NumkitError(Exception):
    """Base class for every error raised by numkit."""

    code: ClassVar[str] = "NUMKIT_ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(code=self.code, message=self.message, detail=self.detail)


class InvalidTypeError(NumkitError, TypeError):
    """Input is structurally the wrong kind (e.g. a list where a number was expected)."""

    code = "INVALID_TYPE"


class OutOfRangeError(NumkitError, ValueError):
    """Input is numerically outside the accepted domain."""

    code = "OUT_OF_RANGE"


class InvalidArgumentError(NumkitError, ValueError):
    """Malformed argument: bad sieve bounds, bad digit string, unknown strategy."""

    code = "INVALID_ARGUMENT"


class ConfigError(NumkitError):
    """Configuration file could not be read."""

    code = "INVALID_CONFIG"
