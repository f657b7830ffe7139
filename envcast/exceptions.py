"""
envcast Exception Classes

Typed errors raised while deserializing environment variables into models.
"""

from __future__ import annotations

from typing import Any


class EnvcastError(Exception):
    """Base exception for all envcast errors."""

    pass


class MissingValueError(EnvcastError):
    """
    Raised when a required field has no matching variable and no default.

    Attributes:
        field: Declared name (or rename) of the field that could not be resolved
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"missing value for {field}")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MissingValueError):
            return NotImplemented
        return self.field == other.field

    def __hash__(self) -> int:
        return hash((MissingValueError, self.field))


class CustomError(EnvcastError):
    """
    Raised for every other failure.

    This covers scalar parse failures, element failures inside optional or
    sequence values, and validation errors surfaced by pydantic itself.

    Attributes:
        message: Human-readable description of the failure
        field: Field the failure belongs to, when one is known
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CustomError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((CustomError, self.message))
