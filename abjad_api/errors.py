from __future__ import annotations


class AbjadError(Exception):
    """Base class for engine errors."""


class InvalidInput(AbjadError, ValueError):
    """A required name is missing/empty or an argument is out of its domain."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class InvalidIndex(AbjadError, LookupError):
    """
    A reduced index fell outside its documented range.

    Only reachable through a programming error; never clamp it away.
    """
