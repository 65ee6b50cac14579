"""Exception types raised by the analyzer."""

from __future__ import annotations


class SrcscanError(Exception):
    """Base class for errors surfaced to callers of the analyzer."""


class ConfigurationError(SrcscanError, ValueError):
    """Raised for invalid call arguments or malformed configuration."""


class SourceAccessError(SrcscanError, OSError):
    """Raised when a listed source file cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read source file {path}: {reason}")
        self.path = path
