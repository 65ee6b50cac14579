"""Flag lines longer than a configured maximum."""

from __future__ import annotations

from typing import Optional, Union

from srcscan.errors import ConfigurationError
from srcscan.priority import Priority

from .base import LineRule

DEFAULT_MAX_LENGTH = 120


class LineLengthRule(LineRule):
    """Warn when a line exceeds ``max_length`` characters."""

    name = "line_length"
    priority = Priority.LOW

    def __init__(self, priority: Union[int, str, None] = None, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        super().__init__(priority)
        if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 1:
            raise ConfigurationError(f"line_length.max_length must be a positive integer, got {max_length!r}")
        self.max_length = max_length

    def check_line(self, line: str) -> Optional[str]:
        if len(line) > self.max_length:
            return f"Line length {len(line)} exceeds maximum of {self.max_length}"
        return None
