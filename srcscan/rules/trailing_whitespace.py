"""Flag lines that end in spaces or tabs."""

from __future__ import annotations

from typing import Optional

from srcscan.priority import Priority

from .base import LineRule


class TrailingWhitespaceRule(LineRule):
    name = "trailing_whitespace"
    priority = Priority.LOW

    def check_line(self, line: str) -> Optional[str]:
        if line != line.rstrip(" \t"):
            return "Line ends with whitespace"
        return None
