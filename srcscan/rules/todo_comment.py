"""Flag TODO and FIXME markers left in source."""

from __future__ import annotations

import re
from typing import Optional

from srcscan.priority import Priority

from .base import LineRule

MARKER_PATTERN = re.compile(r"\b(TODO|FIXME)\b")


class TodoCommentRule(LineRule):
    name = "todo_comment"
    priority = Priority.LOW

    def check_line(self, line: str) -> Optional[str]:
        match = MARKER_PATTERN.search(line)
        if match:
            return f"{match.group(1)} marker found"
        return None
