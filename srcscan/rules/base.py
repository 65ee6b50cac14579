"""Rule protocol and the line-oriented base shared by built-in rules."""

from __future__ import annotations

from typing import List, Optional, Protocol, Union

from srcscan.priority import Priority
from srcscan.results import Violation
from srcscan.source import SourceCode


class Rule(Protocol):
    """Protocol implemented by all rules."""

    name: str
    priority: int

    def apply(self, source: SourceCode) -> List[Violation]:
        """Inspect ``source`` and return the violations found in it."""


class LineRule:
    """Apply ``check_line`` to each line of a source file."""

    name = ""
    priority: int = Priority.LOW

    def __init__(self, priority: Union[int, str, None] = None) -> None:
        if priority is not None:
            self.priority = Priority.parse(priority)

    def apply(self, source: SourceCode) -> List[Violation]:
        violations: List[Violation] = []
        for line_number, line in enumerate(source.lines, start=1):
            message = self.check_line(line)
            if message:
                violations.append(self.create_violation(line_number, line, message))
        return violations

    def check_line(self, line: str) -> Optional[str]:
        """Return a violation message for ``line``, or ``None`` when it is clean."""

        return None

    def create_violation(
        self,
        line_number: int,
        source_line: str,
        message: str,
        priority: Optional[int] = None,
    ) -> Violation:
        return Violation(
            rule_name=self.name,
            priority=self.priority if priority is None else priority,
            message=message,
            line_number=line_number,
            source_line=source_line.strip(),
        )
