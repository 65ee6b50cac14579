"""Detect hardcoded secrets in source code string literals."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from srcscan.priority import Priority
from srcscan.results import Violation
from srcscan.source import SourceCode

from .base import LineRule

KEY_PATTERN = re.compile(r"(?i)(secret|token|api[_-]?key|password|passwd|access[_-]?key|private|credential|auth)")
LONG_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_\-]{24,}")
AWS_ACCESS_KEY_PATTERN = re.compile(r"(?:A3T|AKIA|ASIA)[0-9A-Z]{16}")
JWT_PATTERN = re.compile(r"eyJ[A-Za-z0-9_\-]+?\.[A-Za-z0-9_\-]+?\.[A-Za-z0-9_\-]+")
ASSIGNMENT_PATTERN = re.compile(r"""([A-Za-z_][\w\-]*)["']?\s*[:=]\s*(["'])(.*?)\2""")
LITERAL_PATTERN = re.compile(r"""(["'])(.*?)\1""")
PLACEHOLDER_HINTS = ("dummy", "example", "placeholder", "sample", "changeme", "xxxx")


class HardcodedSecretRule(LineRule):
    """Flag string literals that look like credentials."""

    name = "hardcoded_secret"
    priority = Priority.HIGH

    def apply(self, source: SourceCode) -> List[Violation]:
        violations: List[Violation] = []
        for line_number, line in enumerate(source.lines, start=1):
            finding = self._evaluate_line(line)
            if finding is None:
                continue
            message, priority = finding
            violations.append(self.create_violation(line_number, line, message, priority=priority))
        return violations

    # ------------------------------------------------------------------
    # Scoring helpers
    # ------------------------------------------------------------------
    def _evaluate_line(self, line: str) -> Optional[Tuple[str, int]]:
        named_values = {match.group(3) for match in ASSIGNMENT_PATTERN.finditer(line) if KEY_PATTERN.search(match.group(1))}
        for match in LITERAL_PATTERN.finditer(line):
            value = match.group(2)
            indicator = self._classify_value(value, value in named_values)
            if indicator is None:
                continue
            priority = self.priority
            if any(hint in value.lower() for hint in PLACEHOLDER_HINTS):
                priority = Priority.LOW
            return self._build_message(indicator), priority
        return None

    def _classify_value(self, value: str, secret_name: bool) -> Optional[str]:
        if AWS_ACCESS_KEY_PATTERN.search(value):
            return "aws_access_key"
        if JWT_PATTERN.search(value):
            return "jwt"
        if secret_name and LONG_TOKEN_PATTERN.search(value):
            return "long_token"
        return None

    def _build_message(self, indicator: str) -> str:
        titles = {
            "aws_access_key": "Possible AWS access key in string literal",
            "jwt": "Possible JSON Web Token in string literal",
            "long_token": "Possible secret assigned to a credential-like name",
        }
        return titles[indicator]
