"""Fake rules shared by the analyzer tests."""

from __future__ import annotations

from typing import List

from srcscan.results import Violation
from srcscan.source import SourceCode


class FakePathRule:
    """Emit one violation per file whose message is the file's full path."""

    name = "fake_path"
    priority = 1

    def apply(self, source: SourceCode) -> List[Violation]:
        return [Violation(rule_name=self.name, priority=self.priority, message=source.path)]


class FakeCountRule:
    """Count invocations without reporting anything."""

    name = "fake_count"
    priority = 3

    def __init__(self) -> None:
        self.count = 0

    def apply(self, source: SourceCode) -> List[Violation]:
        self.count += 1
        return []


class ExplodingRule:
    name = "exploding"
    priority = 2

    def apply(self, source: SourceCode) -> List[Violation]:
        raise RuntimeError(f"cannot analyze {source.path}")


def write_files(base, relative_paths, text="class Example {}\n"):
    for relative in relative_paths:
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return base
