"""Results tree data structures and the queries that roll them up."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .priority import PRIORITY_ORDER, Priority
from .source import SourceCode


@dataclass(frozen=True)
class Violation:
    """Capture a single rule finding against one file."""

    rule_name: str
    priority: int
    message: str = ""
    line_number: Optional[int] = None
    source_line: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["priority"] = int(self.priority)
        return data


@dataclass(eq=False)
class FileResults:
    """Leaf node: the violations found in one physical file."""

    path: str
    source_code: Optional[SourceCode] = None
    _violations: List[Violation] = field(default_factory=list, repr=False)

    def _attach(self, source_code: SourceCode, violations: Iterable[Violation]) -> None:
        """Record the loaded source and its violations; called once by the analyzer."""

        self.source_code = source_code
        self._violations.extend(violations)

    @property
    def violations(self) -> List[Violation]:
        return list(self._violations)

    @property
    def children(self) -> List["Results"]:
        return []

    @property
    def total_number_of_files(self) -> int:
        return total_number_of_files(self)

    def number_of_files_with_violations(self, max_priority: int = Priority.LOW) -> int:
        return number_of_files_with_violations(self, max_priority)

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": "file",
            "path": self.path,
            "violations": [violation.to_dict() for violation in self._violations],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileResults):
            return NotImplemented
        return self.path == other.path and Counter(self._violations) == Counter(other._violations)

    __hash__ = None  # type: ignore[assignment]


@dataclass
class DirectoryResults:
    """Internal node: child results keyed by their last path segment."""

    path: str = ""
    _children: Dict[str, "Results"] = field(default_factory=dict, repr=False)

    def add_child(self, name: str, child: "Results") -> "Results":
        if name in self._children:
            raise KeyError(f"Duplicate child {name!r} under {self.path!r}")
        self._children[name] = child
        return child

    def get_child(self, name: str) -> Optional["Results"]:
        return self._children.get(name)

    @property
    def children(self) -> List["Results"]:
        """Return child nodes ordered by name."""

        return [self._children[name] for name in sorted(self._children)]

    @property
    def violations(self) -> List[Violation]:
        return violations(self)

    @property
    def total_number_of_files(self) -> int:
        return total_number_of_files(self)

    def number_of_files_with_violations(self, max_priority: int = Priority.LOW) -> int:
        return number_of_files_with_violations(self, max_priority)

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": "directory",
            "path": self.path,
            "children": [child.to_dict() for child in self.children],
        }


Results = Union[DirectoryResults, FileResults]


def iter_files(node: Results) -> Iterator[FileResults]:
    """Yield every file node in the subtree rooted at ``node``."""

    if isinstance(node, FileResults):
        yield node
        return
    for child in node.children:
        yield from iter_files(child)


def _count_files(node: Results, predicate: Callable[[FileResults], bool]) -> int:
    if isinstance(node, FileResults):
        return 1 if predicate(node) else 0
    return sum(_count_files(child, predicate) for child in node.children)


def total_number_of_files(node: Results) -> int:
    return _count_files(node, lambda _file: True)


def number_of_files_with_violations(node: Results, max_priority: int = Priority.LOW) -> int:
    """Count files having a violation with priority at or under ``max_priority``."""

    return _count_files(
        node,
        lambda file_results: any(v.priority <= max_priority for v in file_results.violations),
    )


def violations(node: Results) -> List[Violation]:
    return [violation for file_results in iter_files(node) for violation in file_results.violations]


def number_of_violations_with_priority(node: Results, priority: int) -> int:
    return sum(1 for violation in violations(node) if violation.priority == priority)


def find_results_for_path(node: Results, path: str) -> Optional[Results]:
    """Return the node in the subtree whose ``path`` equals ``path``."""

    if node.path == path:
        return node
    for child in node.children:
        found = find_results_for_path(child, path)
        if found is not None:
            return found
    return None


@dataclass
class Summary:
    """Aggregate violation counts by priority.

    Priorities outside the 1-3 scale are counted under ``other`` and still
    contribute to ``total`` and ``worst_priority``.
    """

    p1: int = 0
    p2: int = 0
    p3: int = 0
    other: int = 0
    files: int = 0
    files_with_violations: int = 0
    worst_priority: Optional[int] = None

    def increment(self, priority: int) -> None:
        value = int(priority)
        if value in {p.value for p in PRIORITY_ORDER}:
            attr = f"p{value}"
            setattr(self, attr, getattr(self, attr) + 1)
        else:
            self.other += 1
        if self.worst_priority is None or value < self.worst_priority:
            self.worst_priority = value

    def to_dict(self) -> Dict[str, Optional[int]]:
        data: Dict[str, Optional[int]] = dict(asdict(self))
        data["total"] = self.total
        return data

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return priority/count pairs ordered for reporting."""

        rows = [(priority.name, getattr(self, f"p{priority.value}")) for priority in PRIORITY_ORDER]
        if self.other:
            rows.append(("OTHER", self.other))
        return rows

    @property
    def total(self) -> int:
        return sum(getattr(self, f"p{priority.value}") for priority in PRIORITY_ORDER) + self.other


def summarize(node: Results, max_priority: int = Priority.LOW) -> Summary:
    summary = Summary(
        files=total_number_of_files(node),
        files_with_violations=number_of_files_with_violations(node, max_priority),
    )
    for violation in violations(node):
        summary.increment(violation.priority)
    return summary
