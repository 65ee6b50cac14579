"""Analyze an explicit list of source files beneath a base directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .errors import ConfigurationError
from .results import DirectoryResults, FileResults, Violation, iter_files, total_number_of_files
from .rules import Rule, RuleSet
from .source import load_source, source_path
from .tree import build_results_tree

logger = logging.getLogger(__name__)

SourceFiles = Union[str, Iterable[str]]


def _normalize_source_files(source_files: Optional[SourceFiles]) -> List[str]:
    if source_files is None:
        return []
    if isinstance(source_files, str):
        return [entry.strip() for entry in source_files.split(",") if entry.strip()]
    return list(source_files)


class FilesSourceAnalyzer:
    """Run a rule set against each listed file and collect a results tree.

    ``source_files`` are relative to ``base_directory`` and use ``/`` as the
    separator. A single string is read as a comma-separated list.
    """

    def __init__(self, base_directory: Union[str, Path] = ".", source_files: Optional[SourceFiles] = None) -> None:
        self.base_directory = base_directory
        self.source_files = source_files

    @property
    def source_files(self) -> List[str]:
        return list(self._source_files)

    @source_files.setter
    def source_files(self, value: Optional[SourceFiles]) -> None:
        self._source_files = _normalize_source_files(value)

    def get_source_directories(self) -> List[str]:
        return [str(self.base_directory)]

    def analyze(self, rule_set: Optional[Union[RuleSet, Sequence[Rule]]]) -> DirectoryResults:
        if rule_set is None:
            raise ConfigurationError("rule_set must not be None")
        if not isinstance(rule_set, RuleSet):
            rule_set = RuleSet(rule_set)
        rules = list(rule_set)

        logger.info(
            "Analyzing %d source files under %s with %d rules",
            len(self._source_files),
            self.base_directory,
            len(rules),
        )
        results = build_results_tree(self._source_files)
        for file_results in iter_files(results):
            self._apply_rules(file_results, rules)
        logger.info(
            "Analysis complete: %d files analyzed, %d with violations",
            total_number_of_files(results),
            results.number_of_files_with_violations(),
        )
        return results

    def _apply_rules(self, file_results: FileResults, rules: Sequence[Rule]) -> None:
        source = load_source(source_path(self.base_directory, file_results.path))
        violations: List[Violation] = []
        for rule in rules:
            violations.extend(rule.apply(source))
        logger.debug("%s: %d violations", file_results.path, len(violations))
        file_results._attach(source, violations)


def analyze(
    base_directory: Union[str, Path],
    source_files: SourceFiles,
    rule_set: Optional[Union[RuleSet, Sequence[Rule]]],
) -> DirectoryResults:
    """Build and populate the results tree for ``source_files``."""

    return FilesSourceAnalyzer(base_directory, source_files).analyze(rule_set)
