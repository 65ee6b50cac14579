"""Build the results tree skeleton from a flat list of relative file paths."""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from .errors import ConfigurationError
from .results import DirectoryResults, FileResults

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"
BASE_DIRECTORY_KEY = ""


class ResultsTreeBuilder:
    """Insert relative file paths into a prefix tree of results nodes.

    Directory nodes are indexed by the path formed from all segments seen so
    far, so every shared prefix resolves to the node created by whichever
    path reached it first. The resulting tree does not depend on insertion
    order.
    """

    def __init__(self) -> None:
        self.root = DirectoryResults()
        self._directories: Dict[str, DirectoryResults] = {}
        self._files: Dict[str, FileResults] = {}

    @property
    def file_count(self) -> int:
        return len(self._files)

    @property
    def directory_count(self) -> int:
        return len(self._directories)

    def add(self, relative_path: str) -> FileResults:
        if not relative_path:
            raise ConfigurationError("Source file paths must not be empty")
        if relative_path.startswith(PATH_SEPARATOR):
            raise ConfigurationError(f"Source file paths must be relative to the base directory: {relative_path!r}")
        existing = self._files.get(relative_path)
        if existing is not None:
            return existing
        if relative_path in self._directories:
            raise ConfigurationError(f"{relative_path!r} is listed as a file but is also a directory")

        segments = relative_path.split(PATH_SEPARATOR)
        parent = self._base_directory()
        for depth, segment in enumerate(segments[:-1], start=1):
            parent = self._directory(parent, segment, PATH_SEPARATOR.join(segments[:depth]))

        file_results = FileResults(path=relative_path)
        parent.add_child(segments[-1], file_results)
        self._files[relative_path] = file_results
        return file_results

    def _base_directory(self) -> DirectoryResults:
        base = self.root.get_child(BASE_DIRECTORY_KEY)
        if base is None:
            base = DirectoryResults(path="")
            self.root.add_child(BASE_DIRECTORY_KEY, base)
        assert isinstance(base, DirectoryResults)
        return base

    def _directory(self, parent: DirectoryResults, segment: str, path: str) -> DirectoryResults:
        directory = self._directories.get(path)
        if directory is not None:
            return directory
        if path in self._files:
            raise ConfigurationError(f"{path!r} is listed as a file but is also a directory")
        directory = DirectoryResults(path=path)
        parent.add_child(segment, directory)
        self._directories[path] = directory
        return directory


def build_results_tree(source_files: Iterable[str]) -> DirectoryResults:
    """Return the root of a results tree holding one file node per path."""

    builder = ResultsTreeBuilder()
    for relative_path in source_files:
        builder.add(relative_path)
    logger.debug(
        "Built results tree with %d files and %d directories",
        builder.file_count,
        builder.directory_count,
    )
    return builder.root
