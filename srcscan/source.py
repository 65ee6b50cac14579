"""Source file loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .utils import read_text_file

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split ``text`` on ``\\n`` only, dropping a trailing ``\\r`` per line."""

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(frozen=True)
class SourceCode:
    """The loaded text of one source file."""

    path: str
    text: str
    _lines: List[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_lines", split_lines(self.text))

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def line(self, number: int) -> Optional[str]:
        """Return the 1-based line ``number``, or ``None`` if out of range."""

        if 1 <= number <= len(self._lines):
            return self._lines[number - 1]
        return None


def source_path(base_directory: Union[str, Path], relative_path: str) -> str:
    """Join ``relative_path`` onto ``base_directory`` with ``/``, without normalizing either."""

    base = base_directory.as_posix() if isinstance(base_directory, Path) else str(base_directory)
    if not base:
        return relative_path
    return f"{base.rstrip('/')}/{relative_path}"


def load_source(path: Union[str, Path], encoding: str = "utf-8") -> SourceCode:
    """Read ``path`` and return its contents as a :class:`SourceCode`.

    ``SourceCode.path`` keeps ``path`` exactly as given when it is a string.
    """

    path_text = path.as_posix() if isinstance(path, Path) else path
    logger.debug("Loading source %s", path_text)
    text = read_text_file(Path(path_text), encoding=encoding)
    return SourceCode(path=path_text, text=text)
