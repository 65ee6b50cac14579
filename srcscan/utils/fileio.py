"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from srcscan.errors import ConfigurationError, SourceAccessError


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Unable to read {path}: {exc.strerror or exc}") from exc


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    """Return the file contents as text, raising ``SourceAccessError`` on failure."""

    try:
        with path.open("r", encoding=encoding) as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise SourceAccessError(path.as_posix(), f"not valid {encoding} text") from exc
    except OSError as exc:
        raise SourceAccessError(path.as_posix(), exc.strerror or str(exc)) from exc
