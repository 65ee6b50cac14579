"""Configuration loading for srcscan."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import ConfigurationError
from .priority import Priority
from .rules import RuleSet, default_rule_set, rule_set_from_entries
from .utils import read_yaml_file

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".srcscan.yaml"
KNOWN_KEYS = {"base_directory", "source_files", "max_priority", "rules"}


@dataclass
class ScanConfig:
    """Settings for one analysis run."""

    base_directory: str = "."
    source_files: List[str] = field(default_factory=list)
    max_priority: Priority = Priority.LOW
    rules: Optional[List[Any]] = None

    def build_rule_set(self) -> RuleSet:
        if self.rules is None:
            return default_rule_set()
        return rule_set_from_entries(self.rules)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_directory": self.base_directory,
            "source_files": list(self.source_files),
            "max_priority": int(self.max_priority),
            "rules": self.rules,
        }


def load_config(path: Union[str, Path, None] = None) -> ScanConfig:
    """Load ``path``, or ``.srcscan.yaml`` in the working directory if present."""

    explicit = path is not None
    config_path = Path(path) if explicit else Path(CONFIG_FILENAME)
    data = read_yaml_file(config_path)
    if data is None:
        if explicit and not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        return ScanConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    logger.debug("Loaded config from %s", config_path)
    return parse_config(data)


def parse_config(data: Dict[str, Any]) -> ScanConfig:
    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")

    config = ScanConfig()
    if "base_directory" in data:
        if not isinstance(data["base_directory"], str):
            raise ConfigurationError("'base_directory' must be a string")
        config.base_directory = data["base_directory"]
    if "source_files" in data:
        files = data["source_files"]
        if not isinstance(files, list) or not all(isinstance(item, str) for item in files):
            raise ConfigurationError("'source_files' must be a list of strings")
        config.source_files = list(files)
    if "max_priority" in data:
        config.max_priority = Priority.parse(data["max_priority"])
    if "rules" in data:
        if not isinstance(data["rules"], list):
            raise ConfigurationError("'rules' must be a list of rule names or mappings")
        config.rules = list(data["rules"])
    return config
