"""Rule registry and rule sets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Type, Union

from srcscan.errors import ConfigurationError
from srcscan.utils import read_yaml_file

from .base import LineRule, Rule
from .hardcoded_secret import HardcodedSecretRule
from .line_length import LineLengthRule
from .todo_comment import TodoCommentRule
from .trailing_whitespace import TrailingWhitespaceRule

logger = logging.getLogger(__name__)

RULE_REGISTRY: Dict[str, Type[LineRule]] = {
    rule_class.name: rule_class
    for rule_class in (
        HardcodedSecretRule,
        LineLengthRule,
        TodoCommentRule,
        TrailingWhitespaceRule,
    )
}


class RuleSet:
    """An ordered collection of rules applied to every analyzed file."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        if rules is None or isinstance(rules, (str, bytes)):
            raise ConfigurationError(f"RuleSet expects an iterable of rules, got {rules!r}")
        try:
            self._rules: List[Rule] = list(rules)
        except TypeError as exc:
            raise ConfigurationError(f"RuleSet expects an iterable of rules, got {rules!r}") from exc

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return tuple(self._rules)

    def names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({self.names()!r})"


def build_rule(name: str, priority: Union[int, str, None] = None, **options: Any) -> Rule:
    """Instantiate the registered rule called ``name``."""

    rule_class = RULE_REGISTRY.get(name)
    if rule_class is None:
        known = ", ".join(sorted(RULE_REGISTRY))
        raise ConfigurationError(f"Unknown rule {name!r} (known rules: {known})")
    try:
        return rule_class(priority=priority, **options)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid options for rule {name!r}: {exc}") from exc


def default_rule_set() -> RuleSet:
    return RuleSet(rule_class() for rule_class in RULE_REGISTRY.values())


def rule_set_from_entries(entries: Any) -> RuleSet:
    """Build a rule set from a ``rules:`` list of names or mappings."""

    if not isinstance(entries, list):
        raise ConfigurationError("'rules' must be a list of rule names or mappings")
    rules: List[Rule] = []
    for entry in entries:
        if isinstance(entry, str):
            rules.append(build_rule(entry))
            continue
        if not isinstance(entry, dict) or "name" not in entry:
            raise ConfigurationError(f"Invalid rule entry: {entry!r}")
        options = entry.get("options") or {}
        if not isinstance(options, dict):
            raise ConfigurationError(f"Options for rule {entry['name']!r} must be a mapping")
        rules.append(build_rule(entry["name"], priority=entry.get("priority"), **options))
    return RuleSet(rules)


def load_rule_set(path: Union[str, Path]) -> RuleSet:
    """Load a YAML rule set file containing a top-level ``rules`` list."""

    path = Path(path)
    data = read_yaml_file(path)
    if data is None:
        raise ConfigurationError(f"Rule set file not found or empty: {path}")
    if not isinstance(data, dict) or "rules" not in data:
        raise ConfigurationError(f"Rule set file {path} must contain a 'rules' list")
    rule_set = rule_set_from_entries(data["rules"])
    logger.debug("Loaded rule set %s from %s", rule_set.names(), path)
    return rule_set


__all__ = [
    "LineRule",
    "RULE_REGISTRY",
    "Rule",
    "RuleSet",
    "build_rule",
    "default_rule_set",
    "load_rule_set",
    "rule_set_from_entries",
]
