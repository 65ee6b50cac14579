"""Priority definitions for rule violations."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .errors import ConfigurationError


class Priority(IntEnum):
    """Enumerate the priority levels; a lower value is more severe."""

    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @property
    def exit_code(self) -> int:
        """Return the CLI exit code a violation of this priority drives."""

        ordering = {
            Priority.HIGH: 2,
            Priority.MEDIUM: 1,
            Priority.LOW: 0,
        }
        return ordering[self]

    @classmethod
    def parse(cls, value: Union[int, str, "Priority"]) -> "Priority":
        if isinstance(value, bool):
            raise ConfigurationError(f"Invalid priority: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise ConfigurationError(f"Invalid priority: {value!r}") from exc
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.parse(int(text))
            try:
                return cls[text.upper()]
            except KeyError as exc:
                raise ConfigurationError(f"Invalid priority: {value!r}") from exc
        raise ConfigurationError(f"Invalid priority: {value!r}")


PRIORITY_ORDER = (Priority.HIGH, Priority.MEDIUM, Priority.LOW)
