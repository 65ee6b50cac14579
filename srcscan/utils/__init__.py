"""Utility helpers for srcscan."""

from .fileio import read_text_file, read_yaml_file

__all__ = [
    "read_text_file",
    "read_yaml_file",
]
