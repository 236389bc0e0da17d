"""Utilities."""

from collections.abc import Iterable
from typing import Any

__all__ = ["merge", "unique"]


def merge(merged: dict[str, Any], obj2: dict[str, Any]) -> dict[str, Any]:
    """Merge the content of obj2 into merged.

    Nested dictionaries are merged recursively and lists are concatenated,
    any other value from obj2 replaces the existing one.

    Eg:
        merge({"a": {"b": [1]}}, {"a": {"b": [2], "c": 3}}) == {"a": {"b": [1, 2], "c": 3}}
    """
    for key, value in obj2.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merge(merged[key], value)
        elif key in merged and isinstance(merged[key], list) and isinstance(value, list):
            merged[key] = merged[key] + value
        else:
            merged[key] = value
    return merged


def unique(items: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates, keeping the first occurrence order."""
    return tuple(dict.fromkeys(items))
