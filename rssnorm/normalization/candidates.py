"""Ordered-candidate evaluation for fallback chains."""

from typing import Iterable


def first_non_empty(candidates: Iterable[str]) -> str:
    """Return the first non-empty string in priority order, or ""."""
    for value in candidates:
        if value:
            return value
    return ""
