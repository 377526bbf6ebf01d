"""Whitespace-separated field counting over many lines."""

from __future__ import annotations

from collections.abc import Iterable


def count_fields(lines: Iterable[str]) -> int:
    """Return the total number of whitespace-separated fields in ``lines``."""
    return sum(len(line.split()) for line in lines)