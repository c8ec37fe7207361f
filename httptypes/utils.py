"""Shared helpers: the package error type and weight handling for proposals."""

from __future__ import annotations

import functools
import re
from typing import Any, List

__all__ = ["HttpError", "parse_weight", "sort_by_weight"]

_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


class HttpError(Exception):
    """An error that carries the HTTP status code it should produce."""

    def __init__(self, message: str, status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __repr__(self) -> str:
        return f"HttpError({self.message!r}, status={self.status})"


def parse_weight(s: str) -> float:
    """Parse a weight of the form ``q=0.123``.

    Raises :class:`HttpError` with status 400 when the input is malformed.
    """
    parts = s.split("=")
    if parts[0] != "q" or len(parts) < 2:
        raise HttpError("invalid weight", 400)
    value = parts[1]
    if not _FLOAT_RE.fullmatch(value):
        raise HttpError(f"invalid float literal: {value!r}", 400)
    return float(value)


def _partial_cmp(left: Any, right: Any) -> int:
    """Compare two items, treating unordered pairs as equal."""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def sort_by_weight(props: List[Any]) -> None:
    """Order proposals by weight, in place.

    Higher weights come first. Items whose weights are equal or cannot be
    compared are ordered so that the one supplied later comes first.
    """

    def compare(a: tuple[int, Any], b: tuple[int, Any]) -> int:
        ordering = _partial_cmp(b[1], a[1])
        if ordering == 0:
            return (b[0] > a[0]) - (b[0] < a[0])
        return ordering

    indexed = sorted(enumerate(props), key=functools.cmp_to_key(compare))
    props[:] = [item for _, item in indexed]