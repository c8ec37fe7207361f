"""The HTTP protocol versions."""

from __future__ import annotations

import functools
from enum import Enum

__all__ = ["Version"]


@functools.total_ordering
class Version(Enum):
    """The version of the HTTP protocol in use, ordered oldest to newest."""

    HTTP0_9 = "HTTP/0.9"
    HTTP1_0 = "HTTP/1.0"
    HTTP1_1 = "HTTP/1.1"
    HTTP2_0 = "HTTP/2"
    HTTP3_0 = "HTTP/3"

    @classmethod
    def parse(cls, s: str) -> "Version":
        """Parse the textual form of a version, e.g. ``HTTP/1.1``."""
        for version in cls:
            if version.value == s:
                return version
        raise ValueError(f"invalid value: {s!r}, expected a HTTP version as &str")

    def __str__(self) -> str:
        return self.value

    @property
    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank < other._rank