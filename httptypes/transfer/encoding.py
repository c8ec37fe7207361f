"""Transfer encoding directives."""

from __future__ import annotations

from enum import Enum
from typing import Optional

__all__ = ["Encoding"]


class Encoding(Enum):
    """Available transfer codings and compression algorithms."""

    CHUNKED = "chunked"
    GZIP = "gzip"
    DEFLATE = "deflate"
    BROTLI = "br"
    ZSTD = "zstd"
    IDENTITY = "identity"

    @classmethod
    def parse(cls, s: str) -> Optional["Encoding"]:
        """Parse a directive, ignoring surrounding whitespace.

        Returns ``None`` for empty or unknown directives.
        """
        text = s.strip()
        if not text:
            return None
        for encoding in cls:
            if encoding.value == text:
                return encoding
        return None

    def __str__(self) -> str:
        return self.value