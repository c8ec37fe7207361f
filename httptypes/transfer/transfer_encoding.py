"""The ``Transfer-Encoding`` header."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from httptypes.transfer.encoding import Encoding
from httptypes.transfer.encoding_proposal import EncodingProposal
from httptypes.utils import HttpError

__all__ = ["TransferEncoding"]

_HEADER_NAME = "transfer-encoding"


def _header_values(headers: Any, name: str) -> Optional[List[str]]:
    """All values of header ``name`` (case-insensitive), or ``None`` if absent.

    Accepts a mapping of names to a string or an iterable of strings, or an
    object with ``get_all`` such as :class:`email.message.Message`.
    """
    if hasattr(headers, "get_all"):
        found = headers.get_all(name)
        return list(found) if found else None
    if not isinstance(headers, Mapping):
        raise TypeError(f"expected a mapping of headers, got {type(headers).__name__}")
    values: List[str] = []
    present = False
    target = name.lower()
    for key, value in headers.items():
        if key.lower() != target:
            continue
        present = True
        if isinstance(value, str):
            values.append(value)
        else:
            values.extend(_as_strings(value))
    return values if present else None


def _as_strings(values: Iterable[Any]) -> List[str]:
    return [str(value) for value in values]


class TransferEncoding:
    """The form of encoding used to safely transfer the payload body."""

    __slots__ = ("encoding",)

    def __init__(self, encoding: Encoding) -> None:
        if isinstance(encoding, (EncodingProposal, TransferEncoding)):
            encoding = encoding.encoding
        if not isinstance(encoding, Encoding):
            raise TypeError(f"expected an Encoding, got {encoding!r}")
        self.encoding = encoding

    @classmethod
    def from_headers(cls, headers: Any) -> Optional["TransferEncoding"]:
        """Read the header; the last recognised value wins.

        Returns ``None`` when the header is absent.
        """
        values = _header_values(headers, _HEADER_NAME)
        if values is None:
            return None
        found: Optional[Encoding] = None
        for value in values:
            entry = Encoding.parse(value)
            if entry is not None:
                found = entry
        if found is None:
            raise HttpError("Headers instance with no entries found", 500)
        return cls(found)

    def header_name(self) -> str:
        return _HEADER_NAME

    def header_value(self) -> str:
        return str(self.encoding)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Encoding):
            return self.encoding is other
        if isinstance(other, TransferEncoding):
            return self.encoding is other.encoding
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.encoding)

    def __repr__(self) -> str:
        return repr(self.encoding)