"""The ``TE`` request header."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Union

from httptypes.transfer.encoding import Encoding
from httptypes.transfer.encoding_proposal import EncodingProposal
from httptypes.transfer.transfer_encoding import TransferEncoding, _header_values
from httptypes.utils import HttpError, sort_by_weight

__all__ = ["TE"]

_HEADER_NAME = "te"


class TE:
    """Client header advertising the transfer encodings it will accept.

    ``wildcard`` is true when a ``*`` directive was given.
    """

    __slots__ = ("wildcard", "_entries")

    def __init__(self) -> None:
        self.wildcard = False
        self._entries: List[EncodingProposal] = []

    @classmethod
    def from_headers(cls, headers: Any) -> Optional["TE"]:
        """Read the header, skipping empty and unknown directives.

        Returns ``None`` when the header is absent. A malformed weight raises
        :class:`HttpError` with status 400.
        """
        values = _header_values(headers, _HEADER_NAME)
        if values is None:
            return None
        te = cls()
        for value in values:
            for part in value.strip().split(","):
                part = part.strip()
                if not part:
                    continue
                if part == "*":
                    te.wildcard = True
                    continue
                entry = EncodingProposal.parse(part)
                if entry is not None:
                    te._entries.append(entry)
        return te

    def push(self, prop: Union[Encoding, EncodingProposal]) -> None:
        """Append a directive."""
        if not isinstance(prop, EncodingProposal):
            prop = EncodingProposal(prop)
        self._entries.append(prop)

    def sort(self) -> None:
        """Sort directives by weight, highest first.

        Among equal or unweighted directives, the one declared later comes first.
        """
        sort_by_weight(self._entries)

    def negotiate(self, available: Iterable[Encoding]) -> TransferEncoding:
        """Pick the most suitable encoding among ``available``.

        Raises :class:`HttpError` with status 406 when none is acceptable.
        """
        offered = list(available)
        self.sort()
        for entry in self._entries:
            if entry.encoding in offered:
                return TransferEncoding(entry.encoding)
        if self.wildcard and offered:
            return TransferEncoding(offered[0])
        raise HttpError("No suitable Transfer-Encoding found", 406)

    def header_name(self) -> str:
        return _HEADER_NAME

    def header_value(self) -> str:
        parts = [entry.header_value() for entry in self._entries]
        if self.wildcard:
            parts.append("*")
        return ", ".join(parts)

    def __iter__(self) -> Iterator[EncodingProposal]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return repr(self._entries)