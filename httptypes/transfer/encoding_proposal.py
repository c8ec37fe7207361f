"""A proposed transfer encoding with an optional weight."""

from __future__ import annotations

import math
from typing import Optional

from httptypes.transfer.encoding import Encoding
from httptypes.utils import HttpError, parse_weight

__all__ = ["EncodingProposal"]


class EncodingProposal:
    """A proposed :class:`Encoding` as found in ``TE`` style headers.

    The weight, when present, lies between 0.0 and 1.0. Proposals with a
    weight order above those without; two unweighted proposals are unordered.
    """

    __slots__ = ("encoding", "weight")

    def __init__(self, encoding: Encoding, weight: Optional[float] = None) -> None:
        if isinstance(encoding, EncodingProposal):
            encoding = encoding.encoding
        if not isinstance(encoding, Encoding):
            raise TypeError(f"expected an Encoding, got {encoding!r}")
        if weight is not None:
            weight = float(weight)
            if not (math.copysign(1.0, weight) > 0 and weight <= 1.0):
                raise HttpError(
                    "EncodingProposal should have a weight between 0.0 and 1.0", 500
                )
        self.encoding = encoding
        self.weight = weight

    @classmethod
    def parse(cls, s: str) -> Optional["EncodingProposal"]:
        """Parse ``<encoding>[;q=<weight>]``; unknown encodings give ``None``."""
        parts = s.split(";")
        encoding = Encoding.parse(parts[0])
        if encoding is None:
            return None
        weight = parse_weight(parts[1]) if len(parts) > 1 else None
        return cls(encoding, weight)

    def header_value(self) -> str:
        """The header form, e.g. ``br;q=0.800``."""
        if self.weight is None:
            return str(self.encoding)
        return f"{self.encoding};q={self.weight:.3f}"

    def __str__(self) -> str:
        return self.header_value()

    def __repr__(self) -> str:
        return f"EncodingProposal({self.encoding!r}, weight={self.weight!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Encoding):
            return self.encoding is other
        if isinstance(other, EncodingProposal):
            return self.encoding is other.encoding and self.weight == other.weight
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.encoding)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EncodingProposal):
            return NotImplemented
        if self.weight is not None and other.weight is not None:
            return self.weight < other.weight
        return self.weight is None and other.weight is not None

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, EncodingProposal):
            return NotImplemented
        if self.weight is not None and other.weight is not None:
            return self.weight > other.weight
        return self.weight is not None and other.weight is None