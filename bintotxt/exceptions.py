"""Custom exception types used across :mod:`bintotxt`."""

from __future__ import annotations

from typing import Optional


class BintotxtError(Exception):
    """Base class for all package-specific errors."""


class GraphIOError(BintotxtError, OSError):
    """Raised when an input or output file cannot be opened, read or written."""


class InputError(BintotxtError, ValueError):
    """Raised for malformed or inconsistent graph data."""


class GraphFormatError(InputError):
    """Raised when the binary layout is truncated or otherwise malformed."""


class VertexRangeError(InputError):
    """Raised when an edge references a vertex outside ``[0, n)``.

    Attributes:
        u: Offending ``from`` index.
        v: Offending ``to`` index.
        n: Vertex count the edge was checked against.
        index: Position of the edge in the input, if known.
    """

    def __init__(self, u: int, v: int, n: int, index: Optional[int] = None) -> None:
        self.u = u
        self.v = v
        self.n = n
        self.index = index
        where = "edge" if index is None else f"edge {index}"
        super().__init__(f"invalid vertex indices in {where}: from={u}, to={v} (n={n})")


__all__ = [
    "BintotxtError",
    "GraphIOError",
    "InputError",
    "GraphFormatError",
    "VertexRangeError",
]
