"""In-memory edge list decoded from a binary graph dump."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from .exceptions import InputError, VertexRangeError

Vertex = int

INT16_MIN = -(1 << 15)
INT16_MAX = (1 << 15) - 1


class Edge(NamedTuple):
    """Directed edge ``u -> v`` with signed weight ``w``."""

    u: Vertex
    v: Vertex
    w: int


def _check_int16(name: str, value: int) -> None:
    """Raise :class:`InputError` unless ``value`` fits in a signed 16-bit integer."""
    if not INT16_MIN <= value <= INT16_MAX:
        raise InputError(f"{name}={value} does not fit in a signed 16-bit integer")


@dataclass
class EdgeList:
    """Vertex count plus the edges of a directed graph, in input order.

    Duplicate and parallel edges are kept as they are. Every edge must
    satisfy ``0 <= u < n`` and ``0 <= v < n``.

    Attributes:
        n: Number of vertices in the range ``0`` .. ``n-1``.
        edges: Edges in the order they were added.
    """

    n: int
    edges: List[Edge] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate the vertex count and any edges passed to the constructor."""
        if not isinstance(self.n, int) or self.n < 0:
            raise InputError("EdgeList.n must be a non-negative integer.")
        _check_int16("n", self.n)
        pending, self.edges = self.edges, []
        for u, v, w in pending:
            self.add_edge(u, v, w)

    def add_edge(self, u: Vertex, v: Vertex, w: int) -> None:
        """Append the directed edge ``(u, v, w)``.

        Args:
            u: Tail vertex.
            v: Head vertex.
            w: Signed 16-bit weight.

        Raises:
            VertexRangeError: If ``u`` or ``v`` is outside ``[0, n)``.
            InputError: If ``w`` does not fit in 16 bits.

        Examples:
            ```python
            >>> g = EdgeList(2)
            >>> g.add_edge(0, 1, -5)
            >>> g.edges
            [Edge(u=0, v=1, w=-5)]
            ```
        """
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise VertexRangeError(u, v, self.n, index=len(self.edges))
        _check_int16("w", w)
        self.edges.append(Edge(int(u), int(v), int(w)))

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Tuple[int, int, int]]) -> "EdgeList":
        """Create a snapshot from an iterable of ``(u, v, w)`` triples."""
        g = cls(n)
        for u, v, w in edges:
            g.add_edge(int(u), int(v), int(w))
        return g

    def __len__(self) -> int:
        """Return the number of edges."""
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        """Iterate over the edges in input order."""
        return iter(self.edges)


__all__ = ["Edge", "EdgeList", "Vertex", "INT16_MIN", "INT16_MAX"]
