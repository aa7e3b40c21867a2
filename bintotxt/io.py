"""Decoding of little-endian binary graph dumps.

Layout::

    offset 0:  int16  numVertices
    offset 2:  repeated until EOF: { int16 from, int16 to, int16 weight }

The total length of a well-formed file is ``2 + 6*E`` bytes for ``E`` edges.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, List, Optional, Union

import numpy as np
import numpy.typing as npt

from .exceptions import GraphFormatError, GraphIOError, VertexRangeError
from .graph import Edge, EdgeList
from .logger import Logger, NoopLogger

HEADER_DTYPE = np.dtype("<i2")
RECORD_DTYPE = np.dtype([("u", "<i2"), ("v", "<i2"), ("w", "<i2")])
HEADER_SIZE = HEADER_DTYPE.itemsize
RECORD_SIZE = RECORD_DTYPE.itemsize


def _read(stream: BinaryIO, size: int = -1) -> bytes:
    """Read up to ``size`` bytes, or to EOF, wrapping OS failures."""
    try:
        return stream.read(size)
    except OSError as exc:
        raise GraphIOError(f"failed to read graph data: {exc}") from exc


def _first_out_of_range(records: npt.NDArray[np.void], n: int) -> Optional[int]:
    """Return the position of the first record with an invalid vertex index."""
    u = records["u"]
    v = records["v"]
    bad = (u < 0) | (u >= n) | (v < 0) | (v >= n)
    hits = np.flatnonzero(bad)
    if hits.size == 0:
        return None
    return int(hits[0])


def decode(stream: BinaryIO, logger: Logger | None = None) -> EdgeList:
    """Decode a binary graph dump from an open binary ``stream``.

    Args:
        stream: Readable binary file object positioned at the header.
        logger: Optional logger receiving a ``decode`` debug event.

    Returns:
        The vertex count and edges, in the order they appear in the input.

    Raises:
        GraphFormatError: If the header or the last record is truncated, or
            the vertex count is negative.
        VertexRangeError: If an edge references a vertex outside ``[0, n)``.
        GraphIOError: If reading from ``stream`` fails.
    """
    log = logger or NoopLogger()

    head = _read(stream, HEADER_SIZE)
    if len(head) < HEADER_SIZE:
        raise GraphFormatError(
            f"truncated header: expected {HEADER_SIZE} bytes for the vertex count, got {len(head)}"
        )
    n = int(np.frombuffer(head, dtype=HEADER_DTYPE)[0])
    if n < 0:
        raise GraphFormatError(f"negative vertex count {n}")

    payload = _read(stream)
    count, rest = divmod(len(payload), RECORD_SIZE)
    # complete records are validated before a truncated tail is reported
    records = np.frombuffer(payload[: count * RECORD_SIZE], dtype=RECORD_DTYPE)
    bad = _first_out_of_range(records, n)
    if bad is not None:
        u, v, _ = records[bad].tolist()
        raise VertexRangeError(int(u), int(v), n, index=bad)
    if rest:
        raise GraphFormatError(
            f"truncated record {count}: expected {RECORD_SIZE} bytes, got {rest}"
        )

    edges: List[Edge] = [Edge(u, v, w) for u, v, w in records.tolist()]
    log.debug("decode", n=n, m=len(edges), bytes=HEADER_SIZE + len(payload))
    return EdgeList(n, edges)


def read_graph(path: Union[str, Path], logger: Logger | None = None) -> EdgeList:
    """Read and decode the binary graph file at ``path``.

    The file is closed before returning, on success and on every error.

    Raises:
        GraphIOError: If the file cannot be opened or read.
        GraphFormatError: See :func:`decode`.
        VertexRangeError: See :func:`decode`.
    """
    p = Path(path)
    try:
        fh = p.open("rb")
    except OSError as exc:
        raise GraphIOError(f"cannot open {p}: {exc}") from exc
    with fh:
        return decode(fh, logger=logger)


__all__ = ["decode", "read_graph", "HEADER_SIZE", "RECORD_SIZE"]
