"""Public package exports for :mod:`bintotxt`."""

from __future__ import annotations

from .emit import HEADER, emit, format_edge, write_edges
from .exceptions import (
    BintotxtError,
    GraphFormatError,
    GraphIOError,
    InputError,
    VertexRangeError,
)
from .graph import Edge, EdgeList
from .io import decode, read_graph
from .logger import Logger, NoopLogger, StdLogger

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "EdgeList",
    "decode",
    "read_graph",
    "emit",
    "format_edge",
    "write_edges",
    "HEADER",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "BintotxtError",
    "GraphIOError",
    "InputError",
    "GraphFormatError",
    "VertexRangeError",
]
