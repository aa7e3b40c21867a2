"""Text rendering of decoded edge lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, TextIO, Tuple, Union

from .exceptions import GraphIOError

HEADER = "Список ребер графа:"


def format_edge(edge: Tuple[int, int, int]) -> str:
    """Return ``(u, v, w)`` as a single report line without newline.

    Indices are written as stored, zero-based.
    """
    u, v, w = edge
    return f"({u}, {v}, {w})"


def render_lines(edges: Iterable[Tuple[int, int, int]], header: str = HEADER) -> Iterator[str]:
    """Yield the report lines, header first, each ending with ``\\n``."""
    yield header + "\n"
    for edge in edges:
        yield format_edge(edge) + "\n"


def emit(edges: Iterable[Tuple[int, int, int]], stream: TextIO, header: str = HEADER) -> int:
    """Write the report for ``edges`` to ``stream``.

    Returns:
        Number of lines written, including the header.

    Raises:
        GraphIOError: If a write fails or a line cannot be encoded for
            ``stream``. Lines already written stay in the stream.
    """
    written = 0
    for line in render_lines(edges, header):
        try:
            stream.write(line)
        except (OSError, UnicodeEncodeError) as exc:
            raise GraphIOError(f"failed to write line {written + 1}: {exc}") from exc
        written += 1
    return written


def write_edges(
    path: Union[str, Path], edges: Iterable[Tuple[int, int, int]], header: str = HEADER
) -> int:
    """Create (or truncate) ``path`` and write the edge report to it.

    The file is UTF-8 with ``\\n`` line endings and is closed on every path.
    A failed write leaves the partial file on disk.

    Returns:
        Number of lines written, including the header.

    Raises:
        GraphIOError: If the file cannot be created or written.
    """
    p = Path(path)
    try:
        fh = p.open("w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise GraphIOError(f"cannot create {p}: {exc}") from exc
    try:
        with fh:
            return emit(edges, fh, header)
    except GraphIOError:
        raise
    except OSError as exc:
        # close() flushes buffered lines and can fail on its own
        raise GraphIOError(f"failed to write {p}: {exc}") from exc


__all__ = ["HEADER", "format_edge", "render_lines", "emit", "write_edges"]
