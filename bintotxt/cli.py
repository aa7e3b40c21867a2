"""Command-line interface for converting binary graph dumps to text."""

from __future__ import annotations

import argparse
import sys
import traceback
from typing import List, Optional

from .config import DEFAULT_OUTPUT, RunConfig
from .emit import HEADER, write_edges
from .exceptions import BintotxtError, GraphFormatError, GraphIOError, VertexRangeError
from .io import read_graph
from .logger import StdLogger

EXIT_OK = 0
EXIT_VALIDATION = 64
EXIT_FORMAT = 65
EXIT_INTERNAL = 70
EXIT_IO = 74


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``bintotxt`` tool."""
    examples = (
        "Examples:\n"
        "  bintotxt -i graph.bin\n"
        "  bintotxt -i graph.bin -o edges.txt\n"
        "  bintotxt -i graph.bin --log-level debug\n"
    )
    p = argparse.ArgumentParser(
        prog="bintotxt",
        description="Write the edge list of a binary int16 graph dump as text",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("-i", dest="input", default="", help="Input binary graph file")
    p.add_argument(
        "-o",
        dest="output",
        default=DEFAULT_OUTPUT,
        help=f"Output text file (default: {DEFAULT_OUTPUT})",
    )
    p.add_argument("--header", default=HEADER, help="First line of the report")
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    return p


def run(cfg: RunConfig, logger: StdLogger) -> int:
    """Decode ``cfg.input_path`` and write the report to ``cfg.output_path``."""
    try:
        graph = read_graph(cfg.input_path, logger=logger)
        print(f"Graph read: {graph.n} vertices, {len(graph)} edges.")
        lines = write_edges(cfg.output_path, graph, header=cfg.header)
        logger.info(
            "run",
            input=cfg.input_path,
            output=cfg.output_path,
            n=graph.n,
            m=len(graph),
            lines=lines,
        )
        print(f"Edges written to {cfg.output_path}.")
        return EXIT_OK
    except BintotxtError as exc:
        if cfg.verbose:
            traceback.print_exc()
        print(f"error: {exc}")
        if isinstance(exc, VertexRangeError):
            code = EXIT_VALIDATION
        elif isinstance(exc, GraphFormatError):
            code = EXIT_FORMAT
        elif isinstance(exc, GraphIOError):
            code = EXIT_IO
        else:
            code = EXIT_INTERNAL
        logger.warning("failed", input=cfg.input_path, error=type(exc).__name__, exit=code)
        return code
    except Exception as exc:
        if cfg.verbose:
            traceback.print_exc()
        print(f"internal error: {exc}")
        logger.warning(
            "failed", input=cfg.input_path, error=type(exc).__name__, exit=EXIT_INTERNAL
        )
        return EXIT_INTERNAL


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``bintotxt`` command-line tool."""
    parser = build_parser()
    cfg = RunConfig.from_args(parser.parse_args(argv))

    if not cfg.input_path:
        sys.stdout.write(parser.format_usage())
        return EXIT_OK

    logger = StdLogger(level=cfg.log_level, json_fmt=cfg.log_json, stream=sys.stderr)
    return run(cfg, logger)


if __name__ == "__main__":
    sys.exit(main())
