"""Run configuration assembled once from command-line arguments."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from .emit import HEADER

DEFAULT_OUTPUT = "output.txt"


@dataclass(frozen=True)
class RunConfig:
    """Immutable settings for a single conversion run.

    Attributes:
        input_path: Binary graph file to decode. Empty means "not given".
        output_path: Text report destination, truncated if it exists.
        header: First line of the report.
        log_level: ``"debug"``, ``"info"`` or ``"warning"``.
        log_json: Emit log events as JSON lines.
        verbose: Print tracebacks for failures.
    """

    input_path: str = ""
    output_path: str = DEFAULT_OUTPUT
    header: str = HEADER
    log_level: str = "warning"
    log_json: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunConfig":
        """Build a configuration from parsed ``argparse`` arguments."""
        return cls(
            input_path=args.input or "",
            output_path=args.output or DEFAULT_OUTPUT,
            header=args.header,
            log_level=args.log_level,
            log_json=args.log_json,
            verbose=args.verbose,
        )
