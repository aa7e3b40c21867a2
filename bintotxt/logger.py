"""Lightweight logging helpers for optional structured output."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol


class Logger(Protocol):
    """Protocol for minimal logger implementations."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events, used when a caller passes none."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore an ``INFO`` event."""
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore a ``DEBUG`` event."""
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore a ``WARNING`` event."""
        return


class StdLogger:
    """Level-filtered logger writing ``key=value`` or JSON lines.

    Events below ``level`` are dropped. With ``json_fmt`` each event is one
    JSON object per line, non-ASCII text kept as is.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Any | None = None,
    ) -> None:
        """Initialize the logger.

        Args:
            level: Minimum level to emit, ``"debug"``, ``"info"`` or ``"warning"``.
            json_fmt: Write JSON lines instead of ``key=value`` text.
            stream: Destination text stream, ``sys.stderr`` by default.
        """
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def _enabled(self, level: str) -> bool:
        return self._levels[level] >= self._levels.get(self.level, 20)

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit a log ``event`` at ``level`` with additional ``fields``."""
        if not self._enabled(level):
            return
        if self.json_fmt:
            obj = {"level": level, "event": event}
            obj.update(fields)
            self.stream.write(json.dumps(obj, ensure_ascii=False) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO`` event."""
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG`` event."""
        self.log("debug", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING`` event, e.g. for a failed conversion."""
        self.log("warning", event, **fields)
