"""Logging for builds and the server.

Events are key/value pairs on stderr. While a post is being built its name
is bound into the context, so converter and template events say which
document they belong to without passing it around.
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import Any, TextIO

import structlog
from structlog.types import Processor


class _StderrProxy:
    """Writes to whatever sys.stderr is at call time.

    CliRunner swaps sys.stderr per invocation; holding the original stream
    would write into a closed buffer on the next run.
    """

    def write(self, s: str) -> int:
        return sys.stderr.write(s)

    def flush(self) -> None:
        sys.stderr.flush()

    def isatty(self) -> bool:
        return sys.stderr.isatty()


_stderr: TextIO = _StderrProxy()  # type: ignore[assignment]


def configure_logging(verbose: bool = False, json_logs: bool = False) -> None:
    """Set up structlog for one CLI run.

    ``verbose`` lowers the threshold to debug, which shows converter
    command lines and removed pages. ``json_logs`` emits one JSON object per
    line with a UTC timestamp, for piping build output into other tools.
    """
    level = logging.DEBUG if verbose else logging.INFO

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
    ]
    if json_logs:
        processors += [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=_stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=_stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a logger tagged with the last part of ``name`` as ``component``."""
    if not name:
        return structlog.get_logger()
    return structlog.get_logger(component=name.rsplit(".", 1)[-1])


def bind_context(**values: Any) -> AbstractContextManager[None]:
    """Attach ``values`` to every event logged inside the ``with`` block."""
    return structlog.contextvars.bound_contextvars(**values)


__all__ = ["configure_logging", "get_logger", "bind_context"]
