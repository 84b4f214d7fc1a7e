"""Logging helpers for applications embedding dashup.

The package logger only carries a ``NullHandler``; nothing is printed unless
the embedding application configures logging. This module provides a Rich
console handler for that purpose, plus a filter that annotates third-party log
records with a short prefix used by the console formatting.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from dashup.config import get_log_level

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "dashup"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside the embedding application with their origin.

    dashup is a library, so "first party" is whatever the embedding
    application says it is: the ``dashup`` loggers plus any extra top-level
    logger names passed in. A name matches only on whole dotted segments, so
    ``"dashup_ext"`` is not part of ``"dashup"``. Other records get
    ``record.prefix`` set to their root logger in brackets; nothing is dropped.
    """

    def __init__(self, first_party: Iterable[str] = ()) -> None:
        super().__init__()
        self.first_party = frozenset({PROJECT_PREFIX, *first_party})

    def is_first_party(self, name: str) -> bool:
        """Return True if logger `name` belongs to a first-party namespace."""
        return name.partition(".")[0] in self.first_party

    def filter(self, record: logging.LogRecord) -> bool:
        root = record.name.partition(".")[0]
        record.prefix = "" if self.is_first_party(record.name) else f"[{root}]"
        return True


def config_console_handler(
    level: int | None = None,
    debug_mode: bool = False,
    color: bool = True,
    first_party: Iterable[str] = (),
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode it is set to DEBUG and shows
    source file/line information; otherwise records from outside
    `first_party` carry a short origin prefix.

    Args:
        level: Minimum level for console output. Defaults to the level from
            `DASHUP_LOG_LEVEL` (see `dashup.config.get_log_level`); overridden
            to DEBUG in debug_mode.
        debug_mode: When True, enable debug formatting (show_path, logger names).
        color: Enable color output when True.
        first_party: Top-level logger names of the embedding application,
            printed without a prefix like the ``dashup`` loggers.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG
    elif level is None:
        level = get_log_level()

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter(first_party))

    return handler
