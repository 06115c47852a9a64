"""Logging setup for the PROCPLAN command line.

Two handlers hang off the root logger:

* a Rich console handler on stderr, filtered by the ``-v``/``-q`` level;
* an optional *flight recorder*: a ``MemoryHandler`` that keeps recent
  records at DEBUG and dumps them to a file once something goes wrong, so a
  failed ``procplan plan add-user`` can be investigated afterwards.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "procplan"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s "
    "%(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[package]`` for records from other libraries.

    ``sqlalchemy.engine.Engine`` becomes ``[sqlalchemy]``; PROCPLAN's own
    records get an empty prefix. No record is ever dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Console handler writing to stderr through Rich.

    In debug mode every record is shown together with its time, logger name
    and source location, and the level argument is ignored.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Buffer up to ``capacity`` records and write them to ``path`` on demand.

    The file is truncated when the handler is built. The buffer is flushed
    when a record at ``flush_level`` or higher arrives, when it is full, and,
    if ``flush_on_close`` is set, when logging shuts down.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def _environment_lines(handlers: list[logging.Handler]) -> list[tuple[str, object]]:
    return [
        ("Python", sys.version.split()[0]),
        ("Platform", f"{platform.system()} {platform.release()}"),
        ("PID", os.getpid()),
        ("CWD", Path.cwd()),
        ("Alembic", alembic.__version__),
        ("SQLAlchemy", sqlalchemy.__version__),
        ("Handlers", [type(h).__name__ for h in handlers]),
    ]


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log what this run is configured to do.

    One INFO summary line, then DEBUG lines describing the interpreter,
    library versions, handlers, flight recorder and per-logger levels.
    """
    logger.info(
        "PROCPLAN %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )
    for label, value in _environment_lines(handlers):
        logger.debug("%s: %s", label, value)

    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )

    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
