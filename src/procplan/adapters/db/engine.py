"""Engine construction for PROCPLAN.

Code that needs an :class:`~sqlalchemy.engine.Engine` calls :func:`make_engine`
rather than ``create_engine`` so that SQLite files behave the same way in the
CLI, the tests and the migrations: foreign keys are enforced (a participation
must point at an existing plan procedure and user) and writers wait for each
other instead of failing with ``database is locked``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

from .dialects import DialectName, UnsupportedDialect

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# busy_timeout goes first: the journal_mode switch itself needs a write lock
SQLITE_PRAGMAS: tuple[tuple[str, str | int], ...] = (
    ("busy_timeout", 5000),
    ("foreign_keys", "ON"),
    ("journal_mode", "WAL"),
    ("synchronous", "NORMAL"),
    ("temp_store", "MEMORY"),
)


def is_sqlite(url: str | URL) -> bool:
    """True when ``url`` names a SQLite database, whatever the driver."""
    try:
        return DialectName.from_string(make_url(url).get_backend_name()) is (
            DialectName.SQLITE
        )
    except UnsupportedDialect:
        return False


def _apply_sqlite_pragmas(dbapi_conn, _conn_record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for name, value in SQLITE_PRAGMAS:
            cursor.execute(f"PRAGMA {name}={value};")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Build an engine for ``url``.

    SQLite connections run every statement in :data:`SQLITE_PRAGMAS` as soon
    as they are opened. Other backends are created unchanged.

    Args:
        url: SQLAlchemy database URL.
        echo: Log emitted SQL through the ``sqlalchemy.engine`` logger.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine
