"""Database backends PROCPLAN knows how to talk to.

Adapter code branches on :class:`DialectName` members instead of comparing
raw dialect strings.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class UnsupportedDialect(Exception):
    """The backend is neither PostgreSQL nor SQLite."""


class DialectName(str, Enum):
    """Supported SQLAlchemy backends."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str | None) -> DialectName:
        """Map a dialect or ``backend+driver`` string to a member.

        ``"postgres"`` and ``"pg"`` are accepted as PostgreSQL aliases; case
        and surrounding whitespace are ignored.

        Raises:
            UnsupportedDialect: For anything else, including empty input.
        """
        backend = (dialect_str or "").strip().lower().partition("+")[0]
        member = _ALIASES.get(backend)
        if member is None:
            raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")
        return member

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Dialect of an ``Engine`` or ``Connection``.

        Raises:
            UnsupportedDialect: If ``obj`` has no ``dialect.name`` or the
                backend is not supported.
        """
        name = getattr(getattr(obj, "dialect", None), "name", None)
        if name is None:
            raise UnsupportedDialect(
                f"{type(obj).__name__} has no SQLAlchemy dialect"
            )
        return cls.from_string(name)


_ALIASES = {
    "postgresql": DialectName.POSTGRES,
    "postgres": DialectName.POSTGRES,
    "pg": DialectName.POSTGRES,
    "sqlite": DialectName.SQLITE,
}
