"""Runtime configuration.

PROCPLAN reads a single setting from the environment, the database URL.
Alembic is configured in code rather than through an ``alembic.ini`` so the
migration scripts can be found wherever the package is installed.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "PROCPLAN_DB_URL"
MIGRATIONS_PACKAGE = "procplan.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """PROCPLAN_DB_URL is missing or empty."""


def get_db_url() -> str:
    """Return the SQLAlchemy URL stored in ``PROCPLAN_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If the variable is unset or empty.
    """
    url = os.environ.get(DB_URL_ENV_VAR, "")
    if not url:
        raise DatabaseUrlNotSetError(f"{DB_URL_ENV_VAR} is not set")
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Alembic ``Config`` for PROCPLAN's packaged migrations.

    Args:
        db_url: Database to migrate. May be omitted for commands that only
            read the scripts (``heads``, ``history``).
        stdout: Where Alembic prints its status lines.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg
