"""Alembic environment for the PROCPLAN schema.

The database URL is taken from, in order: ``-x url=...`` on the Alembic
command line, ``sqlalchemy.url`` in the config, then ``PROCPLAN_DB_URL``.
SQLite migrations run in batch mode so column and constraint changes work.
"""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

import procplan.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from procplan.adapters.db.metadata import metadata

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def get_url() -> str:
    """First non-empty URL from the x-args, the config and the environment."""
    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        config.get_main_option("sqlalchemy.url"),
        os.environ.get("PROCPLAN_DB_URL"),
    )
    for url in candidates:
        # skip an uninterpolated "%(...)s" placeholder
        if url and "%(" not in url:
            return url
    raise RuntimeError("No database URL: set PROCPLAN_DB_URL or pass -x url=...")


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=get_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the migrations over a live connection."""
    engine = engine_from_config(
        {"sqlalchemy.url": get_url()}, prefix="sqlalchemy.", poolclass=pool.NullPool
    )
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
