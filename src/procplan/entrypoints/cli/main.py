"""Top-level ``procplan`` command.

Global options control console verbosity and the flight recorder; the
actual work lives in the ``db`` and ``plan`` sub-groups::

    $ procplan db upgrade
    $ procplan -v plan add-user 19 1010 2
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from procplan import __version__
from procplan.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .db import db as db_group
from .helpers import hyperlink, parse_log_level
from .plans import plan as plan_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("procplan", appauthor=False, ensure_exists=True)) / "latest.log"
)
DEFAULT_FLIGHT_CAPACITY = 2000

HELP = """Record which users take part in the procedures of a plan.

    Identifiers are validated first, then the plan procedure and the user are
    looked up, and the participation is stored at most once.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("Documentation:", fg="blue", bold=True, underline=True),
        "  " + hyperlink("https://docs.sqlalchemy.org/", "SQLAlchemy"),
        "  " + hyperlink("https://alembic.sqlalchemy.org/", "Alembic"),
    ]
)


def effective_level(verbose_count: int, quiet_count: int) -> int:
    """WARNING shifted one level per -v (down) or -q (up), kept within DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return min(logging.CRITICAL, max(logging.DEBUG, level))


@clickx.extra_group(
    version=__version__,
    help=HELP,
    epilog=EPILOG,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show more log output (INFO with -v, DEBUG with -vv).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show less log output (ERROR with -q, CRITICAL with -qq).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source locations.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    envvar="PROCPLAN_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL. Repeatable; the "
        "environment variable takes a comma or space separated list."
    ),
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    envvar="PROCPLAN_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory and write them to --log-path "
        "whenever a WARNING or worse is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    envvar="PROCPLAN_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer when the command exits.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="PROCPLAN_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to (truncated on each run).",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=DEFAULT_FLIGHT_CAPACITY,
    hidden=True,
    envvar="PROCPLAN_FLIGHT_RECORDER_CAPACITY",
    help="Number of records the flight recorder keeps.",
)
@clickx.pass_context
def procplan(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    flight_recorder: bool,
    force_flush: bool,
    log_path: Path,
    flight_recorder_capacity: int,
) -> None:
    """Record which users take part in the procedures of a plan."""
    level = effective_level(verbose_count, quiet_count)

    # click-extra leaves ctx.color as None unless --no-color was given
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=ctx.color is not False)
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush,
            )
        )

    # handlers do the filtering; the root logger lets everything through
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, name_level in logger_levels.items():
        logging.getLogger(name).setLevel(name_level)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


procplan.add_command(db_group)
procplan.add_command(plan_group)
