"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only ``log-demo`` command that logs one record per level
on a project logger and a third-party one, plus a CliRunner, an isolated
filesystem and a migrated SQLite database exposed through
``PROCPLAN_DB_URL``.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from procplan.config import DB_URL_ENV_VAR
from procplan.entrypoints.cli.main import procplan

# pylint: disable=redefined-outer-name

PROJECT_LOGGER = "procplan.demo"
LIBRARY_LOGGER = "some.thirdparty"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@click.command()
def log_demo():
    """Log "plan log LEVEL" at every level, then a few library records."""
    project = logging.getLogger(PROJECT_LOGGER)
    for name in LEVELS:
        project.log(getattr(logging, name), "plan log %s", name)
    library = logging.getLogger(LIBRARY_LOGGER)
    for name in LEVELS[:3]:
        library.log(getattr(logging, name), "library log %s", name)
    project.debug("trailing debug record")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and from click-extra's sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register ``log-demo`` on the top-level group for one test."""
    procplan.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(procplan, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside the runner's isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def cli_env(sqlite_url_file) -> dict[str, str]:
    """Environment pointing the CLI at a migrated database, recorder off."""
    return {DB_URL_ENV_VAR: sqlite_url_file, "PROCPLAN_FLIGHT_RECORDER": "0"}
