"""AddUserToProcedure against a migrated SQLite database.

Exercises the full stack below the CLI: bootstrap, message bus, handler,
SQLAlchemy unit of work and the Alembic-created schema.
"""

from __future__ import annotations

import threading

import pytest

from procplan.bootstrap import bootstrap
from procplan.domain.errors import (
    IdOutOfRangeError,
    InvalidArgumentError,
    PlanProcedureNotFoundError,
    UserNotFoundError,
)
from procplan.domain.model import PlanProcedureUser
from procplan.service_layer.commands import AddUserToProcedure
from procplan.service_layer.results import UNIT

# pylint: disable=redefined-outer-name


@pytest.fixture
def bus(sqlite_url_file):
    """Message bus wired to a freshly migrated file database."""
    return bootstrap(sqlite_url_file).message_bus


def participations(bus) -> list[PlanProcedureUser]:
    """Rows currently stored in plan_procedure_users."""
    with bus.uow:
        return bus.uow.plan_procedure_users.list()


def test_plan_procedure_not_found(bus, seed_plan_procedure):
    """Only PlanProcedure(2, 2) exists; (1, 1, 1) is not found."""
    seed_plan_procedure(bus.uow, 2, 2)

    result = bus.handle(AddUserToProcedure(1, 1, 1))

    assert isinstance(result.error, PlanProcedureNotFoundError)
    assert participations(bus) == []


def test_user_not_found(bus, seed_plan_procedure):
    """A missing user is reported after the plan procedure check passes."""
    seed_plan_procedure(bus.uow, 1, 1)

    result = bus.handle(AddUserToProcedure(1, 1, 1))

    assert isinstance(result.error, UserNotFoundError)
    assert participations(bus) == []


def test_invalid_argument_is_rejected(bus):
    """Validation failures come back as results, not exceptions."""
    result = bus.handle(AddUserToProcedure(0, 1, 1))
    assert isinstance(result.error, InvalidArgumentError)


@pytest.mark.parametrize("ids", [(2**63, 1, 1), (1, 1, 2**31)], ids=["int64", "int32"])
def test_oversized_id_fails_without_reaching_sqlite(bus, ids):
    """Ids beyond the INTEGER columns come back as failed results."""
    result = bus.handle(AddUserToProcedure(*ids))

    assert isinstance(result.error, IdOutOfRangeError)
    assert participations(bus) == []


def test_existing_participation_is_unchanged(bus, seed_participation):
    """(19, 1010, 2) already present: success and still one row."""
    seed_participation(bus.uow, 19, 1010, 2)

    result = bus.handle(AddUserToProcedure(19, 1010, 2))

    assert result.succeeded
    assert result.value is UNIT
    assert participations(bus) == [PlanProcedureUser(19, 1010, 2)]


def test_new_participation_is_persisted(bus, seed_plan_procedure, seed_user):
    """A valid, new triple is committed."""
    seed_plan_procedure(bus.uow, 19, 1010)
    seed_user(bus.uow, 2)

    result = bus.handle(AddUserToProcedure(19, 1010, 2))

    assert result.succeeded
    assert participations(bus) == [PlanProcedureUser(19, 1010, 2)]


def test_concurrent_requests_store_one_row(
    sqlite_url_file, seed_plan_procedure, seed_user
):
    """Simultaneous identical requests all succeed and store a single row."""
    setup_bus = bootstrap(sqlite_url_file).message_bus
    seed_plan_procedure(setup_bus.uow, 3, 4)
    seed_user(setup_bus.uow, 5)

    workers = 6
    barrier = threading.Barrier(workers)
    results = []
    errors: list[BaseException] = []

    def worker():
        # one bus (and connection) per thread
        worker_bus = bootstrap(sqlite_url_file).message_bus
        barrier.wait()
        try:
            results.append(worker_bus.handle(AddUserToProcedure(3, 4, 5)))
        except Exception as e:  # pylint: disable=broad-except
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(results) == workers
    assert all(r.succeeded for r in results)
    assert participations(setup_bus) == [PlanProcedureUser(3, 4, 5)]
