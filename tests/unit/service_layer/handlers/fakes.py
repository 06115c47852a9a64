"""Fake implementations for testing service layer handlers."""

from procplan.adapters.in_memory_unit_of_work import InMemoryUnitOfWork
from procplan.bootstrap.bootstrap import build_message_bus
from procplan.interfaces.unit_of_work import AbstractUnitOfWork
from procplan.service_layer.handlers import COMMAND_HANDLERS

REPOSITORY_NAMES = frozenset(
    {"plans", "procedures", "users", "plan_procedures", "plan_procedure_users"}
)


class FakeUoW(InMemoryUnitOfWork):
    """In-memory unit of work that counts commits."""

    def __init__(self):
        super().__init__()
        self.commit_count = 0

    def commit(self):
        super().commit()
        self.commit_count += 1


class NullDataSourceError(AssertionError):
    """Raised by NullUoW on any attempt to touch the store."""


class NullUoW(AbstractUnitOfWork):
    """A data-access context with no backing store.

    Entering it or touching any repository fails, which proves that a code
    path never reached the store.
    """

    def __enter__(self):
        raise NullDataSourceError("unit of work entered")

    def __getattr__(self, name):
        if name in REPOSITORY_NAMES:
            raise NullDataSourceError(f"repository {name!r} accessed")
        raise AttributeError(name)

    def commit(self):
        raise NullDataSourceError("commit called")

    def rollback(self):
        raise NullDataSourceError("rollback called")


def bootstrap_test_bus(uow: AbstractUnitOfWork | None = None):
    """Bootstrap a message bus for testing purposes."""
    return build_message_bus(
        uow=uow if uow is not None else FakeUoW(), command_handlers=COMMAND_HANDLERS
    )
