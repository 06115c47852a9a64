"""The data-access context handlers work through.

A handler opens the unit of work with ``with uow:``, reads and writes through
its repositories, and calls :meth:`AbstractUnitOfWork.commit` once it wants
its writes kept. Whatever is still pending when the block ends is rolled
back, so an early return, a domain error or a cancellation leaves the store
as it was.
"""

from __future__ import annotations

import abc

from .repositories import (
    PlanProcedureRepository,
    PlanProcedureUserRepository,
    PlanRepository,
    ProcedureRepository,
    UserRepository,
)


class AbstractUnitOfWork(abc.ABC):
    """Repositories for every record kind plus transaction control."""

    plans: PlanRepository
    procedures: ProcedureRepository
    users: UserRepository
    plan_procedures: PlanProcedureRepository
    plan_procedure_users: PlanProcedureUserRepository

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *exc_info) -> None:
        # a no-op after commit()
        self.rollback()

    @abc.abstractmethod
    def commit(self) -> None:
        """Make the writes of this block permanent."""

    @abc.abstractmethod
    def rollback(self) -> None:
        """Discard writes not yet committed."""
