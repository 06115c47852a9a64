"""In-memory Unit of Work for PROCPLAN.

Backs the repositories with a shared :class:`InMemoryStoreData`. Writes are
visible immediately; leaving the ``with`` block without committing restores
the store to the snapshot taken on entry. Intended for tests and embedding.
"""

from __future__ import annotations

from dataclasses import fields

from procplan.adapters.repositories.in_memory import (
    InMemoryPlanProcedureRepository,
    InMemoryPlanProcedureUserRepository,
    InMemoryPlanRepository,
    InMemoryProcedureRepository,
    InMemoryStoreData,
    InMemoryUserRepository,
)
from procplan.interfaces.unit_of_work import AbstractUnitOfWork

BUCKETS = tuple(f.name for f in fields(InMemoryStoreData) if f.name != "lock")


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Unit of Work over in-memory repositories."""

    def __init__(self, data: InMemoryStoreData | None = None):
        self.data = data if data is not None else InMemoryStoreData()
        self.plans = InMemoryPlanRepository(self.data)
        self.procedures = InMemoryProcedureRepository(self.data)
        self.users = InMemoryUserRepository(self.data)
        self.plan_procedures = InMemoryPlanProcedureRepository(self.data)
        self.plan_procedure_users = InMemoryPlanProcedureUserRepository(self.data)
        self.committed = False
        self._snapshot: dict[str, dict] | None = None

    def __enter__(self):
        self._snapshot = {name: dict(getattr(self.data, name)) for name in BUCKETS}
        return super().__enter__()

    def commit(self):
        self.committed = True
        self._snapshot = None

    def rollback(self):
        if self._snapshot is None:
            return
        for name, saved in self._snapshot.items():
            bucket = getattr(self.data, name)
            bucket.clear()
            bucket.update(saved)
        self._snapshot = None
