"""In-memory repository implementations.

All repositories built over the same :class:`InMemoryStoreData` see each
other's writes, which lets tests seed related records (a plan procedure and a
user, say) and then exercise a handler against them.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from procplan.domain.model import (
    Plan,
    PlanProcedure,
    PlanProcedureUser,
    Procedure,
    User,
)
from procplan.interfaces.repositories import (
    DuplicateRecordError,
    PlanProcedureRepository,
    PlanProcedureUserRepository,
    PlanRepository,
    ProcedureRepository,
    UserRepository,
)

R = TypeVar("R")  # Record

# pylint: disable=too-few-public-methods


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared backing store for in-memory repositories.

    Each mapping is keyed by the record's primary key tuple. Writes are
    visible immediately; there is no transaction isolation. ``lock`` only
    serialises :meth:`InMemoryPlanProcedureUserRepository.add_if_absent`.
    """

    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    plans: dict[tuple[int, ...], Plan] = field(default_factory=dict)
    procedures: dict[tuple[int, ...], Procedure] = field(default_factory=dict)
    users: dict[tuple[int, ...], User] = field(default_factory=dict)
    plan_procedures: dict[tuple[int, ...], PlanProcedure] = field(default_factory=dict)
    plan_procedure_users: dict[tuple[int, ...], PlanProcedureUser] = field(
        default_factory=dict
    )


class InMemoryRepositoryBase(Generic[R]):
    """Shared mechanics for in-memory repositories: get, add, list."""

    KIND: str
    BUCKET_ATTR: str  # e.g. "plans", "plan_procedures", ...

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    @property
    def _bucket(self) -> dict[tuple[int, ...], R]:
        return getattr(self._data, self.BUCKET_ATTR)

    def get(self, *key: int) -> R | None:
        return self._bucket.get(tuple(key))

    def add(self, record: R) -> None:
        key = record.key  # type: ignore[attr-defined]
        if key in self._bucket:
            raise DuplicateRecordError(self.KIND, key)
        self._bucket[key] = record

    def list(self) -> list[R]:
        return [self._bucket[key] for key in sorted(self._bucket)]


class InMemoryPlanRepository(InMemoryRepositoryBase[Plan], PlanRepository):
    """In-memory plans."""

    BUCKET_ATTR = "plans"


class InMemoryProcedureRepository(
    InMemoryRepositoryBase[Procedure], ProcedureRepository
):
    """In-memory procedures."""

    BUCKET_ATTR = "procedures"


class InMemoryUserRepository(InMemoryRepositoryBase[User], UserRepository):
    """In-memory users."""

    BUCKET_ATTR = "users"


class InMemoryPlanProcedureRepository(
    InMemoryRepositoryBase[PlanProcedure], PlanProcedureRepository
):
    """In-memory plan/procedure links."""

    BUCKET_ATTR = "plan_procedures"


class InMemoryPlanProcedureUserRepository(
    InMemoryRepositoryBase[PlanProcedureUser], PlanProcedureUserRepository
):
    """In-memory user participations."""

    BUCKET_ATTR = "plan_procedure_users"

    def add_if_absent(self, record: PlanProcedureUser) -> bool:
        with self._data.lock:
            if record.key in self._bucket:
                return False
            self._bucket[record.key] = record
            return True
