"""Abstract repositories over PROCPLAN records.

Each repository exposes point lookup by (composite) primary key, a strict
insert, and a full listing ordered by key. The participation repository adds
an idempotent insert that is safe against concurrent writers.
"""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

from procplan.domain.model import (
    Plan,
    PlanProcedure,
    PlanProcedureUser,
    Procedure,
    User,
)

R = TypeVar("R")  # Record


class Repository(abc.ABC, Generic[R]):
    """Keyed access to one kind of record."""

    KIND: str  # e.g. "plan", "plan_procedure", ...

    @abc.abstractmethod
    def get(self, *key: int) -> R | None:
        """Look up a record by its primary key.

        Args:
            *key: The primary key columns, in declaration order.

        Returns:
            The record if found, otherwise ``None``.
        """

    @abc.abstractmethod
    def add(self, record: R) -> None:
        """Insert a new record.

        Args:
            record: The record to insert.

        Raises:
            DuplicateRecordError: If a record with the same key already exists.
        """

    @abc.abstractmethod
    def list(self) -> list[R]:
        """Return every record, ordered by primary key."""


class PlanRepository(Repository[Plan]):
    """Repository of plans, keyed by ``plan_id``."""

    KIND = "plan"


class ProcedureRepository(Repository[Procedure]):
    """Repository of procedures, keyed by ``procedure_id``."""

    KIND = "procedure"


class UserRepository(Repository[User]):
    """Repository of users, keyed by ``user_id``."""

    KIND = "user"


class PlanProcedureRepository(Repository[PlanProcedure]):
    """Repository of plan/procedure links, keyed by ``(plan_id, procedure_id)``."""

    KIND = "plan_procedure"


class PlanProcedureUserRepository(Repository[PlanProcedureUser]):
    """Repository of user participations, keyed by the full triple."""

    KIND = "plan_procedure_user"

    @abc.abstractmethod
    def add_if_absent(self, record: PlanProcedureUser) -> bool:
        """Insert the record unless one with the same key already exists.

        Unlike :meth:`add`, a conflicting key is not an error. Implementations
        must rely on the store's uniqueness guarantee rather than a prior read,
        so two concurrent callers never produce two rows.

        Args:
            record: The participation to record.

        Returns:
            bool: ``True`` if a row was inserted, ``False`` if it already existed.
        """
