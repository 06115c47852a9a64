"""Record types persisted by PROCPLAN.

Records are plain immutable values identified by integer keys. They do not
validate their identifiers; request validation happens in the service layer
before any record is built or looked up.
"""

from __future__ import annotations

from dataclasses import dataclass

# identifiers are stored in 32-bit signed INTEGER columns
MAX_ID = 2**31 - 1


@dataclass(frozen=True, slots=True)
class Plan:
    """Top-level grouping of procedures."""

    plan_id: int
    name: str | None = None

    @property
    def key(self) -> tuple[int]:
        """Primary key of the record."""
        return (self.plan_id,)


@dataclass(frozen=True, slots=True)
class Procedure:
    """A step or task that can belong to one or more plans."""

    procedure_id: int
    description: str | None = None

    @property
    def key(self) -> tuple[int]:
        """Primary key of the record."""
        return (self.procedure_id,)


@dataclass(frozen=True, slots=True)
class User:
    """An account that can take part in a plan's procedures."""

    user_id: int
    name: str | None = None

    @property
    def key(self) -> tuple[int]:
        """Primary key of the record."""
        return (self.user_id,)


@dataclass(frozen=True, slots=True)
class PlanProcedure:
    """Association confirming that a procedure is part of a plan."""

    plan_id: int
    procedure_id: int

    @property
    def key(self) -> tuple[int, int]:
        """Primary key of the record."""
        return (self.plan_id, self.procedure_id)


@dataclass(frozen=True, slots=True)
class PlanProcedureUser:
    """Association recording a user's participation in a plan's procedure."""

    plan_id: int
    procedure_id: int
    user_id: int

    @property
    def key(self) -> tuple[int, int, int]:
        """Primary key of the record."""
        return (self.plan_id, self.procedure_id, self.user_id)
