"""Requests the service layer accepts.

Commands are immutable value objects; they carry raw caller input, so
nothing is validated on construction.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Marker base class; the bus dispatches on the concrete subclass."""


@dataclass(frozen=True)
class AddUserToProcedure(Command):
    """Make ``user_id`` a participant of procedure ``procedure_id`` in plan ``plan_id``."""

    plan_id: int
    procedure_id: int
    user_id: int
