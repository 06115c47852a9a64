"""Repository interfaces for PROCPLAN records."""

from .errors import DuplicateRecordError, RepositoryError
from .repositories import (
    PlanProcedureRepository,
    PlanProcedureUserRepository,
    PlanRepository,
    ProcedureRepository,
    Repository,
    UserRepository,
)

__all__ = [
    "DuplicateRecordError",
    "PlanProcedureRepository",
    "PlanProcedureUserRepository",
    "PlanRepository",
    "ProcedureRepository",
    "Repository",
    "RepositoryError",
    "UserRepository",
]
