"""Concrete repository adapters."""

from .in_memory import (
    InMemoryPlanProcedureRepository,
    InMemoryPlanProcedureUserRepository,
    InMemoryPlanRepository,
    InMemoryProcedureRepository,
    InMemoryStoreData,
    InMemoryUserRepository,
)
from .sqlalchemy_adapters import (
    SqlAlchemyPlanProcedureRepository,
    SqlAlchemyPlanProcedureUserRepository,
    SqlAlchemyPlanRepository,
    SqlAlchemyProcedureRepository,
    SqlAlchemyUserRepository,
)

__all__ = [
    "InMemoryPlanProcedureRepository",
    "InMemoryPlanProcedureUserRepository",
    "InMemoryPlanRepository",
    "InMemoryProcedureRepository",
    "InMemoryStoreData",
    "InMemoryUserRepository",
    "SqlAlchemyPlanProcedureRepository",
    "SqlAlchemyPlanProcedureUserRepository",
    "SqlAlchemyPlanRepository",
    "SqlAlchemyProcedureRepository",
    "SqlAlchemyUserRepository",
]
