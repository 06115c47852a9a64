"""SQLAlchemy-backed Unit of Work for PROCPLAN.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection and the
SQLAlchemy repositories.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from procplan.adapters.repositories.sqlalchemy_adapters import (
    SqlAlchemyPlanProcedureRepository,
    SqlAlchemyPlanProcedureUserRepository,
    SqlAlchemyPlanRepository,
    SqlAlchemyProcedureRepository,
    SqlAlchemyUserRepository,
)
from procplan.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Each ``with`` block opens its own connection, so one instance can be
    reused across calls but not entered concurrently from several threads.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.plans = SqlAlchemyPlanRepository(self.connection)
        self.procedures = SqlAlchemyProcedureRepository(self.connection)
        self.users = SqlAlchemyUserRepository(self.connection)
        self.plan_procedures = SqlAlchemyPlanProcedureRepository(self.connection)
        self.plan_procedure_users = SqlAlchemyPlanProcedureUserRepository(
            self.connection
        )
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
