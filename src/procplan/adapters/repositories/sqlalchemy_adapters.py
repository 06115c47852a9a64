"""Repository implementations using SQLAlchemy Core.

Repositories are bound to a single ``Connection`` owned by the unit of work;
they never commit on their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from procplan.adapters.db.dialects import DialectName, UnsupportedDialect
from procplan.adapters.db.schema import (
    plan_procedure_users,
    plan_procedures,
    plans,
    procedures,
    users,
)
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

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.dml import Insert

R = TypeVar("R")  # Record

# pylint: disable=too-few-public-methods


class SqlAlchemyRepositoryBase(Generic[R]):
    """Shared mechanics for table-backed repositories: get, add, list."""

    KIND: str
    TABLE: Table
    KEY_COLUMNS: tuple[str, ...]
    RECORD_TYPE: type[R]

    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    # --- mapping ---

    def _to_record(self, row: Any) -> R:
        return self.RECORD_TYPE(**row._mapping)  # pylint: disable=protected-access

    def _to_values(self, record: R) -> dict[str, Any]:
        return {column.name: getattr(record, column.name) for column in self.TABLE.c}

    # --- lookups ---

    def get(self, *key: int) -> R | None:
        if len(key) != len(self.KEY_COLUMNS):
            raise TypeError(
                f"{self.KIND} key has {len(self.KEY_COLUMNS)} parts, got {len(key)}"
            )
        stmt = select(self.TABLE).where(
            *(self.TABLE.c[name] == value for name, value in zip(self.KEY_COLUMNS, key))
        )
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return self._to_record(row)

    def list(self) -> list[R]:
        stmt = select(self.TABLE).order_by(
            *(self.TABLE.c[name] for name in self.KEY_COLUMNS)
        )
        return [self._to_record(row) for row in self.connection.execute(stmt)]

    # --- inserts ---

    def add(self, record: R) -> None:
        key = record.key  # type: ignore[attr-defined]
        if self.get(*key) is not None:
            raise DuplicateRecordError(self.KIND, key)
        self.connection.execute(insert(self.TABLE).values(**self._to_values(record)))


class SqlAlchemyPlanRepository(SqlAlchemyRepositoryBase[Plan], PlanRepository):
    """Plans stored in the ``plans`` table."""

    TABLE = plans
    KEY_COLUMNS = ("plan_id",)
    RECORD_TYPE = Plan


class SqlAlchemyProcedureRepository(
    SqlAlchemyRepositoryBase[Procedure], ProcedureRepository
):
    """Procedures stored in the ``procedures`` table."""

    TABLE = procedures
    KEY_COLUMNS = ("procedure_id",)
    RECORD_TYPE = Procedure


class SqlAlchemyUserRepository(SqlAlchemyRepositoryBase[User], UserRepository):
    """Users stored in the ``users`` table."""

    TABLE = users
    KEY_COLUMNS = ("user_id",)
    RECORD_TYPE = User


class SqlAlchemyPlanProcedureRepository(
    SqlAlchemyRepositoryBase[PlanProcedure], PlanProcedureRepository
):
    """Plan/procedure links stored in the ``plan_procedures`` table."""

    TABLE = plan_procedures
    KEY_COLUMNS = ("plan_id", "procedure_id")
    RECORD_TYPE = PlanProcedure


class SqlAlchemyPlanProcedureUserRepository(
    SqlAlchemyRepositoryBase[PlanProcedureUser], PlanProcedureUserRepository
):
    """User participations stored in the ``plan_procedure_users`` table."""

    TABLE = plan_procedure_users
    KEY_COLUMNS = ("plan_id", "procedure_id", "user_id")
    RECORD_TYPE = PlanProcedureUser

    def add_if_absent(self, record: PlanProcedureUser) -> bool:
        # The composite primary key decides; a concurrent insert of the same
        # triple turns this one into a no-op instead of an IntegrityError.
        result = self.connection.execute(self._build_no_throw_insert(record))
        return result.rowcount == 1

    def _build_no_throw_insert(self, record: PlanProcedureUser) -> Insert:
        dialect_name = DialectName.from_sqlalchemy(self.connection)
        values = self._to_values(record)
        if dialect_name is DialectName.POSTGRES:
            return (
                pg_insert(self.TABLE)
                .values(**values)
                .on_conflict_do_nothing(index_elements=list(self.KEY_COLUMNS))
            )
        if dialect_name is DialectName.SQLITE:
            return (
                sqlite_insert(self.TABLE)
                .values(**values)
                .on_conflict_do_nothing(index_elements=list(self.KEY_COLUMNS))
            )

        # DialectName.from_sqlalchemy already rejects anything else
        msg = f"Unsupported dialect: {dialect_name}"  # pragma: no cover
        raise UnsupportedDialect(msg)  # pragma: no cover
