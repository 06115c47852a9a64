"""Relational schema for PROCPLAN records.

| Table                  | Primary key                         | Foreign keys                |
|------------------------|-------------------------------------|-----------------------------|
| plans                  | plan_id                             |                             |
| procedures             | procedure_id                        |                             |
| users                  | user_id                             |                             |
| plan_procedures        | (plan_id, procedure_id)             | plans, procedures           |
| plan_procedure_users   | (plan_id, procedure_id, user_id)    | plan_procedures, users      |

The composite primary key on ``plan_procedure_users`` is what keeps a user
from being recorded twice on the same plan procedure, including under
concurrent writers.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKeyConstraint,
    Index,
    Integer,
    PrimaryKeyConstraint,
    String,
    Table,
)

from .metadata import metadata

__all__ = [
    "plan_procedure_users",
    "plan_procedures",
    "plans",
    "procedures",
    "users",
]

plans = Table(
    "plans",
    metadata,
    Column("plan_id", Integer, nullable=False, autoincrement=False),
    Column("name", String(200), nullable=True),
    PrimaryKeyConstraint("plan_id"),
    CheckConstraint("plan_id > 0", name="positive_plan_id"),
    comment="Top-level grouping of procedures.",
)

procedures = Table(
    "procedures",
    metadata,
    Column("procedure_id", Integer, nullable=False, autoincrement=False),
    Column("description", String(500), nullable=True),
    PrimaryKeyConstraint("procedure_id"),
    CheckConstraint("procedure_id > 0", name="positive_procedure_id"),
    comment="Procedures that can be attached to plans.",
)

users = Table(
    "users",
    metadata,
    Column("user_id", Integer, nullable=False, autoincrement=False),
    Column("name", String(200), nullable=True),
    PrimaryKeyConstraint("user_id"),
    CheckConstraint("user_id > 0", name="positive_user_id"),
    comment="User accounts.",
)

plan_procedures = Table(
    "plan_procedures",
    metadata,
    Column("plan_id", Integer, nullable=False),
    Column("procedure_id", Integer, nullable=False),
    PrimaryKeyConstraint("plan_id", "procedure_id"),
    ForeignKeyConstraint(["plan_id"], ["plans.plan_id"]),
    ForeignKeyConstraint(["procedure_id"], ["procedures.procedure_id"]),
    Index(None, "procedure_id"),
    comment="Procedures that belong to a plan.",
)

plan_procedure_users = Table(
    "plan_procedure_users",
    metadata,
    Column("plan_id", Integer, nullable=False),
    Column("procedure_id", Integer, nullable=False),
    Column("user_id", Integer, nullable=False),
    PrimaryKeyConstraint("plan_id", "procedure_id", "user_id"),
    ForeignKeyConstraint(
        ["plan_id", "procedure_id"],
        ["plan_procedures.plan_id", "plan_procedures.procedure_id"],
    ),
    ForeignKeyConstraint(["user_id"], ["users.user_id"]),
    Index(None, "user_id"),
    comment="Users taking part in a plan's procedure. One row per triple.",
)
