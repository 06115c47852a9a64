"""create plan, procedure, user and association tables

Revision ID: 3f2a9c61d0b4
Revises:
Create Date: 2026-10-19 09:12:41.508311

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f2a9c61d0b4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "plans",
        sa.Column("plan_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.CheckConstraint("plan_id > 0", name=op.f("ck_plans_positive_plan_id")),
        sa.PrimaryKeyConstraint("plan_id", name=op.f("pk_plans")),
        comment="Top-level grouping of procedures.",
    )
    op.create_table(
        "procedures",
        sa.Column("procedure_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.CheckConstraint(
            "procedure_id > 0", name=op.f("ck_procedures_positive_procedure_id")
        ),
        sa.PrimaryKeyConstraint("procedure_id", name=op.f("pk_procedures")),
        comment="Procedures that can be attached to plans.",
    )
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.CheckConstraint("user_id > 0", name=op.f("ck_users_positive_user_id")),
        sa.PrimaryKeyConstraint("user_id", name=op.f("pk_users")),
        comment="User accounts.",
    )
    op.create_table(
        "plan_procedures",
        sa.Column("plan_id", sa.Integer(), nullable=False),
        sa.Column("procedure_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["plan_id"],
            ["plans.plan_id"],
            name=op.f("fk_plan_procedures_plan_id_plans"),
        ),
        sa.ForeignKeyConstraint(
            ["procedure_id"],
            ["procedures.procedure_id"],
            name=op.f("fk_plan_procedures_procedure_id_procedures"),
        ),
        sa.PrimaryKeyConstraint(
            "plan_id", "procedure_id", name=op.f("pk_plan_procedures")
        ),
        comment="Procedures that belong to a plan.",
    )
    op.create_index(
        op.f("ix_plan_procedures_procedure_id"),
        "plan_procedures",
        ["procedure_id"],
        unique=False,
    )
    op.create_table(
        "plan_procedure_users",
        sa.Column("plan_id", sa.Integer(), nullable=False),
        sa.Column("procedure_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["plan_id", "procedure_id"],
            ["plan_procedures.plan_id", "plan_procedures.procedure_id"],
            name=op.f("fk_plan_procedure_users_plan_id_procedure_id_plan_procedures"),
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.user_id"],
            name=op.f("fk_plan_procedure_users_user_id_users"),
        ),
        sa.PrimaryKeyConstraint(
            "plan_id", "procedure_id", "user_id", name=op.f("pk_plan_procedure_users")
        ),
        comment="Users taking part in a plan's procedure. One row per triple.",
    )
    op.create_index(
        op.f("ix_plan_procedure_users_user_id"),
        "plan_procedure_users",
        ["user_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(
        op.f("ix_plan_procedure_users_user_id"), table_name="plan_procedure_users"
    )
    op.drop_table("plan_procedure_users")
    op.drop_index(op.f("ix_plan_procedures_procedure_id"), table_name="plan_procedures")
    op.drop_table("plan_procedures")
    op.drop_table("users")
    op.drop_table("procedures")
    op.drop_table("plans")
