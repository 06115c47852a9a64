"""PROCPLAN plan CLI: plan membership operations.

Exit codes for ``procplan plan add-user``:
    0  the user takes part in the procedure (newly added or already present)
    1  the plan procedure or the user does not exist
    2  an identifier is invalid (usage error)
"""

from __future__ import annotations

import logging

import click
import click_extra as clickx

from procplan.bootstrap import bootstrap
from procplan.domain.errors import InvalidArgumentError
from procplan.service_layer.commands import AddUserToProcedure

from .db import get_checked_db_url
from .helpers import error, success

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def plan() -> None:
    """Plan membership commands."""


@plan.command("add-user")
@click.argument("plan_id", type=int)
@click.argument("procedure_id", type=int)
@click.argument("user_id", type=int)
@click.pass_context
def add_user(ctx: click.Context, plan_id: int, procedure_id: int, user_id: int) -> None:
    """Add USER_ID to PROCEDURE_ID of PLAN_ID.

    Succeeds without changes if the user is already assigned. Use ``--`` before
    the arguments to pass negative numbers.
    """
    container = bootstrap(get_checked_db_url())
    ctx.call_on_close(container.close)
    cmd = AddUserToProcedure(
        plan_id=plan_id, procedure_id=procedure_id, user_id=user_id
    )

    result = container.message_bus.handle(cmd)
    if result.failed:
        error(str(result.error))
        ctx.exit(2 if isinstance(result.error, InvalidArgumentError) else 1)

    success(f"User {user_id} takes part in procedure {procedure_id} of plan {plan_id}.")
