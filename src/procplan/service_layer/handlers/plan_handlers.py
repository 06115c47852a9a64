"""Handlers for plan membership commands."""

import logging

from procplan.domain.errors import (
    IdOutOfRangeError,
    InvalidArgumentError,
    NonPositiveIdError,
    PlanProcedureNotFoundError,
    UserNotFoundError,
)
from procplan.domain.model import MAX_ID, PlanProcedureUser
from procplan.interfaces.unit_of_work import AbstractUnitOfWork
from procplan.service_layer import commands
from procplan.service_layer.cancellation import NEVER_CANCELLED, CancellationToken
from procplan.service_layer.messagebus import Handler

logger = logging.getLogger(__name__)


def _require_valid_id(argument: str, value: object) -> None:
    # bool is an int subclass but never a valid identifier
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(
            argument, value, f"{argument.replace('_', ' ')} must be an integer"
        )
    if value <= 0:
        raise NonPositiveIdError(argument, value)
    if value > MAX_ID:
        raise IdOutOfRangeError(argument, value)


# ============================================================================
#                        Plan Procedure User Handlers
# ============================================================================


def add_user_to_procedure(
    cmd: commands.AddUserToProcedure,
    uow: AbstractUnitOfWork,
    cancellation: CancellationToken = NEVER_CANCELLED,
) -> None:
    """Record that a user takes part in a plan's procedure (idempotent).

    Raises:
        InvalidArgumentError: If any id is not an integer in 1..MAX_ID. Raised
            before the unit of work is entered.
        PlanProcedureNotFoundError: If the procedure is not part of the plan.
        UserNotFoundError: If the user does not exist.
        OperationCancelledError: If ``cancellation`` fires before commit.
    """

    _require_valid_id("plan_id", cmd.plan_id)
    _require_valid_id("procedure_id", cmd.procedure_id)
    _require_valid_id("user_id", cmd.user_id)

    triple = (cmd.plan_id, cmd.procedure_id, cmd.user_id)

    with uow:
        cancellation.raise_if_cancelled()
        if uow.plan_procedures.get(cmd.plan_id, cmd.procedure_id) is None:
            raise PlanProcedureNotFoundError(cmd.plan_id, cmd.procedure_id)

        cancellation.raise_if_cancelled()
        if uow.users.get(cmd.user_id) is None:
            raise UserNotFoundError(cmd.user_id)

        cancellation.raise_if_cancelled()
        if uow.plan_procedure_users.get(*triple) is not None:
            logger.debug("AddUserToProcedure %s/%s/%s: already assigned; noop", *triple)
            return

        inserted = uow.plan_procedure_users.add_if_absent(
            PlanProcedureUser(
                plan_id=cmd.plan_id,
                procedure_id=cmd.procedure_id,
                user_id=cmd.user_id,
            )
        )
        if not inserted:
            # lost a race with a concurrent writer of the same triple
            logger.debug(
                "AddUserToProcedure %s/%s/%s: inserted concurrently; noop", *triple
            )
            return

        cancellation.raise_if_cancelled()
        uow.commit()

    logger.info(
        "Added user %s to procedure %s of plan %s",
        cmd.user_id,
        cmd.procedure_id,
        cmd.plan_id,
    )


COMMAND_HANDLERS: dict[type[commands.Command], Handler] = {
    commands.AddUserToProcedure: add_user_to_procedure,
}
