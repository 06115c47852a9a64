"""Command handlers, collected into one registry for the bootstrap."""

from procplan.service_layer.commands import Command
from procplan.service_layer.messagebus import Handler

from .plan_handlers import COMMAND_HANDLERS as PLAN_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type[Command], Handler] = dict(PLAN_COMMAND_HANDLERS)
