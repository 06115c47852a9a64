"""Wire handlers, the unit of work and the message bus together."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from procplan import config
from procplan.adapters.db.engine import make_engine
from procplan.adapters.unit_of_work import SqlAlchemyUnitOfWork
from procplan.service_layer.handlers import COMMAND_HANDLERS
from procplan.service_layer.messagebus import Handler, MessageBus

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from procplan.interfaces.unit_of_work import AbstractUnitOfWork
    from procplan.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """Objects an entrypoint needs after bootstrapping."""

    message_bus: MessageBus
    engine: Engine

    def close(self) -> None:
        """Release the pooled database connections."""
        self.engine.dispose()


def build_write_uow(url: str) -> SqlAlchemyUnitOfWork:
    """SQLAlchemy unit of work on a fresh engine for ``url``."""
    return SqlAlchemyUnitOfWork(make_engine(url))


def inject_dependencies(handler: Handler, dependencies: Mapping[str, object]) -> Handler:
    """Pre-bind the dependencies that ``handler`` names as parameters.

    Dependencies the handler does not ask for are skipped. The result is
    called with the command and, optionally, a ``cancellation`` keyword.
    """
    wanted = inspect.signature(handler).parameters
    return partial(
        handler, **{name: dep for name, dep in dependencies.items() if name in wanted}
    )


def build_message_bus(
    uow: AbstractUnitOfWork, command_handlers: Mapping[type[Command], Handler]
) -> MessageBus:
    """Message bus whose handlers receive ``uow``."""
    dependencies = {"uow": uow}
    return MessageBus(
        uow,
        command_handlers={
            command_type: inject_dependencies(handler, dependencies)
            for command_type, handler in command_handlers.items()
        },
    )


def bootstrap(db_url: str | None = None) -> AppContainer:
    """Build the application against ``db_url``, or ``PROCPLAN_DB_URL`` if omitted.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and the variable is unset.
    """
    uow = build_write_uow(db_url if db_url is not None else config.get_db_url())
    return AppContainer(
        message_bus=build_message_bus(uow, COMMAND_HANDLERS), engine=uow.engine
    )
