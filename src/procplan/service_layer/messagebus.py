"""Command dispatch for the service layer.

The bus is the only caller of handlers. It owns the translation between
exceptions raised by a handler and the :class:`Result` handed back to the
entry point::

    handler returns           -> Result.success()
    handler raises DomainError -> Result.failure(error)
    OperationCancelledError    -> re-raised
    anything else              -> logged with traceback, re-raised
"""

import logging
from collections.abc import Callable
from functools import partial

from procplan.domain.errors import DomainError
from procplan.interfaces.unit_of_work import AbstractUnitOfWork

from .cancellation import CancellationToken, OperationCancelledError
from .commands import Command
from .results import Result

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

Handler = Callable[..., None]


class NoHandlerForCommand(LookupError):
    """No handler is registered for the type of the dispatched command."""

    def __init__(self, cmd: Command) -> None:
        self.command_type = type(cmd)
        super().__init__(f"No handler found for command {self.command_type.__name__}")


def describe_handler(handler: Handler) -> str:
    """Name used for ``handler`` in log records."""
    target = handler.func if isinstance(handler, partial) else handler
    return getattr(target, "__name__", None) or repr(handler)


class MessageBus:
    """Route commands to their handlers and report the outcome as a Result.

    Args:
        uow: Unit of work the handlers were bound to. Kept so callers and
            tests can look at the store after a command ran.
        command_handlers: Handler per command type. A handler takes the
            command positionally and, when the caller supplied a token,
            ``cancellation=`` as a keyword; its other dependencies are
            already bound.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Handler],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(
        self, cmd: Command, cancellation: CancellationToken | None = None
    ) -> Result:
        """Run the handler registered for ``type(cmd)``.

        Raises:
            NoHandlerForCommand: Nothing is registered for the command type.
            OperationCancelledError: The handler saw a cancelled token.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        kwargs = {} if cancellation is None else {"cancellation": cancellation}
        name = describe_handler(handler)
        logger.debug("Handling command %s with handler %s", cmd, name)
        try:
            handler(cmd, **kwargs)
        except DomainError as e:
            logger.info("Command %s rejected: %s", type(cmd).__name__, e)
            return Result.failure(e)
        except OperationCancelledError:
            logger.info("Command %s cancelled", type(cmd).__name__)
            raise
        except Exception:
            logger.exception("Exception handling command %s with handler %s", cmd, name)
            raise
        return Result.success()
