"""Tests for command routing and outcome mapping in MessageBus."""

from dataclasses import dataclass
from functools import partial

import pytest

from procplan.adapters.in_memory_unit_of_work import InMemoryUnitOfWork
from procplan.domain.errors import NonPositiveIdError, UserNotFoundError
from procplan.service_layer.cancellation import (
    CancellationToken,
    OperationCancelledError,
)
from procplan.service_layer.commands import AddUserToProcedure, Command
from procplan.service_layer.messagebus import (
    MessageBus,
    NoHandlerForCommand,
    describe_handler,
)
from procplan.service_layer.results import UNIT

# pylint: disable=unused-argument, too-few-public-methods, redefined-outer-name


@dataclass(frozen=True)
class RenamePlan(Command):
    plan_id: int = 1
    name: str = "renamed"


ADD = AddUserToProcedure(plan_id=4, procedure_id=5, user_id=6)


def messages(caplog, level: str) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.levelname == level]


@pytest.fixture
def uow():
    return InMemoryUnitOfWork()


def make_bus(uow, handler, command_type=AddUserToProcedure):
    return MessageBus(uow, command_handlers={command_type: handler})


class TestRouting:
    @staticmethod
    def test_only_the_matching_handler_runs(uow, caplog):
        seen = {"add": [], "rename": []}

        def add_user(cmd):
            seen["add"].append(cmd)

        bus = MessageBus(
            uow,
            command_handlers={
                AddUserToProcedure: add_user,
                RenamePlan: seen["rename"].append,
            },
        )
        with caplog.at_level("DEBUG"):
            result = bus.handle(ADD)

        assert seen == {"add": [ADD], "rename": []}
        assert result.succeeded and result.value is UNIT
        assert f"Handling command {ADD} with handler add_user" in messages(
            caplog, "DEBUG"
        )

    @staticmethod
    def test_unregistered_command_type(uow, caplog):
        bus = make_bus(uow, lambda cmd: None)

        with pytest.raises(NoHandlerForCommand, match="RenamePlan") as info:
            bus.handle(RenamePlan())

        assert info.value.command_type is RenamePlan
        assert isinstance(info.value, LookupError)
        assert "No handler found for command RenamePlan" in messages(caplog, "ERROR")

    @staticmethod
    def test_uow_is_exposed(uow):
        assert MessageBus(uow, command_handlers={}).uow is uow


class TestOutcomes:
    @staticmethod
    @pytest.mark.parametrize(
        "error",
        [NonPositiveIdError("plan_id", -3), UserNotFoundError(6)],
        ids=["invalid-argument", "not-found"],
    )
    def test_domain_error_is_returned_not_raised(uow, caplog, error):
        def reject(cmd):
            raise error

        with caplog.at_level("INFO"):
            result = make_bus(uow, reject).handle(ADD)

        assert result.failed and result.error is error
        assert f"Command AddUserToProcedure rejected: {error}" in messages(
            caplog, "INFO"
        )

    @staticmethod
    def test_unexpected_error_is_logged_and_raised(uow, caplog):
        def explode(cmd):
            raise KeyError("participants")

        with pytest.raises(KeyError, match="participants"):
            make_bus(uow, explode).handle(ADD)

        (record,) = [r for r in caplog.records if r.levelname == "ERROR"]
        assert record.getMessage().endswith("with handler explode")
        assert record.exc_info is not None

    @staticmethod
    def test_cancellation_propagates_quietly(uow, caplog):
        token = CancellationToken()
        token.cancel()

        def cooperative(cmd, cancellation):
            cancellation.raise_if_cancelled()

        with caplog.at_level("DEBUG"):
            with pytest.raises(OperationCancelledError):
                make_bus(uow, cooperative).handle(ADD, cancellation=token)

        assert messages(caplog, "ERROR") == []
        assert messages(caplog, "INFO") == ["Command AddUserToProcedure cancelled"]


class TestCancellationForwarding:
    @staticmethod
    def test_token_reaches_handler_as_keyword(uow):
        received = []
        token = CancellationToken()

        make_bus(uow, lambda cmd, *, cancellation: received.append(cancellation)).handle(
            ADD, cancellation=token
        )

        assert received == [token]

    @staticmethod
    def test_handler_without_token_parameter(uow):
        received = []

        make_bus(uow, received.append).handle(ADD)

        assert received == [ADD]


class TestDescribeHandler:
    @staticmethod
    def test_plain_function():
        def add_user_to_procedure(cmd):
            pass

        assert describe_handler(add_user_to_procedure) == "add_user_to_procedure"

    @staticmethod
    def test_partial_uses_wrapped_function():
        def add_user_to_procedure(cmd, uow):
            pass

        bound = partial(add_user_to_procedure, uow=object())
        assert describe_handler(bound) == "add_user_to_procedure"

    @staticmethod
    def test_callable_object_falls_back_to_repr():
        class Handler:
            def __call__(self, cmd):
                pass

            def __repr__(self):
                return "<Handler for plans>"

        assert describe_handler(Handler()) == "<Handler for plans>"
