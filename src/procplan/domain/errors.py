"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a request argument fails validation."""

    def __init__(self, argument: str, value: object, reason: str) -> None:
        super().__init__(reason)
        self.argument = argument
        self.value = value


class NonPositiveIdError(InvalidArgumentError):
    """Raised when an identifier that must be positive is zero or negative."""

    def __init__(self, argument: str, value: int) -> None:
        label = argument.removesuffix("_id").replace("_", " ")
        super().__init__(argument, value, f"{label} id must be positive")


class IdOutOfRangeError(InvalidArgumentError):
    """Raised when an identifier does not fit the 32-bit id columns."""

    def __init__(self, argument: str, value: int) -> None:
        label = argument.removesuffix("_id").replace("_", " ")
        super().__init__(argument, value, f"{label} id is out of range")


# ============================================================================
#                       Missing record errors
# ============================================================================


class NotFoundError(DomainError, LookupError):
    """Base class for errors raised when a required record is absent."""


class PlanProcedureNotFoundError(NotFoundError):
    """Raised when a procedure is not part of the given plan."""

    def __init__(self, plan_id: int, procedure_id: int) -> None:
        super().__init__("plan/procedure combination not found")
        self.plan_id = plan_id
        self.procedure_id = procedure_id


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__("user not found")
        self.user_id = user_id
