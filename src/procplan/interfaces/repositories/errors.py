"""Exceptions for repository operations."""


class RepositoryError(Exception):
    """Base class for repository errors."""


class DuplicateRecordError(RepositoryError):
    """Conflict: a record with the same key already exists.

    Attributes:
        kind (str): The record kind (e.g. "plan_procedure").
        key (tuple[int, ...]): The conflicting primary key.
    """

    def __init__(self, kind: str, key: tuple[int, ...]):
        super().__init__(f"{kind} {key} already exists.")
        self.kind = kind
        self.key = key
