"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A referenced production order does not exist."""


class InvalidStateError(DomainException):
    """A lifecycle transition was requested from the wrong status.

    The order is left untouched; retrying the same call will fail the
    same way until the order reaches the required status.
    """

    def __init__(self, message: str, expected: int | None, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class StoreError(DomainException):
    """The underlying persistence layer failed."""


class ConcurrentModificationError(StoreError):
    """A conditional write lost against a concurrent change of the same order."""
