"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    ``field`` names the offending input (e.g. ``"address"`` or
    ``"items.0.quantity"``) when the violation can be pinned to one.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class SchemaError(DomainException):
    """A payload received from the backend did not have the expected shape."""


class StorageError(DomainException):
    """Local client state (the cart file) could not be written."""


class OrderSubmissionError(DomainException):
    """The order could not be placed (transport failure, 5xx, bad response)."""


class OrderRejectedError(OrderSubmissionError):
    """The backend refused the order with a 4xx and told us why."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class SubmissionInProgressError(DomainException):
    """A checkout is already in flight for this cart."""


class CatalogUnavailableError(DomainException):
    """The catalog could not be fetched from the backend."""


class AuthenticationError(DomainException):
    """Login failed, or an authenticated call was refused after refresh."""
