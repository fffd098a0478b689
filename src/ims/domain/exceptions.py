"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ims.domain.validation import ValidationOutcome


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller-supplied data broke a business rule."""

    def __init__(self, outcome: ValidationOutcome, message: str | None = None) -> None:
        super().__init__(message or outcome.message)
        self.outcome = outcome


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(DomainException):
    """Removing stock would drive the quantity below zero."""

    def __init__(self, available: int, requested: int) -> None:
        super().__init__(
            f"Insufficient stock (available: {available}, requested: {requested})"
        )
        self.available = available
        self.requested = requested


class InvalidArgumentError(DomainException):
    """The call itself is malformed, e.g. an empty partial update."""


class PersistenceError(DomainException):
    """The storage layer failed. The underlying error is chained as __cause__."""


class ServiceError(DomainException):
    """Unexpected failure inside the service layer."""
