class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriodError(ValidationError):
    """Raised when a cutoff period ends before it starts."""
