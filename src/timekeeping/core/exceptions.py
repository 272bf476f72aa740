class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or violates domain rules."""


class StorageError(Exception):
    """Raised when the record store fails; carries the driver's message."""
