class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a required filter is missing."""


class DecodeError(DomainError):
    """Raised when a device identifier cannot be decoded into text."""


class NotFoundError(DomainError):
    """Raised when no active employee matches an identifier."""


class StorageError(DomainError):
    """Raised when the storage collaborator fails to read or write."""
