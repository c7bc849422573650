class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateEmailError(ValidationError):
    """Raised when registering an email that already belongs to a user."""


class NotFoundError(DomainError):
    """Raised when a requested user or record does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class UserNotFoundError(NotFoundError, AuthenticationError):
    """Raised when logging in with an unknown email."""


class InvalidPasswordError(AuthenticationError):
    """Raised when the password does not match the stored secret."""


class StorageError(DomainError):
    """Raised when a stored value cannot be decoded."""
