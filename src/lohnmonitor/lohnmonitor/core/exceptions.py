class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ConfigurationError(DomainError):
    """Raised when a setting needed for a computation is missing or invalid.

    Money amounts are never computed against a guessed reference value.
    """


class DataError(DomainError):
    """Raised when a stored record cannot be decoded (e.g. allowance JSON)."""


class DispatchError(DomainError):
    """Raised when an e-mail could not be handed to the mail server."""


class ScanInProgressError(DomainError):
    """Raised when a promotion scan is triggered while another one is running."""
