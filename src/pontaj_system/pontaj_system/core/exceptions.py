class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateFormat(ValidationError):
    """Raised when a date string is not a valid YYYY-MM-DD calendar date."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a resource does not exist or is not owned by the caller."""


class ConflictError(DomainError):
    """Raised when a concurrent update could not be applied."""
