class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidWindowError(ValidationError):
    """Raised when a report window is missing, malformed or inverted."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ReportsDisabledError(AuthorizationError):
    """Raised when the tenant has reports switched off."""
