class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class ConflictError(DomainError):
    """Raised when a unique value (email, regno) is already taken."""


class NotFoundError(DomainError):
    """Raised when a referenced student or account does not exist."""

    status_code = 404


class AuthenticationError(DomainError):
    """Raised when credentials or a token are invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when the caller may not act as the requested account."""

    status_code = 403
