"""Application error taxonomy. Each error carries the HTTP status it surfaces as."""


class AppError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RequestValidationFailed(AppError):
    """Missing or malformed request fields."""

    status_code = 400


class AuthError(AppError):
    """Missing, invalid or expired bearer token; invalid credentials."""

    status_code = 401


class MissingTokenError(AuthError):
    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class InvalidTokenError(AuthError):
    def __init__(self, message: str = "Invalid or malformed token") -> None:
        super().__init__(message)


class ExpiredTokenError(AuthError):
    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class ForbiddenError(AppError):
    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    status_code = 409


class StoreError(AppError):
    """Persistence failure. The message is safe to show; the cause is only logged."""

    status_code = 500
