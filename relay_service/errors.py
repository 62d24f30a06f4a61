class RelayError(Exception):
    """Base class for per-request failures.

    The message is sent back to the caller as-is, so it must not contain
    anything the client should not see.
    """

    status_code = 400


class BadRequestError(RelayError):
    """Raised when a request is missing fields or carries malformed values."""

    def __init__(self, message: str = "Bad request") -> None:
        super().__init__(message)


class UnauthorizedError(RelayError):
    """Raised when the bearer token is missing, unknown or expired."""

    status_code = 401

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)
