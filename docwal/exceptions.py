"""Public exceptions for the DocWal SDK."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classification carried by every API error."""

    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    GENERIC = "generic"


class DocWalError(Exception):
    """Base exception for all DocWal SDK errors."""


class ConfigError(DocWalError):
    """Configuration error (missing API key, invalid env vars)."""


class ParameterError(DocWalError):
    """Request parameters failed local validation; nothing was sent."""


class APIError(DocWalError):
    """Error from the DocWal API or the transport underneath it.

    ``status_code`` is 0 when no response was received.
    """

    kind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code})"


class AuthenticationError(APIError):
    """Invalid, missing or revoked API key (HTTP 401)."""

    kind = ErrorKind.AUTHENTICATION


class ValidationError(APIError):
    """Request rejected by the server as invalid (HTTP 400)."""

    kind = ErrorKind.VALIDATION


class NotFoundError(APIError):
    """Requested resource does not exist (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND


class RateLimitError(APIError):
    """Too many requests (HTTP 429)."""

    kind = ErrorKind.RATE_LIMIT


STATUS_ERRORS: dict[int, type[APIError]] = {
    400: ValidationError,
    401: AuthenticationError,
    404: NotFoundError,
    429: RateLimitError,
}


def error_for_status(
    status_code: int,
    message: str,
    response_body: Any = None,
) -> APIError:
    """Build the error matching an HTTP status code.

    Unmapped status codes produce a plain APIError.
    """
    error_cls = STATUS_ERRORS.get(status_code, APIError)
    return error_cls(message, status_code=status_code, response_body=response_body)
