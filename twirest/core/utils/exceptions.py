from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from twirest.modules.responses.models.exception import ExceptionResponse
    from twirest.modules.responses.models.status import ResponseStatus


class AppError(Exception):
    """Base exception for library errors."""

    pass


class DecodeError(AppError):
    """Raised when a response body is not well-formed XML."""

    def __init__(
        self,
        message: str = "Malformed XML response body",
        body: bytes = b"",
        cause: Optional[Exception] = None,
    ):
        self.body = body[:200]
        self.cause = cause
        super().__init__(message)


class ResourceKindError(AppError, TypeError):
    """Raised when an envelope resource does not match its declared kind."""

    pass


class TwilioAPIError(AppError):
    """Raised by TwilioResponse.raise_for_status() on a failed request."""

    def __init__(
        self,
        status: "ResponseStatus",
        exception: Optional["ExceptionResponse"] = None,
    ):
        self.status = status
        self.exception = exception
        if exception is not None:
            message = exception.error()
        else:
            message = f"HTTP {status.http}"
        super().__init__(message)
