"""Custom exception hierarchy."""

from __future__ import annotations

from http import HTTPStatus


class ClearlyDefinedError(Exception):
    """Base exception for all library errors."""

    pass


class HttpError(ClearlyDefinedError):
    """The request could not be built or sent.

    Raised for transport-level failures (connection errors, timeouts) and for
    request construction failures. The underlying error is chained as
    ``__cause__``.
    """

    pass


class HttpStatusError(ClearlyDefinedError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or _status_text(status_code))
        self.status_code = status_code


class ApiError(HttpStatusError):
    """Structured error reported by the service in a non-success body.

    Reserved: the service has not been observed to return structured errors,
    so nothing raises this today.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str | None = None,
    ) -> None:
        super().__init__(status_code, message)
        self.code = code


class DeserializationError(ClearlyDefinedError):
    """Response payload could not be decoded into definitions."""

    pass


def _status_text(status_code: int) -> str:
    try:
        return f"{status_code} {HTTPStatus(status_code).phrase}"
    except ValueError:
        return str(status_code)
