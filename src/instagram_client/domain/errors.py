"""
Exception hierarchy for the Instagram client.

Status-code errors are raised by the RaiseHttpError stage after the body has
been parsed, so ``error.body`` holds the structured payload whenever the API
returned JSON.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class InstagramError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(InstagramError):
    """Raised when settings are missing or inconsistent."""


class TransportError(InstagramError):
    """Raised when the transport adapter cannot complete the exchange."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url


class ParsingError(InstagramError):
    """Raised when a body that should be JSON cannot be decoded."""

    def __init__(self, message: str, *, body: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.body = body


class HTTPError(InstagramError):
    """Non-successful HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        body: Any | None = None,
        method: str | None = None,
        url: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body
        self.method = method
        self.url = url
        self.headers = dict(headers or {})


class ClientError(HTTPError):
    """4xx responses."""


class BadRequest(ClientError):
    pass


class Unauthorized(ClientError):
    pass


class Forbidden(ClientError):
    pass


class NotFound(ClientError):
    pass


class RateLimitExceeded(ClientError):
    """Raised on 429 Too Many Requests."""


class ServerError(HTTPError):
    """5xx responses."""


class InternalServerError(ServerError):
    pass


class BadGateway(ServerError):
    pass


class ServiceUnavailable(ServerError):
    pass


class GatewayTimeout(ServerError):
    pass


DEFAULT_ERROR_CLASSES: dict[int, type[HTTPError]] = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    429: RateLimitExceeded,
    500: InternalServerError,
    502: BadGateway,
    503: ServiceUnavailable,
    504: GatewayTimeout,
}


def error_class_for(
    status: int, overrides: Mapping[int, type[HTTPError]] | None = None
) -> type[HTTPError]:
    """Resolve the exception class for a failing status code."""
    table = {**DEFAULT_ERROR_CLASSES, **(overrides or {})}
    if status in table:
        return table[status]
    if 400 <= status < 500:
        return ClientError
    if 500 <= status < 600:
        return ServerError
    return HTTPError
