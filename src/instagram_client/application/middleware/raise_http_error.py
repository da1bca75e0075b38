from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from instagram_client.application.middleware.base import Middleware
from instagram_client.domain.errors import HTTPError, error_class_for
from instagram_client.domain.http import Response


def error_details(body: Any) -> str:
    """Extract ``error_type: error_message`` from an API error payload."""
    if not isinstance(body, Mapping):
        return ""
    meta = body.get("meta")
    source = meta if isinstance(meta, Mapping) else body
    error_type = source.get("error_type")
    error_message = source.get("error_message")
    if error_type and error_message:
        return f": {error_type}: {error_message}"
    if error_message:
        return f": {error_message}"
    return ""


class RaiseHttpError(Middleware):
    """Turns failing status codes into typed exceptions.

    Must be the outermost stage so that it sees the body after parsing.

    Args:
        error_classes: Status -> exception class overrides, merged onto
            ``DEFAULT_ERROR_CLASSES``.
    """

    def __init__(self, *, error_classes: Mapping[int, type[HTTPError]] | None = None) -> None:
        self.error_classes = dict(error_classes or {})

    def message_for(self, response: Response) -> str:
        request = response.request
        prefix = f"{request.method.upper()} {request.url}: " if request else ""
        return f"{prefix}{response.status}{error_details(response.body)}"

    def process_response(self, response: Response) -> Response:
        if response.status < 400:
            return response
        error_cls = error_class_for(response.status, self.error_classes)
        message = self.message_for(response)
        self._log(f"{error_cls.__name__}: {message}")
        raise error_cls(
            message,
            status=response.status,
            body=response.body,
            method=response.request.method if response.request else None,
            url=response.request.url if response.request else None,
            headers=response.headers,
        )
