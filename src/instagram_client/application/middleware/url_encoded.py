from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlencode

from instagram_client.application.middleware.base import Middleware
from instagram_client.domain.http import Request, get_header

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"


class UrlEncoded(Middleware):
    """Form-encodes mapping bodies and sets the Content-Type when missing."""

    def process_request(self, request: Request) -> Request:
        if not isinstance(request.body, Mapping):
            return request
        content_type = get_header(request.headers, "Content-Type")
        if content_type is not None and not content_type.lower().startswith(FORM_MEDIA_TYPE):
            return request
        headers = dict(request.headers)
        if content_type is None:
            headers["Content-Type"] = FORM_MEDIA_TYPE
        body = urlencode(request.body, doseq=True)
        return request.with_changes(headers=headers, body=body)
