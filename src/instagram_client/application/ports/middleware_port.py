from __future__ import annotations

from typing import Protocol

from instagram_client.domain.http import Request, Response


class MiddlewarePort(Protocol):
    """A pipeline stage. Request hooks run outermost first, response hooks innermost first."""

    def process_request(self, request: Request) -> Request: ...
    def process_response(self, response: Response) -> Response: ...
