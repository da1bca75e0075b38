from __future__ import annotations

import logging

from instagram_client.application.ports.middleware_port import MiddlewarePort
from instagram_client.domain.http import Request, Response


class Middleware(MiddlewarePort):
    """Pass-through stage; subclasses override the hook they need."""

    def process_request(self, request: Request) -> Request:
        return request

    def process_response(self, response: Response) -> Response:
        return response

    def _log(self, msg: str) -> None:
        logging.getLogger(type(self).__module__).debug("[%s] %s", type(self).__name__, msg)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
