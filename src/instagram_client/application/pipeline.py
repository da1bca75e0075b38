"""
Request pipeline.

Stages are listed outermost first. A request travels down the list, is handed
to the transport, and the response travels back up: the last stage sees the
response first and the first stage sees it last. Any stage may abort the
exchange by raising.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from instagram_client.application.ports.middleware_port import MiddlewarePort
from instagram_client.application.ports.transport_port import TransportPort
from instagram_client.domain.http import Request, Response

logger = logging.getLogger(__name__)


class Pipeline:
    def __init__(self, stages: Sequence[MiddlewarePort], transport: TransportPort) -> None:
        self.stages = list(stages)
        self.transport = transport

    def run(self, request: Request) -> Response:
        for stage in self.stages:
            request = stage.process_request(request)
        logger.debug("Sending %s %s", request.method, request.url)
        response = self.transport.send(request)
        if response.request is None:
            response.request = request
        for stage in reversed(self.stages):
            response = stage.process_response(response)
        return response

    def __repr__(self) -> str:
        names = " -> ".join(type(s).__name__ for s in self.stages)
        return f"Pipeline({names} -> {type(self.transport).__name__})"
