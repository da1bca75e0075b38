from __future__ import annotations

import logging

import requests

from instagram_client.application.ports.transport_port import TransportPort
from instagram_client.domain.errors import TransportError
from instagram_client.domain.http import Request, Response, get_header, is_textual_media_type, wire_body

logger = logging.getLogger(__name__)


class RequestsTransport(TransportPort):
    """Transport adapter backed by a persistent requests.Session.

    - Redirects are not followed, matching HttpxTransport
    - ``proxy`` applies to both http and https
    """

    def __init__(
        self,
        timeout: float = 45.0,
        proxy: str | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        if proxy:
            self.session.proxies.update({"http": proxy, "https": proxy})

    def _log(self, msg: str) -> None:
        logger.debug("[RequestsTransport] %s", msg)

    def send(self, request: Request) -> Response:
        data, json_body = wire_body(request)
        try:
            resp = self.session.request(
                request.method.upper(),
                request.url,
                params=dict(request.params) or None,
                headers=dict(request.headers),
                data=data,
                json=json_body,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            raise TransportError(f"{request.method.upper()} {request.url} failed: {e}", url=request.url) from e
        self._log(f"{request.method.upper()} {resp.url} -> {resp.status_code}")
        headers = dict(resp.headers)
        body = resp.text if is_textual_media_type(get_header(headers, "Content-Type")) else resp.content
        return Response(resp.status_code, headers, body, request=request)

    def close(self) -> None:
        self.session.close()
