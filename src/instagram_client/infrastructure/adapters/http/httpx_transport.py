from __future__ import annotations

import logging

import httpx

from instagram_client.application.ports.transport_port import TransportPort
from instagram_client.domain.errors import TransportError
from instagram_client.domain.http import Request, Response, get_header, is_textual_media_type, wire_body

logger = logging.getLogger(__name__)


class HttpxTransport(TransportPort):
    def __init__(
        self,
        timeout: float = 45.0,
        proxy: str | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        """Transport adapter backed by a persistent httpx.Client.

        - Redirects are not followed; 301/302/304 reach the pipeline as-is
        - Timeout and proxy are enforced by httpx

        Args:
            timeout (float, optional): Timeout for requests. Defaults to 45.0.
            proxy (str | None, optional): Proxy URL for all requests. Defaults to None.
            client (httpx.Client | None, optional): Pre-built client, mainly for tests.
        """
        self._client = client or httpx.Client(timeout=timeout, proxy=proxy or None, follow_redirects=False)

    def _log(self, msg: str) -> None:
        logger.debug("[HttpxTransport] %s", msg)

    def send(self, request: Request) -> Response:
        """Sends the request.

        Args:
            request (Request): Request produced by the pipeline.

        Returns:
            Response: Status, headers and body (text for textual media types, bytes otherwise).
        """
        content, json_body = wire_body(request)
        try:
            resp = self._client.request(
                request.method.upper(),
                request.url,
                params=dict(request.params) or None,
                headers=dict(request.headers),
                content=content,
                json=json_body,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method.upper()} {request.url} failed: {e}", url=request.url) from e
        self._log(f"{request.method.upper()} {resp.url} -> {resp.status_code}")
        headers = dict(resp.headers)
        body = resp.text if is_textual_media_type(get_header(headers, "Content-Type")) else resp.content
        return Response(resp.status_code, headers, body, request=request)

    def close(self) -> None:
        self._client.close()
