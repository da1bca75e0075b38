from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urljoin, urlparse

from instagram_client.application.middleware.base import Middleware
from instagram_client.application.middleware.content_type import FixContentType
from instagram_client.application.middleware.mashify import Mashify
from instagram_client.application.middleware.oauth2 import OAuth2
from instagram_client.application.middleware.parse_json import ParseJson
from instagram_client.application.middleware.raise_http_error import RaiseHttpError
from instagram_client.application.middleware.url_encoded import UrlEncoded
from instagram_client.application.pipeline import Pipeline
from instagram_client.application.ports.transport_port import TransportPort
from instagram_client.config import Settings
from instagram_client.domain.http import Request, get_header

logger = logging.getLogger(__name__)


def build_stages(settings: Settings, *, raw: bool = False) -> list[Middleware]:
    """Stages in wrapping order, outermost first.

    Requests pass auth injection then URL-encoding; responses come back through
    content-type fix-up, JSON parsing, Mashify and finally error raising, which
    is why RaiseHttpError sits first and the parse stages sit last.
    """
    stages: list[Middleware] = [
        RaiseHttpError(),
        OAuth2(
            settings.client_id or None,
            settings.access_token or None,
            client_secret=settings.client_secret or None,
            placement=settings.auth_placement,
            sign_requests=settings.sign_requests,
            base_path=urlparse(settings.endpoint).path,
        ),
        UrlEncoded(),
    ]
    if not raw:
        stages.append(Mashify())
        if settings.format.lower() == "json":
            stages.extend([ParseJson(), FixContentType()])
    return stages


class Connection:
    """Issues API calls through a pipeline and returns the processed body."""

    def __init__(self, settings: Settings, pipeline: Pipeline) -> None:
        self.settings = settings
        self.pipeline = pipeline
        self.endpoint = settings.endpoint if settings.endpoint.endswith("/") else settings.endpoint + "/"

    def default_headers(self) -> dict[str, str]:
        return {
            "Accept": f"application/{self.settings.format}; charset=utf-8",
            "User-Agent": self.settings.user_agent,
        }

    def _headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        merged = dict(headers or {})
        for name, value in self.default_headers().items():
            if get_header(merged, name) is None:
                merged[name] = value
        return merged

    def url_for(self, path: str) -> str:
        return urljoin(self.endpoint, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        request = Request(
            method=method.upper(),
            url=self.url_for(path),
            headers=self._headers(headers),
            params=dict(params or {}),
            body=body,
        )
        logger.debug("%s %s", request.method, request.url)
        return self.pipeline.run(request).body

    def get(self, path: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        return self.request("GET", path, params=params, **kwargs)

    def delete(self, path: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        return self.request("DELETE", path, params=params, **kwargs)

    def post(self, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        return self.request("POST", path, body=body, **kwargs)

    def put(self, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        return self.request("PUT", path, body=body, **kwargs)

    def close(self) -> None:
        self.pipeline.transport.close()

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def create_connection(settings: Settings, transport: TransportPort, *, raw: bool = False) -> Connection:
    return Connection(settings, Pipeline(build_stages(settings, raw=raw), transport))
