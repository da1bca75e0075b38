from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

from instagram_client.application.middleware.base import Middleware
from instagram_client.domain.errors import ConfigurationError
from instagram_client.domain.http import Request, get_header

PLACEMENTS = ("query", "header", "both")
CLIENT_ID_HEADER = "X-Client-Id"
QUERY_METHODS = ("GET", "DELETE")


def generate_sig(endpoint: str, params: Mapping[str, Any], secret: str) -> str:
    """HMAC-SHA256 signature of ``endpoint|k=v|...`` over the sorted parameters."""
    parts = [endpoint] + [f"{key}={params[key]}" for key in sorted(params)]
    return hmac.new(secret.encode("utf-8"), "|".join(parts).encode("utf-8"), hashlib.sha256).hexdigest()


class OAuth2(Middleware):
    """Attaches the access token, or the client id when there is no token.

    ``placement`` selects where credentials go: ``"query"`` (query string for
    GET/DELETE, form body otherwise), ``"header"`` (Authorization / X-Client-Id)
    or ``"both"``. Values already present on the request are left alone.
    """

    def __init__(
        self,
        client_id: str | None,
        access_token: str | None = None,
        *,
        client_secret: str | None = None,
        placement: str = "query",
        sign_requests: bool = False,
        base_path: str = "",
    ) -> None:
        if placement not in PLACEMENTS:
            raise ConfigurationError(f"Unsupported auth placement {placement!r}, expected one of {PLACEMENTS}")
        if sign_requests and not client_secret:
            raise ConfigurationError("sign_requests requires a client secret")
        if sign_requests and placement == "header":
            raise ConfigurationError("sign_requests needs the access token in the signed parameters; use placement \"query\" or \"both\"")
        self.client_id = client_id
        self.access_token = access_token
        self.client_secret = client_secret
        self.placement = placement
        self.sign_requests = sign_requests
        self.base_path = base_path.rstrip("/")

    def _credentials(self) -> dict[str, str]:
        if self.access_token:
            return {"access_token": self.access_token}
        if self.client_id:
            return {"client_id": self.client_id}
        return {}

    def _with_headers(self, request: Request) -> Request:
        headers = dict(request.headers)
        if self.access_token:
            if get_header(headers, "Authorization") is None:
                headers["Authorization"] = f"Bearer {self.access_token}"
        elif self.client_id and get_header(headers, CLIENT_ID_HEADER) is None:
            headers[CLIENT_ID_HEADER] = self.client_id
        return request.with_changes(headers=headers)

    def _with_params(self, request: Request) -> Request:
        credentials = self._credentials()
        if request.method.upper() not in QUERY_METHODS and (request.body is None or isinstance(request.body, Mapping)):
            body = dict(request.body or {})
            for key, value in credentials.items():
                body.setdefault(key, value)
            return request.with_changes(body=body)
        params = dict(request.params)
        for key, value in credentials.items():
            params.setdefault(key, value)
        return request.with_changes(params=params)

    def _endpoint_path(self, url: str) -> str:
        path = urlparse(url).path
        if self.base_path and (path == self.base_path or path.startswith(self.base_path + "/")):
            path = path[len(self.base_path):]
        return "/" + path.lstrip("/")

    def _signed(self, request: Request) -> Request:
        if "sig" in request.params:
            return request
        signed_params: dict[str, Any] = dict(request.params)
        if isinstance(request.body, Mapping):
            signed_params.update(request.body)
        sig = generate_sig(self._endpoint_path(request.url), signed_params, self.client_secret or "")
        return request.with_changes(params={**request.params, "sig": sig})

    def process_request(self, request: Request) -> Request:
        if self.placement in ("query", "both"):
            request = self._with_params(request)
        if self.placement in ("header", "both"):
            request = self._with_headers(request)
        if self.sign_requests and self.access_token:
            request = self._signed(request)
        self._log(f"{request.method} {request.url} authenticated via {self.placement}")
        return request
