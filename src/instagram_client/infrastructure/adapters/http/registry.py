from __future__ import annotations

from collections.abc import Callable

from instagram_client.application.ports.transport_port import TransportPort
from instagram_client.domain.errors import ConfigurationError
from instagram_client.infrastructure.adapters.http.httpx_transport import HttpxTransport
from instagram_client.infrastructure.adapters.http.requests_transport import RequestsTransport

TRANSPORTS: dict[str, Callable[..., TransportPort]] = {
    "httpx": HttpxTransport,
    "requests": RequestsTransport,
}


def create_transport(name: str, *, timeout: float, proxy: str | None = None) -> TransportPort:
    try:
        factory = TRANSPORTS[name.lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown adapter {name!r}, expected one of {sorted(TRANSPORTS)}") from None
    return factory(timeout=timeout, proxy=proxy)
