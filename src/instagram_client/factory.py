from __future__ import annotations

from instagram_client.application.connection import Connection, create_connection
from instagram_client.application.ports.transport_port import TransportPort
from instagram_client.config import Settings, settings as default_settings
from instagram_client.infrastructure.adapters.http.registry import create_transport


def build_connection(
    settings: Settings | None = None,
    *,
    raw: bool = False,
    transport: TransportPort | None = None,
) -> Connection:
    """Wire a Connection with the transport named in settings.adapter.

    Pass ``transport`` to bypass the registry (tests, custom adapters).
    """
    settings = settings or default_settings
    if transport is None:
        transport = create_transport(settings.adapter, timeout=settings.http_timeout, proxy=settings.proxy or None)
    return create_connection(settings, transport, raw=raw)
