from __future__ import annotations

from typing import Protocol

from instagram_client.domain.http import Request, Response


class TransportPort(Protocol):
    """Minimal transport abstraction: sends one request, returns the raw response.

    Implementations must return the body untouched (text for textual payloads)
    and wrap library/network failures in TransportError.
    """

    def send(self, request: Request) -> Response: ...
    def close(self) -> None: ...
