from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from instagram_client.domain.errors import ConfigurationError


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup."""
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Replace a header in place, keeping a single entry regardless of case."""
    for key in [k for k in headers if k.lower() == name.lower()]:
        del headers[key]
    headers[name] = value


def media_type(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def is_json_media_type(content_type: str | None) -> bool:
    mt = media_type(content_type)
    return mt in ("application/json", "text/javascript") or mt.endswith("+json")


def is_textual_media_type(content_type: str | None) -> bool:
    """Bodies without a declared type are treated as text."""
    mt = media_type(content_type)
    if not mt or mt.startswith("text/") or is_json_media_type(mt):
        return True
    return mt in ("application/javascript", "application/xml", "application/x-www-form-urlencoded") or mt.endswith("+xml")


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)
    body: Any | None = None

    def with_changes(self, **changes: Any) -> "Request":
        return replace(self, **changes)

    @property
    def content_type(self) -> str | None:
        return get_header(self.headers, "Content-Type")


@dataclass
class Response:
    status: int
    headers: dict[str, str]
    body: Any | None
    request: Request | None = None
    raw_body: str | bytes | None = None

    @property
    def content_type(self) -> str | None:
        return get_header(self.headers, "Content-Type")

    @content_type.setter
    def content_type(self, value: str) -> None:
        set_header(self.headers, "Content-Type", value)


def wire_body(request: Request) -> tuple[str | bytes | None, Any | None]:
    """Split a request body into (content, json) for a transport.

    Text and bytes go out as-is; mappings and lists go out as JSON when the
    request declares a JSON content type. Anything else cannot be serialized.
    """
    body = request.body
    if body is None or isinstance(body, (str, bytes)):
        return body, None
    if isinstance(body, (Mapping, list)) and is_json_media_type(request.content_type):
        return None, body
    raise ConfigurationError(
        f"Cannot send {type(body).__name__} body with Content-Type {request.content_type!r}"
    )
