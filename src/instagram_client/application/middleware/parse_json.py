from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import Any

from instagram_client.application.middleware.base import Middleware
from instagram_client.domain.errors import ParsingError
from instagram_client.domain.http import Response, media_type

UNPARSABLE_STATUS_CODES = frozenset({204, 301, 302, 304})
DEFAULT_CONTENT_TYPES = ("application/json", "text/javascript")


class ParseJson(Middleware):
    """Replaces textual JSON response bodies with the decoded value.

    Args:
        parser: Callable turning text into a value. Defaults to ``json.loads``.
        content_types: Media types the stage applies to. An empty collection
            means every response is parsed.
        preserve_raw: Keep the original text on ``response.raw_body``.
    """

    def __init__(
        self,
        *,
        parser: Callable[[str], Any] = json.loads,
        content_types: Iterable[str] = DEFAULT_CONTENT_TYPES,
        preserve_raw: bool = False,
    ) -> None:
        self.parser = parser
        self.content_types = frozenset(ct.lower() for ct in content_types)
        self.preserve_raw = preserve_raw

    def parse(self, body: str) -> Any:
        if not body.strip():
            return None
        try:
            return self.parser(body)
        except ValueError as e:
            raise ParsingError(f"Invalid JSON body: {e}", body=body) from e

    def applies_to(self, response: Response) -> bool:
        if response.status in UNPARSABLE_STATUS_CODES:
            return False
        if not isinstance(response.body, str):
            return False
        if not self.content_types:
            return True
        return media_type(response.content_type) in self.content_types

    def process_response(self, response: Response) -> Response:
        if not self.applies_to(response):
            return response
        raw = response.body
        response.body = self.parse(raw)
        if self.preserve_raw:
            response.raw_body = raw
        return response
