from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from instagram_client.application.middleware.base import Middleware
from instagram_client.domain.http import Response
from instagram_client.domain.mash import Mash


class Mashify(Middleware):
    """Converts parsed mapping/list bodies into Mash objects."""

    def __init__(self, *, mash_class: type[Mash] = Mash) -> None:
        self.mash_class = mash_class

    def parse(self, body: Any) -> Any:
        if isinstance(body, Mapping):
            return self.mash_class(body)
        if isinstance(body, list):
            return [self.parse(item) for item in body]
        return body

    def process_response(self, response: Response) -> Response:
        response.body = self.parse(response.body)
        return response
