from __future__ import annotations

from instagram_client.application.middleware.base import Middleware
from instagram_client.domain.http import Response

JSON_MEDIA_TYPE = "application/json"


class FixContentType(Middleware):
    """Relabel JSON-looking bodies as application/json.

    Some endpoints answer with text/plain or text/javascript; the JSON parser
    only looks at the declared media type, so this stage must sit inside it.
    """

    def looks_like_json(self, body: object) -> bool:
        if not isinstance(body, str):
            return False
        stripped = body.lstrip()
        return stripped[:1] in ("{", "[")

    def process_response(self, response: Response) -> Response:
        if not self.looks_like_json(response.body):
            return response
        current = response.content_type or ""
        _, sep, params = current.partition(";")
        new_type = f"{JSON_MEDIA_TYPE};{params}" if sep and params.strip() else JSON_MEDIA_TYPE
        if new_type != current:
            self._log(f"content type {current!r} -> {new_type!r}")
            response.content_type = new_type
        return response
