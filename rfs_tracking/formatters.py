"""Wire formatting for tracking responses.

Payloads are serialized compactly. When the client passes a ``callback``
the JSON is wrapped as a script call so it can be loaded with a <script>
tag from another origin.
"""

import json
from typing import Optional

from fastapi import Response

JSON_MEDIA_TYPE = "application/json"
SCRIPT_MEDIA_TYPE = "application/javascript"


def dump_payload(payload: dict) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def format_body(payload: dict, callback: Optional[str] = None) -> tuple[str, str]:
    """Return (body, media type) for a payload, JSONP-wrapped if ``callback`` is set."""
    body = dump_payload(payload)
    if callback:
        return f"{callback}({body})", SCRIPT_MEDIA_TYPE
    return body, JSON_MEDIA_TYPE


def render(payload: dict, callback: Optional[str] = None) -> Response:
    body, media_type = format_body(payload, callback)
    return Response(content=body, media_type=media_type)
