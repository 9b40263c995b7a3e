from __future__ import annotations

import json
from typing import Any, Union

# Raw bytes/text straight off the wire, or an already-decoded object.
RequestBody = Union[str, bytes, dict, None]


def parse_json_body(body: RequestBody) -> dict[str, Any]:
    """
    Resolve a request body into a JSON object.

    Text is decoded with json.loads (malformed JSON raises). Anything that does
    not decode to an object becomes {} so the field validation reports it.
    """
    if body is None:
        return {}
    if isinstance(body, dict):
        return body
    if not body.strip():
        return {}

    payload = json.loads(body)
    if not isinstance(payload, dict):
        return {}
    return payload
