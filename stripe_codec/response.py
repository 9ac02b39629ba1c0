"""Turn a raw HTTP response into a typed value or a typed error."""

from __future__ import annotations

from typing import Any

from .core.codec import decode
from .errors import parse_error


def decode_response(body: bytes | str, http_status: int, type_: Any) -> Any:
    """Decode a successful response body as ``type_``.

    Non-2xx responses raise the ``RemoteAPIError`` kind matching the body.
    """
    if not 200 <= http_status < 300:
        raise parse_error(body, http_status)
    return decode(body, type_)
