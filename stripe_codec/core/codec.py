"""Decode/encode entry points for API response and request bodies."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter


@lru_cache(maxsize=None)
def adapter_for(type_: Any) -> TypeAdapter[Any]:
    """Return a shared ``TypeAdapter`` for ``type_``.

    Building a core schema is the expensive part of validation, so adapters
    are built once per type and reused across decodes.
    """
    return TypeAdapter(type_)


def decode(data: bytes | str, type_: Any) -> Any:
    """Decode a JSON response body into ``type_``."""
    return adapter_for(type_).validate_json(data)


def decode_value(value: Any, type_: Any) -> Any:
    """Decode an already-parsed JSON value into ``type_``."""
    return adapter_for(type_).validate_python(value)


def encode(value: Any, type_: Any | None = None) -> bytes:
    """Encode ``value`` to JSON bytes.

    Expandable references and polymorphic payloads collapse to their bare
    IDs, matching what the API accepts on write.
    """
    return adapter_for(type_ if type_ is not None else type(value)).dump_json(value)
