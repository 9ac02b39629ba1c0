"""Expandable reference fields.

The API returns related resources either collapsed to their ID or, when
the request asked for ``expand[]``, as the full nested object::

    "charge": "ch_1"
    "charge": {"id": "ch_1", "object": "charge", "amount": 100, ...}

``ExpandableRef[T]`` models both shapes. It is a normal pydantic field
type, so resource models simply annotate ``charge: ExpandableRef[Charge]``.
On the way out a reference always collapses back to its ID.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler, ValidationError
from pydantic_core import core_schema

from .codec import adapter_for
from .exceptions import MalformedPayloadError, MalformedReferenceError

T = TypeVar("T")


class ExpandableRef(Generic[T]):
    """Reference to a related resource, collapsed or expanded."""

    __slots__ = ("id", "expanded")

    id: str
    expanded: T | None

    def __init__(self, id: str, expanded: T | None = None) -> None:
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "expanded", expanded)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpandableRef):
            return NotImplemented
        return self.id == other.id and self.expanded == other.expanded

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        if self.expanded is None:
            return f"ExpandableRef(id={self.id!r})"
        return f"ExpandableRef(id={self.id!r}, expanded={self.expanded!r})"

    @property
    def is_expanded(self) -> bool:
        """Return True when the server sent the full object."""
        return self.expanded is not None

    @classmethod
    def decode(cls, value: Any, target: Any) -> ExpandableRef[Any]:
        """Decode a parsed JSON value into a reference to ``target``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, Mapping) and target is not None:
            try:
                expanded = adapter_for(target).validate_python(value)
            except (ValidationError, MalformedPayloadError) as exc:
                raise MalformedReferenceError(target, value, exc) from exc
            return cls(expanded.id, expanded)
        raise MalformedReferenceError(target, value)

    @classmethod
    def from_json(cls, data: bytes | str, target: Any) -> ExpandableRef[Any]:
        """Decode raw JSON bytes into a reference to ``target``."""
        try:
            value = json.loads(data)
        except ValueError as exc:
            raise MalformedReferenceError(target, data, exc) from exc
        return cls.decode(value, target)

    def encode(self) -> str:
        """Return the wire form of the reference: the bare ID."""
        return self.id

    def to_json(self) -> bytes:
        """Return the JSON encoding of the bare ID."""
        return json.dumps(self.id).encode()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        target = args[0] if args else None

        def validate(value: Any) -> ExpandableRef[Any]:
            return cls.decode(value, target)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda ref: ref.id, when_used="always"
            ),
        )
