"""Per-type extension data nested under the discriminator's value.

A source of ``"type": "card"`` carries its card-specific fields in a
sibling object named ``card``; a ``"type": "sofort"`` source carries them
under ``sofort``, and so on. The shape of that object is open-ended, so it
is kept as an opaque JSON bag rather than a typed model.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..utils.form import FormValues, format_key
from .exceptions import PreconditionViolation


class ExtensionBag(Mapping[str, Any]):
    """Immutable mapping of free-form JSON values."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data = copy.deepcopy(dict(data)) if data else {}

    def __getitem__(self, key: str) -> Any:
        return copy.deepcopy(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ExtensionBag({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExtensionBag):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable deep copy of the bag."""
        return copy.deepcopy(self._data)

    def to_json(self) -> bytes:
        return json.dumps(self._data).encode()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate(value: Any) -> ExtensionBag:
            if isinstance(value, cls):
                return value
            if isinstance(value, Mapping):
                return cls(value)
            return cls()

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda bag: bag.to_dict(), when_used="always"
            ),
        )


def extract_extension(data: bytes | str | Mapping[str, Any], discriminator: str | None) -> ExtensionBag:
    """Return the object stored under the key ``discriminator``.

    Absence of the key, a non-object value, or an unset discriminator all
    yield an empty bag.
    """
    if not discriminator:
        return ExtensionBag()
    if not isinstance(data, Mapping):
        try:
            data = json.loads(data)
        except ValueError:
            return ExtensionBag()
        if not isinstance(data, Mapping):
            return ExtensionBag()
    value = data.get(discriminator)
    if isinstance(value, Mapping):
        return ExtensionBag(value)
    return ExtensionBag()


def append_extension(
    values: FormValues,
    key_parts: Sequence[str],
    discriminator: str | None,
    bag: Mapping[str, Any] | None,
) -> None:
    """Flatten ``bag`` into ``values`` under ``<parent>[<discriminator>][<key>]``."""
    if not bag:
        return
    if not discriminator:
        raise PreconditionViolation(
            "extension data cannot be encoded without its discriminator (type) set"
        )
    for key, value in bag.items():
        _append_nested(values, [*key_parts, discriminator, str(key)], value)


def _append_nested(values: FormValues, key_parts: list[str], value: Any) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _append_nested(values, [*key_parts, str(key)], item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _append_nested(values, [*key_parts, str(index)], item)
    else:
        values.add(format_key(key_parts), value)
