"""Discriminator-routed polymorphic payloads.

Some API objects change shape depending on a string field. A payout
destination, for example, is a bank account or a card depending on its
``object`` value. A payload class declares the shared fields as a
``common_model`` and the value -> variant mapping as a ``VariantRegistry``;
decoding reads the shared fields first, then offers the same raw input to
the variant model registered for the discriminator.

Unknown discriminator values are kept as raw bytes instead of failing so
that new variants added by the API do not break older clients.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from pydantic import BaseModel, GetCoreSchemaHandler, ValidationError
from pydantic_core import core_schema

from .exceptions import (
    MalformedPayloadError,
    MalformedReferenceError,
    PreconditionViolation,
    VariantDecodeError,
)

logger = logging.getLogger(__name__)


class VariantRegistry(Mapping[str, type[BaseModel]]):
    """Read-only mapping of discriminator values to variant models."""

    def __init__(self, field: str, variants: Mapping[str, type[BaseModel]]) -> None:
        self._field = field
        self._variants = MappingProxyType(dict(variants))

    @property
    def field(self) -> str:
        """JSON key holding the discriminator."""
        return self._field

    def __getitem__(self, key: str) -> type[BaseModel]:
        return self._variants[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __repr__(self) -> str:
        names = {key: model.__name__ for key, model in self._variants.items()}
        return f"VariantRegistry(field={self._field!r}, variants={names!r})"

    def with_variant(self, value: str, model: type[BaseModel]) -> VariantRegistry:
        """Return a new registry with ``value`` routed to ``model``."""
        return VariantRegistry(self._field, {**self._variants, value: model})


def _attribute_for(model: type[BaseModel], key: str) -> str:
    for name, info in model.model_fields.items():
        if name == key or info.alias == key:
            return name
    raise PreconditionViolation(
        f"{model.__name__} does not declare the discriminator field {key!r}"
    )


class PolymorphicPayload:
    """Decoded object whose variant is chosen by a discriminator value."""

    __slots__ = ("discriminator", "common", "variant", "raw")

    common_model: ClassVar[type[BaseModel]]
    registry: ClassVar[VariantRegistry]

    discriminator: str
    common: BaseModel
    variant: BaseModel | None
    raw: bytes | None

    def __init__(
        self,
        discriminator: str,
        common: BaseModel,
        variant: BaseModel | None = None,
        raw: bytes | None = None,
    ) -> None:
        if variant is not None and raw is not None:
            raise PreconditionViolation("a payload is either recognized or raw, not both")
        object.__setattr__(self, "discriminator", discriminator)
        object.__setattr__(self, "common", common)
        object.__setattr__(self, "variant", variant)
        object.__setattr__(self, "raw", raw)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolymorphicPayload):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.discriminator == other.discriminator
            and self.common == other.common
            and self.variant == other.variant
            and self.raw == other.raw
        )

    def __hash__(self) -> int:
        return hash((type(self), self.discriminator, self.id))

    def __repr__(self) -> str:
        state = repr(self.variant) if self.raw is None else "unrecognized"
        return f"{type(self).__name__}(discriminator={self.discriminator!r}, {state})"

    @property
    def id(self) -> str:
        """ID taken from the shared fields."""
        return getattr(self.common, "id", "") or ""

    @property
    def recognized(self) -> bool:
        """Return True when the discriminator matched a registered variant."""
        return self.raw is None

    def variant_as(self, model: type[BaseModel]) -> Any:
        """Return the variant if it is a ``model`` instance, else None."""
        if isinstance(self.variant, model):
            return self.variant
        return None

    def encode(self) -> str:
        """Return the wire form of the payload: the bare ID."""
        return self.id

    @classmethod
    def decode(cls, data: bytes | str | Mapping[str, Any]) -> PolymorphicPayload:
        """Decode raw JSON (or a parsed JSON object) into this payload type."""
        return decode_polymorphic(data, cls)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate(value: Any) -> PolymorphicPayload:
            if isinstance(value, cls):
                return value
            if not isinstance(value, Mapping):
                raise MalformedPayloadError(cls, TypeError(f"expected an object, got {value!r}"))
            return decode_polymorphic(value, cls)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda payload: payload.id, when_used="always"
            ),
        )


def decode_polymorphic(
    data: bytes | str | Mapping[str, Any], payload_cls: type[PolymorphicPayload]
) -> PolymorphicPayload:
    """Decode ``data`` into ``payload_cls`` by routing on its discriminator."""
    common_model = payload_cls.common_model
    registry = payload_cls.registry
    is_mapping = isinstance(data, Mapping)

    try:
        if is_mapping:
            common = common_model.model_validate(data)
        else:
            common = common_model.model_validate_json(data)
    except ValidationError as exc:
        raise MalformedPayloadError(payload_cls, exc) from exc

    discriminator = getattr(common, _attribute_for(common_model, registry.field))

    variant_model = registry.get(discriminator)
    if variant_model is None:
        logger.debug(
            "Unrecognized %s %s %r, keeping raw payload",
            payload_cls.__name__,
            registry.field,
            discriminator,
        )
        if is_mapping:
            raw = json.dumps(dict(data), separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        elif isinstance(data, str):
            raw = data.encode()
        else:
            raw = bytes(data)
        return payload_cls(discriminator, common, raw=raw)

    try:
        if is_mapping:
            variant = variant_model.model_validate(data)
        else:
            variant = variant_model.model_validate_json(data)
    except (ValidationError, MalformedReferenceError, MalformedPayloadError) as exc:
        raise VariantDecodeError(discriminator, exc) from exc

    return payload_cls(discriminator, common, variant=variant)
