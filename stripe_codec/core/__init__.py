"""Expandable and polymorphic field codec."""

from .codec import decode, decode_value, encode
from .exceptions import (
    CodecError,
    MalformedPayloadError,
    MalformedReferenceError,
    PreconditionViolation,
    VariantDecodeError,
)
from .expandable import ExpandableRef
from .extension import ExtensionBag, append_extension, extract_extension
from .polymorphic import PolymorphicPayload, VariantRegistry, decode_polymorphic

__all__ = [
    "CodecError",
    "ExpandableRef",
    "ExtensionBag",
    "MalformedPayloadError",
    "MalformedReferenceError",
    "PolymorphicPayload",
    "PreconditionViolation",
    "VariantDecodeError",
    "VariantRegistry",
    "append_extension",
    "decode",
    "decode_polymorphic",
    "decode_value",
    "encode",
    "extract_extension",
]
