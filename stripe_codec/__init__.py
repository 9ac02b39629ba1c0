"""Typed models and field codec for the payments REST API."""

import logging

from .core import (
    CodecError,
    ExpandableRef,
    ExtensionBag,
    MalformedPayloadError,
    MalformedReferenceError,
    PolymorphicPayload,
    PreconditionViolation,
    VariantDecodeError,
    VariantRegistry,
    decode,
    encode,
)
from .errors import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    CardError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError,
    RemoteAPIError,
    parse_error,
)
from .pagination import ListEnvelope
from .response import decode_response

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APIConnectionError",
    "APIError",
    "AuthenticationError",
    "CardError",
    "CodecError",
    "ExpandableRef",
    "ExtensionBag",
    "InvalidRequestError",
    "ListEnvelope",
    "MalformedPayloadError",
    "MalformedReferenceError",
    "PermissionDeniedError",
    "PolymorphicPayload",
    "PreconditionViolation",
    "RateLimitError",
    "RemoteAPIError",
    "VariantDecodeError",
    "VariantRegistry",
    "decode",
    "decode_response",
    "encode",
    "parse_error",
]
