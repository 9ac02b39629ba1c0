"""Exceptions raised by the expandable/polymorphic field codec.

These deliberately derive from ``Exception`` and not ``ValueError``:
pydantic only folds ``ValueError``/``AssertionError`` into a
``ValidationError``, so anything else raised from inside a field
validator reaches the caller with its type intact.
"""

from __future__ import annotations

from typing import Any


class CodecError(Exception):
    """Base class for codec failures."""


class MalformedReferenceError(CodecError):
    """A reference field was neither an ID string nor a decodable object."""

    def __init__(self, expected: Any, payload: Any, cause: Exception | None = None) -> None:
        self.expected = expected
        self.payload = payload
        self.cause = cause
        name = getattr(expected, "__name__", repr(expected))
        message = f"expected an ID string or a {name} object, got {payload!r}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)


class MalformedPayloadError(CodecError):
    """The shared fields of a polymorphic payload failed to decode."""

    def __init__(self, payload_type: Any, cause: Exception | None = None) -> None:
        self.payload_type = payload_type
        self.cause = cause
        name = getattr(payload_type, "__name__", repr(payload_type))
        super().__init__(f"could not decode {name}: {cause}")


class VariantDecodeError(CodecError):
    """A recognized discriminator's payload did not match its variant."""

    def __init__(self, discriminator: str, cause: Exception) -> None:
        self.discriminator = discriminator
        self.cause = cause
        super().__init__(f"invalid payload for variant {discriminator!r}: {cause}")


class PreconditionViolation(CodecError):
    """Caller attempted an encode the server could not interpret."""
