"""List response envelopes."""

from .envelope import ListEnvelope, ListMeta

__all__ = ["ListEnvelope", "ListMeta"]
