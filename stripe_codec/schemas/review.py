"""Radar review resource."""

from __future__ import annotations

from ..core.expandable import ExpandableRef
from ..pagination.envelope import ListEnvelope
from .base import APIResource
from .related import Charge


class Review(APIResource):
    """Payment flagged for manual review."""

    charge: ExpandableRef[Charge] | None = None
    created: int = 0
    livemode: bool = False
    open: bool = False
    reason: str | None = None


ReviewList = ListEnvelope[Review]
