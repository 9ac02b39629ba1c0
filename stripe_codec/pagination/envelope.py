"""List response envelope."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ListMeta(BaseModel):
    """Pagination metadata common to every list response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    object: str = "list"
    has_more: bool = False
    total_count: int | None = None
    url: str | None = None


class ListEnvelope(ListMeta, Generic[T]):
    """A page of resources as returned by a list endpoint.

    Each element of ``data`` goes through the same field codec as a
    standalone resource, so expanded references inside list items decode
    the same way.
    """

    data: list[T] = Field(default_factory=list)
