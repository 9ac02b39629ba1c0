"""Parameters for the payout endpoints."""

from __future__ import annotations

from .base import ListParams, Params, RangeQueryParams


class PayoutParams(Params):
    """Parameters for creating or updating a payout."""

    amount: int | None = None
    currency: str | None = None
    destination: str | None = None
    method: str | None = None
    source_type: str | None = None
    statement_descriptor: str | None = None


class PayoutListParams(ListParams):
    """Parameters for listing payouts.

    ``arrival_date`` and ``created`` take either an exact timestamp or a
    ``RangeQueryParams``.
    """

    arrival_date: int | RangeQueryParams | None = None
    created: int | RangeQueryParams | None = None
    destination: str | None = None
    status: str | None = None
