"""Resources that payouts, transfers and reviews point at.

Only the fields this package needs to route and reference them are
modelled; unknown keys from the API are ignored.
"""

from __future__ import annotations

from pydantic import Field

from ..core.expandable import ExpandableRef
from .base import APIModel, APIResource


class Address(APIModel):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class Customer(APIResource):
    """Customer resource."""

    created: int = 0
    currency: str | None = None
    description: str | None = None
    email: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)


class BankAccount(APIResource):
    """Bank account used as an external payout destination."""

    account_holder_name: str | None = None
    account_holder_type: str | None = None
    bank_name: str | None = None
    country: str | None = None
    currency: str | None = None
    customer: ExpandableRef[Customer] | None = None
    default_for_currency: bool = False
    fingerprint: str | None = None
    last4: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    routing_number: str | None = None
    status: str | None = None


class Card(APIResource):
    """Debit card used as an external payout destination."""

    address_city: str | None = None
    address_country: str | None = None
    address_line1: str | None = None
    address_zip: str | None = None
    brand: str | None = None
    country: str | None = None
    currency: str | None = None
    customer: ExpandableRef[Customer] | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    fingerprint: str | None = None
    funding: str | None = None
    last4: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    name: str | None = None


class BalanceTransaction(APIResource):
    """Movement of funds on the account balance."""

    amount: int = 0
    available_on: int = 0
    created: int = 0
    currency: str | None = None
    description: str | None = None
    fee: int = 0
    net: int = 0
    status: str | None = None
    type: str | None = None


class Charge(APIResource):
    """Charge resource."""

    amount: int = 0
    amount_refunded: int = 0
    balance_transaction: ExpandableRef[BalanceTransaction] | None = None
    captured: bool = False
    created: int = 0
    currency: str | None = None
    customer: ExpandableRef[Customer] | None = None
    description: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    paid: bool = False
    refunded: bool = False
    status: str | None = None


class Recipient(APIResource):
    """Recipient of a legacy transfer."""

    created: int = 0
    description: str | None = None
    email: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    name: str | None = None
    type: str | None = None
