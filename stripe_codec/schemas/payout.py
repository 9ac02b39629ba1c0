"""Payout resource and its polymorphic destination."""

from __future__ import annotations

from pydantic import Field

from ..core.expandable import ExpandableRef
from ..core.polymorphic import PolymorphicPayload, VariantRegistry
from ..pagination.envelope import ListEnvelope
from .base import APIModel, APIResource
from .enums import DestinationType
from .related import BalanceTransaction, BankAccount, Card


class DestinationFields(APIModel):
    """Fields shared by every destination variant."""

    id: str
    object: str


DESTINATION_VARIANTS = VariantRegistry(
    "object",
    {
        DestinationType.BANK_ACCOUNT.value: BankAccount,
        DestinationType.CARD.value: Card,
    },
)


class PayoutDestination(PolymorphicPayload):
    """Where a payout is sent: a bank account or a debit card.

    The ``object`` field says which one was expanded. Only the ID is ever
    sent back to the API.
    """

    __slots__ = ()

    common_model = DestinationFields
    registry = DESTINATION_VARIANTS

    @property
    def type(self) -> str:
        return self.discriminator

    @property
    def bank_account(self) -> BankAccount | None:
        return self.variant_as(BankAccount)

    @property
    def card(self) -> Card | None:
        return self.variant_as(Card)


class Payout(APIResource):
    """Payout of funds from the account balance to a bank account or card."""

    amount: int = 0
    arrival_date: int = 0
    automatic: bool = False
    balance_transaction: ExpandableRef[BalanceTransaction] | None = None
    bank_account: BankAccount | None = None
    card: Card | None = None
    created: int = 0
    currency: str | None = None
    destination: ExpandableRef[PayoutDestination] | None = None
    failure_balance_transaction: ExpandableRef[BalanceTransaction] | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    method: str | None = None
    source_type: str | None = None
    statement_descriptor: str | None = None
    status: str | None = None
    type: str | None = None


PayoutList = ListEnvelope[Payout]
