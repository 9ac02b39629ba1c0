"""Legacy recipient transfers and balance transaction sources."""

from __future__ import annotations

from pydantic import Field

from ..core.expandable import ExpandableRef
from ..core.polymorphic import PolymorphicPayload, VariantRegistry
from ..pagination.envelope import ListEnvelope
from .base import APIModel, APIResource
from .enums import BalanceTransactionSourceType
from .payout import DESTINATION_VARIANTS, DestinationFields, Payout
from .related import BalanceTransaction, BankAccount, Card, Charge, Recipient


class RecipientTransferDestination(PolymorphicPayload):
    """Bank account or card a recipient transfer was sent to."""

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


class SourceFields(APIModel):
    id: str
    object: str


class BalanceTransactionSource(PolymorphicPayload):
    """Object that caused a balance transaction.

    The registry is filled in at the bottom of this module because one of
    its variants is ``RecipientTransfer``, which itself points back here.
    """

    __slots__ = ()

    common_model = SourceFields

    @property
    def type(self) -> str:
        return self.discriminator

    @property
    def charge(self) -> Charge | None:
        return self.variant_as(Charge)

    @property
    def payout(self) -> Payout | None:
        return self.variant_as(Payout)

    @property
    def transfer(self) -> RecipientTransfer | None:
        return self.variant_as(RecipientTransfer)


class Reversal(APIResource):
    """Reversal of part or all of a transfer."""

    amount: int = 0
    balance_transaction: ExpandableRef[BalanceTransaction] | None = None
    created: int = 0
    currency: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    transfer: str | None = None


ReversalList = ListEnvelope[Reversal]


class RecipientTransfer(APIResource):
    """Transfer of funds to a third-party recipient."""

    amount: int = 0
    amount_reversed: int = 0
    balance_transaction: ExpandableRef[BalanceTransaction] | None = None
    bank_account: BankAccount | None = None
    card: Card | None = None
    created: int = 0
    currency: str | None = None
    date: int = 0
    description: str | None = None
    destination: ExpandableRef[RecipientTransferDestination] | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    method: str | None = None
    recipient: ExpandableRef[Recipient] | None = None
    reversals: ReversalList | None = None
    reversed: bool = False
    source_transaction: ExpandableRef[BalanceTransactionSource] | None = None
    source_type: str | None = None
    statement_descriptor: str | None = None
    status: str | None = None
    type: str | None = None


BalanceTransactionSource.registry = VariantRegistry(
    "object",
    {
        BalanceTransactionSourceType.CHARGE.value: Charge,
        BalanceTransactionSourceType.PAYOUT.value: Payout,
        BalanceTransactionSourceType.TRANSFER.value: RecipientTransfer,
    },
)
