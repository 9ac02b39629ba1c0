"""Pydantic models for API response resources."""

from .base import APIModel, APIResource
from .country_spec import CountrySpec, CountrySpecList, VerificationFieldsList
from .enums import BalanceTransactionSourceType, DestinationType, ErrorType
from .error import ErrorBody
from .payout import DESTINATION_VARIANTS, DestinationFields, Payout, PayoutDestination, PayoutList
from .recipient_transfer import (
    BalanceTransactionSource,
    RecipientTransfer,
    RecipientTransferDestination,
    Reversal,
    ReversalList,
)
from .related import (
    Address,
    BalanceTransaction,
    BankAccount,
    Card,
    Charge,
    Customer,
    Recipient,
)
from .review import Review, ReviewList
from .source import (
    CodeVerificationFlow,
    ReceiverFlow,
    RedirectFlow,
    Source,
    SourceMandate,
    SourceMandateAcceptance,
    SourceOwner,
)

__all__ = [
    "APIModel",
    "APIResource",
    "Address",
    "BalanceTransaction",
    "BalanceTransactionSource",
    "BalanceTransactionSourceType",
    "BankAccount",
    "Card",
    "Charge",
    "CodeVerificationFlow",
    "CountrySpec",
    "CountrySpecList",
    "Customer",
    "DESTINATION_VARIANTS",
    "DestinationFields",
    "DestinationType",
    "ErrorBody",
    "ErrorType",
    "Payout",
    "PayoutDestination",
    "PayoutList",
    "ReceiverFlow",
    "RecipientTransfer",
    "RecipientTransferDestination",
    "Recipient",
    "RedirectFlow",
    "Reversal",
    "ReversalList",
    "Review",
    "ReviewList",
    "Source",
    "SourceMandate",
    "SourceMandateAcceptance",
    "SourceOwner",
    "VerificationFieldsList",
]
