"""Discriminator values the codec routes on."""

from enum import Enum


class DestinationType(str, Enum):
    """``object`` values of a payout or recipient transfer destination."""

    BANK_ACCOUNT = "bank_account"
    CARD = "card"


class BalanceTransactionSourceType(str, Enum):
    """``object`` values of a balance transaction's source."""

    CHARGE = "charge"
    PAYOUT = "payout"
    TRANSFER = "transfer"


class ErrorType(str, Enum):
    """``type`` values of an API error body."""

    API = "api_error"
    API_CONNECTION = "api_connection_error"
    AUTHENTICATION = "authentication_error"
    CARD = "card_error"
    INVALID_REQUEST = "invalid_request_error"
    PERMISSION = "more_permissions_required"
    RATE_LIMIT = "rate_limit_error"
