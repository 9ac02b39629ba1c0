"""Source resource and its authentication flows."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidatorFunctionWrapHandler, model_validator

from ..core.extension import ExtensionBag, extract_extension
from .base import APIModel, APIResource
from .related import Address


class SourceOwner(APIModel):
    """Owner information, as provided and as verified by the payment method."""

    address: Address | None = None
    email: str | None = None
    name: str | None = None
    phone: str | None = None
    verified_address: Address | None = None
    verified_email: str | None = None
    verified_name: str | None = None
    verified_phone: str | None = None


class RedirectFlow(APIModel):
    """State of a redirect authentication flow."""

    failure_reason: str | None = None
    return_url: str | None = None
    status: str | None = None
    url: str | None = None


class ReceiverFlow(APIModel):
    """State of a receiver authentication flow."""

    address: str | None = None
    amount_charged: int = 0
    amount_received: int = 0
    amount_returned: int = 0
    refund_attributes_method: str | None = None
    refund_attributes_status: str | None = None


class CodeVerificationFlow(APIModel):
    """State of a code verification authentication flow."""

    attempts_remaining: int = 0
    status: str | None = None


class SourceMandateAcceptance(APIModel):
    date: str | None = None
    ip: str | None = None
    status: str | None = None
    user_agent: str | None = None


class SourceMandate(APIModel):
    acceptance: SourceMandateAcceptance = Field(default_factory=SourceMandateAcceptance)
    notification_method: str | None = None
    reference: str | None = None
    url: str | None = None


class Source(APIResource):
    """Payment source such as a card, bank debit or redirect-based method.

    Data specific to the source's ``type`` lives in the payload under a key
    named after that type (``"card": {...}`` for a card source) and is
    exposed as ``type_data``.
    """

    amount: int | None = None
    client_secret: str | None = None
    code_verification: CodeVerificationFlow | None = None
    created: int = 0
    currency: str | None = None
    flow: str | None = None
    livemode: bool = False
    mandate: SourceMandate = Field(default_factory=SourceMandate)
    metadata: dict[str, str] = Field(default_factory=dict)
    owner: SourceOwner = Field(default_factory=SourceOwner)
    receiver: ReceiverFlow | None = None
    redirect: RedirectFlow | None = None
    statement_descriptor: str | None = None
    status: str | None = None
    type: str | None = None
    type_data: ExtensionBag = Field(default_factory=ExtensionBag)
    usage: str | None = None

    @model_validator(mode="wrap")
    @classmethod
    def _attach_type_data(cls, data: Any, handler: ValidatorFunctionWrapHandler) -> Source:
        source = handler(data)
        if isinstance(data, Mapping) and "type_data" not in data:
            bag = extract_extension(data, source.type)
            return source.model_copy(update={"type_data": bag})
        return source
