"""Parameters for the source endpoints."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field, ValidationInfo, field_validator

from ..core.exceptions import PreconditionViolation
from ..core.extension import append_extension
from ..utils.form import FormValues
from .base import Params, ParamsModel


class AddressParams(ParamsModel):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class SourceOwnerParams(ParamsModel):
    address: AddressParams | None = None
    email: str | None = None
    name: str | None = None
    phone: str | None = None


class RedirectParams(ParamsModel):
    return_url: str | None = None


class SourceObjectParams(Params):
    """Parameters for creating or updating a source.

    ``type_data`` holds the fields specific to ``type`` and is sent nested
    under the type's name: ``type="sepa_debit", type_data={"iban": "..."}``
    encodes as ``sepa_debit[iban]=...``.
    """

    amount: int | None = None
    currency: str | None = None
    customer: str | None = None
    flow: str | None = None
    original_source: str | None = None
    owner: SourceOwnerParams | None = None
    redirect: RedirectParams | None = None
    statement_descriptor: str | None = None
    token: str | None = None
    type: str | None = None
    type_data: dict[str, str] | None = Field(default=None, exclude=True)
    usage: str | None = None

    # Field validators reject an assignment before it is written.
    @field_validator("type")
    @classmethod
    def _keep_type_while_type_data_set(cls, value: str | None, info: ValidationInfo) -> str | None:
        if not value and info.data.get("type_data"):
            raise PreconditionViolation("type cannot be cleared while type_data is set")
        return value

    @field_validator("type_data")
    @classmethod
    def _require_type_for_type_data(
        cls, value: dict[str, str] | None, info: ValidationInfo
    ) -> dict[str, str] | None:
        if value and not info.data.get("type"):
            raise PreconditionViolation("type_data cannot be set without an explicit type")
        return value

    def append_to(self, values: FormValues, key_parts: Sequence[str]) -> None:
        append_extension(values, key_parts, self.type, self.type_data)


class SourceObjectDetachParams(Params):
    """Parameters for detaching a source from a customer.

    ``customer`` is part of the request path, not the body.
    """

    customer: str | None = Field(default=None, exclude=True)
