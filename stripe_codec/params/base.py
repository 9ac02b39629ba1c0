"""Request parameter models and their form encoding.

Parameters are sent as ``application/x-www-form-urlencoded`` bodies with
nested keys in brackets::

    PayoutListParams(created=RangeQueryParams(gte=1500000000), limit=3)
    -> created[gte]=1500000000&limit=3

Fields left as ``None`` are not sent. Fields declared with
``Field(exclude=True)`` are path or header values and never appear in the
body. A model can add custom pairs by defining
``append_to(values, key_parts)``, which runs after its regular fields.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..utils.form import FormValues, format_key


class ParamsModel(BaseModel):
    """Base for every parameter model and nested parameter object."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def to_form(self) -> FormValues:
        """Encode the parameters into form values."""
        values = FormValues()
        append_model(values, self, [])
        return values

    def encode(self) -> str:
        """Return the url-encoded request body."""
        return self.to_form().encode()


class Params(ParamsModel):
    """Parameters accepted by every request."""

    expand: list[str] | None = None
    metadata: dict[str, str] | None = None

    def add_expand(self, field: str) -> None:
        """Ask the API to return ``field`` as a full object instead of an ID."""
        self.expand = [*(self.expand or []), field]

    def add_metadata(self, key: str, value: str) -> None:
        self.metadata = {**(self.metadata or {}), key: value}


class ListParams(Params):
    """Cursor parameters accepted by list endpoints."""

    ending_before: str | None = None
    limit: int | None = Field(default=None, ge=1, le=100)
    starting_after: str | None = None


class RangeQueryParams(ParamsModel):
    """Range filter for timestamp fields such as ``created``."""

    gt: int | None = None
    gte: int | None = None
    lt: int | None = None
    lte: int | None = None


def append_value(values: FormValues, key_parts: Sequence[str], value: Any) -> None:
    """Append ``value`` at ``key_parts``, recursing into containers."""
    if value is None:
        return
    if isinstance(value, BaseModel):
        append_model(values, value, key_parts)
    elif isinstance(value, Mapping):
        for key, item in value.items():
            append_value(values, [*key_parts, str(key)], item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            append_value(values, [*key_parts, str(index)], item)
    else:
        values.add(format_key(key_parts), value)


def append_model(values: FormValues, model: BaseModel, key_parts: Sequence[str]) -> None:
    """Append every sendable field of ``model`` under ``key_parts``."""
    for name, info in type(model).model_fields.items():
        if info.exclude:
            continue
        append_value(values, [*key_parts, info.alias or name], getattr(model, name))
    hook = getattr(model, "append_to", None)
    if callable(hook):
        hook(values, list(key_parts))
