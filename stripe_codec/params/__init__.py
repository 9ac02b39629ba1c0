"""Request parameter models."""

from .base import ListParams, Params, ParamsModel, RangeQueryParams, append_model, append_value
from .country_spec import CountrySpecListParams
from .payout import PayoutListParams, PayoutParams
from .source import (
    AddressParams,
    RedirectParams,
    SourceObjectDetachParams,
    SourceObjectParams,
    SourceOwnerParams,
)

__all__ = [
    "AddressParams",
    "CountrySpecListParams",
    "ListParams",
    "Params",
    "ParamsModel",
    "PayoutListParams",
    "PayoutParams",
    "RangeQueryParams",
    "RedirectParams",
    "SourceObjectDetachParams",
    "SourceObjectParams",
    "SourceOwnerParams",
    "append_model",
    "append_value",
]
