"""Errors returned by the remote API.

Every failed call is turned into exactly one ``RemoteAPIError`` subclass,
chosen from the ``type`` the API declared in the error body. The parsed
body is kept on the exception as ``err.body``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .schemas.enums import ErrorType
from .schemas.error import ErrorBody

logger = logging.getLogger(__name__)


class RemoteAPIError(Exception):
    """Base class for errors parsed from an API response."""

    def __init__(self, body: ErrorBody) -> None:
        self.body = body
        super().__init__(body.message)

    def __str__(self) -> str:
        return json.dumps(self.body.to_dict())

    @property
    def type(self) -> str:
        return self.body.type

    @property
    def code(self) -> str | None:
        return self.body.code

    @property
    def message(self) -> str:
        return self.body.message

    @property
    def param(self) -> str | None:
        return self.body.param

    @property
    def request_id(self) -> str | None:
        return self.body.request_id

    @property
    def http_status(self) -> int | None:
        return self.body.http_status

    @property
    def charge_id(self) -> str | None:
        return self.body.charge_id


class APIConnectionError(RemoteAPIError):
    """Failure to connect to the API."""


class APIError(RemoteAPIError):
    """Catch-all for errors not covered by the other kinds."""


class AuthenticationError(RemoteAPIError):
    """Failure to properly authenticate during a request."""


class PermissionDeniedError(RemoteAPIError):
    """The API key lacks the permissions the request needs."""


class InvalidRequestError(RemoteAPIError):
    """The request contained invalid parameters."""


class RateLimitError(RemoteAPIError):
    """Too many requests hit the API too quickly."""


class CardError(RemoteAPIError):
    """A card could not be charged."""

    @property
    def decline_code(self) -> str | None:
        return self.body.decline_code


ERROR_CLASSES: Mapping[str, type[RemoteAPIError]] = {
    ErrorType.API.value: APIError,
    ErrorType.API_CONNECTION.value: APIConnectionError,
    ErrorType.AUTHENTICATION.value: AuthenticationError,
    ErrorType.CARD.value: CardError,
    ErrorType.INVALID_REQUEST.value: InvalidRequestError,
    ErrorType.PERMISSION.value: PermissionDeniedError,
    ErrorType.RATE_LIMIT.value: RateLimitError,
}

STATUS_CLASSES: Mapping[int, type[RemoteAPIError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    402: CardError,
    403: PermissionDeniedError,
    404: InvalidRequestError,
    429: RateLimitError,
}


def error_class_for(error_type: str | None, http_status: int | None) -> type[RemoteAPIError]:
    """Return the error kind for a declared type, falling back on status."""
    if error_type and error_type in ERROR_CLASSES:
        return ERROR_CLASSES[error_type]
    error_class = STATUS_CLASSES.get(http_status or 0, APIError)
    logger.debug(
        "Unknown error type %r with status %s, using %s",
        error_type,
        http_status,
        error_class.__name__,
    )
    return error_class


def _error_payload(data: Any) -> Any:
    # The live API wraps the body as {"error": {...}}.
    if isinstance(data, Mapping) and isinstance(data.get("error"), Mapping):
        return data["error"]
    return data


def parse_error(body: bytes | str | Mapping[str, Any], http_status: int | None = None) -> RemoteAPIError:
    """Build the ``RemoteAPIError`` for a non-2xx response body."""
    if isinstance(body, Mapping):
        data: Any = body
    else:
        try:
            data = json.loads(body)
        except ValueError:
            text = body.decode(errors="replace") if isinstance(body, bytes) else body
            return APIError(
                ErrorBody(type=ErrorType.API.value, message=text, http_status=http_status)
            )

    payload = _error_payload(data)
    try:
        error_body = ErrorBody.model_validate(payload)
    except ValidationError:
        return APIError(
            ErrorBody(type=ErrorType.API.value, message=json.dumps(data), http_status=http_status)
        )
    error_body = error_body.model_copy(update={"http_status": http_status})
    return error_class_for(error_body.type, http_status)(error_body)
