"""Wire schema of an API error body."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import APIModel


class ErrorBody(APIModel):
    """Error payload returned when a call is unsuccessful.

    ``http_status`` is not part of the wire body; ``parse_error`` sets it
    from the status the transport saw.
    """

    type: str = ""
    message: str = ""
    code: str | None = None
    param: str | None = None
    request_id: str | None = None
    charge_id: str | None = Field(default=None, alias="charge")
    decline_code: str | None = None
    http_status: int | None = Field(default=None, exclude=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the body as sent over the wire, with unset fields omitted."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        if self.http_status is not None:
            data["status"] = self.http_status
        return data
