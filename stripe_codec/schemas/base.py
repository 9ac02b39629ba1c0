"""Shared pydantic base for API resources."""

from pydantic import BaseModel, ConfigDict


class APIModel(BaseModel):
    """Immutable model for nested response objects without an ID."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class APIResource(APIModel):
    """Response resource identified by an ``id``."""

    id: str
    object: str | None = None
