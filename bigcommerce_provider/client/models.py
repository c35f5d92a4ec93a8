"""BigCommerce API models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Webhook(BaseModel):
    """A webhook subscription as the v3 ``/hooks`` endpoints represent it."""

    model_config = ConfigDict(extra="ignore")

    id: int = 0
    scope: str
    destination: str
    is_active: bool = True
    headers: dict[str, str] = Field(default_factory=dict)

    # Server-assigned, never sent back
    client_id: str = ""
    store_hash: str = ""
    created_at: int = 0
    updated_at: int = 0

    @field_validator("headers", mode="before")
    @classmethod
    def _null_headers(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_request(self) -> dict[str, Any]:
        return self.model_dump(include={"scope", "destination", "is_active", "headers"})
