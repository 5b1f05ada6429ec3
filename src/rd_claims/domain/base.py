"""Core base classes for domain models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rd_claims.utils.time import ensure_utc


class DomainModel(BaseModel):
    """Immutable domain model using the backend's camelCase field names on the wire."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready request body containing only the fields that were set."""

        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)


def coerce_utc(value: datetime | str | None) -> datetime | None:
    """Parse ISO strings (including a trailing ``Z``) and normalise to UTC."""

    if value is None:
        return value
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return ensure_utc(value)
