"""Project domain models."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field, field_validator

from .base import DomainModel, coerce_utc
from .types import ProjectId, UserId


class Project(DomainModel):
    """R&D project as returned by the backend."""

    project_id: ProjectId
    name: str
    description: str
    user_id: UserId | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def ensure_timezone(cls, value: datetime | str) -> datetime | None:
        return coerce_utc(value)


class CreateProjectInput(DomainModel):
    name: Annotated[str, Field(min_length=1, max_length=200)]
    description: Annotated[str, Field(min_length=1, max_length=1000)]


class UpdateProjectInput(DomainModel):
    """Partial patch; only explicitly provided fields are sent."""

    name: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    description: Annotated[str, Field(min_length=1, max_length=1000)] | None = None
