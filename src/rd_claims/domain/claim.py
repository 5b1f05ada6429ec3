"""Claim domain models.

Models parsed from backend responses only check types; the backend is the
source of truth for what a stored claim looks like. The ordering and
positivity rules apply to the inputs sent to it.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated

from pydantic import Field, field_validator, model_validator

from .base import DomainModel, coerce_utc
from .enums import ClaimStatus
from .types import ClaimId, ProjectId, UserId


class ClaimPeriod(DomainModel):
    start_date: date
    end_date: date

    @property
    def is_ordered(self) -> bool:
        return self.start_date < self.end_date


def _require_ordered(period: ClaimPeriod | None) -> None:
    if period is not None and not period.is_ordered:
        msg = "Start date must be before end date"
        raise ValueError(msg)


class Claim(DomainModel):
    """R&D tax-relief claim; ``amount`` is held in pence."""

    claim_id: ClaimId
    company_name: str
    claim_period: ClaimPeriod
    amount: int
    status: ClaimStatus = ClaimStatus.DRAFT
    user_id: UserId | None = None
    submitted_by: UserId | None = None
    reviewed_by: UserId | None = None
    submitted_at: datetime | None = None
    reviewed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("submitted_at", "reviewed_at", "created_at", "updated_at", mode="before")
    @classmethod
    def ensure_timezone(cls, value: datetime | str | None) -> datetime | None:
        return coerce_utc(value)


class CreateClaimInput(DomainModel):
    company_name: Annotated[str, Field(min_length=1, max_length=200)]
    claim_period: ClaimPeriod
    amount: Annotated[int, Field(gt=0)]
    project_ids: tuple[ProjectId, ...] | None = None

    @model_validator(mode="after")
    def ensure_period_ordered(self) -> CreateClaimInput:
        _require_ordered(self.claim_period)
        return self


class UpdateClaimInput(DomainModel):
    """Partial patch; only explicitly provided fields are sent."""

    status: ClaimStatus | None = None
    company_name: Annotated[str, Field(min_length=1, max_length=200)] | None = None
    claim_period: ClaimPeriod | None = None
    amount: Annotated[int, Field(gt=0)] | None = None

    @model_validator(mode="after")
    def ensure_period_ordered(self) -> UpdateClaimInput:
        _require_ordered(self.claim_period)
        return self


class LinkProjectsInput(DomainModel):
    project_ids: tuple[ProjectId, ...]
