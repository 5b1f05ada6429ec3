"""Form validation applied before create requests reach the backend.

Each ``validate_*`` function is pure: it never touches the network and reports
every failing field at once as a mapping of field path (wire names joined with
``.``, e.g. ``claimPeriod.endDate``) to a single message. When a field breaks
several rules only the first rule checked is reported.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from rd_claims.domain import (
    ClaimPeriod,
    CreateClaimInput,
    CreateProjectInput,
    ProjectId,
    UpdateProjectInput,
)

T = TypeVar("T")

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class FormValidationError(ValueError):
    """Raised when a form is unwrapped despite failing validation."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        details = "; ".join(f"{path}: {message}" for path, message in self.errors.items())
        super().__init__(f"Validation failed: {details}")


@dataclass(frozen=True, slots=True)
class ValidationResult(Generic[T]):
    """Outcome of validating one form."""

    value: T | None = None
    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        if self.errors or self.value is None:
            raise FormValidationError(self.errors)
        return self.value


def _text(value: Any, *, label: str, max_length: int) -> str:
    if not isinstance(value, str) or value == "":
        raise PydanticCustomError("required", f"{label} is required")
    if len(value) > max_length:
        raise PydanticCustomError(
            "too_long", f"{label} must be at most {max_length} characters"
        )
    return value


def _date_text(value: Any, *, label: str) -> str:
    if value is None or value == "":
        raise PydanticCustomError("required", f"{label} is required")
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise PydanticCustomError("date_format", f"{label} must be in YYYY-MM-DD format")
    return value


def _parse_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


class _Form(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ClaimPeriodForm(_Form):
    start_date: str = Field(default="", validate_default=True)
    end_date: str = Field(default="", validate_default=True)

    @field_validator("start_date", mode="before")
    @classmethod
    def check_start(cls, value: Any) -> str:
        return _date_text(value, label="Start date")

    @field_validator("end_date", mode="before")
    @classmethod
    def check_end(cls, value: Any) -> str:
        return _date_text(value, label="End date")

    @field_validator("end_date")
    @classmethod
    def check_order(cls, value: str, info: ValidationInfo) -> str:
        start_text = info.data.get("start_date")
        if start_text is None:
            # Start date already failed; ordering is only checked for well-formed pairs.
            return value
        start, end = _parse_date(start_text), _parse_date(value)
        if start is None or end is None or start >= end:
            raise PydanticCustomError("date_order", "Start date must be before end date")
        return value

    def to_domain(self) -> ClaimPeriod:
        return ClaimPeriod(
            start_date=date.fromisoformat(self.start_date),
            end_date=date.fromisoformat(self.end_date),
        )


class CreateClaimForm(_Form):
    company_name: str = Field(default="", validate_default=True)
    claim_period: ClaimPeriodForm = Field(default=None, validate_default=True)
    amount: int = Field(default=None, validate_default=True)
    project_ids: tuple[str, ...] | None = None

    @field_validator("company_name", mode="before")
    @classmethod
    def check_company_name(cls, value: Any) -> str:
        return _text(value, label="Company name", max_length=200)

    @field_validator("claim_period", mode="before")
    @classmethod
    def check_claim_period(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping | BaseModel):
            raise PydanticCustomError("required", "Claim period is required")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def check_amount(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int | float) or math.isnan(value):
            raise PydanticCustomError("number_type", "Amount must be a number")
        if isinstance(value, float):
            if not value.is_integer():
                raise PydanticCustomError("integer_type", "Amount must be an integer (pence)")
            value = int(value)
        if value <= 0:
            raise PydanticCustomError("positive", "Amount must be positive")
        return value

    @field_validator("project_ids", mode="before")
    @classmethod
    def check_project_ids(cls, value: Any) -> tuple[str, ...] | None:
        if value is None:
            return None
        if isinstance(value, str) or not isinstance(value, list | tuple):
            raise PydanticCustomError("project_ids", "Project IDs must be a list of strings")
        if not all(isinstance(item, str) for item in value):
            raise PydanticCustomError("project_ids", "Project IDs must be a list of strings")
        return tuple(value)

    def to_domain(self) -> CreateClaimInput:
        payload: dict[str, Any] = {
            "company_name": self.company_name,
            "claim_period": self.claim_period.to_domain(),
            "amount": self.amount,
        }
        if self.project_ids is not None:
            payload["project_ids"] = tuple(ProjectId(item) for item in self.project_ids)
        return CreateClaimInput(**payload)


class CreateProjectForm(_Form):
    name: str = Field(default="", validate_default=True)
    description: str = Field(default="", validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        return _text(value, label="Project name", max_length=200)

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> str:
        return _text(value, label="Description", max_length=1000)

    def to_domain(self) -> CreateProjectInput:
        return CreateProjectInput(name=self.name, description=self.description)


class UpdateProjectForm(_Form):
    """Partial edit; only the fields present in the input are checked and sent."""

    name: str | None = None
    description: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        return _text(value, label="Project name", max_length=200)

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> str:
        return _text(value, label="Description", max_length=1000)

    def to_domain(self) -> UpdateProjectInput:
        return UpdateProjectInput(**self.model_dump(exclude_unset=True))


def collect_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten a pydantic error into ``{field path: first message}``."""

    errors: dict[str, str] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        errors.setdefault(path, error["msg"])
    return errors


def _validate(form_type: type[_Form], data: Mapping[str, Any]) -> ValidationResult[Any]:
    try:
        form = form_type.model_validate(dict(data))
    except ValidationError as exc:
        return ValidationResult(errors=collect_errors(exc))
    return ValidationResult(value=form.to_domain())  # type: ignore[attr-defined]


def validate_claim_period(data: Mapping[str, Any]) -> ValidationResult[ClaimPeriod]:
    return _validate(ClaimPeriodForm, data)


def validate_create_claim(data: Mapping[str, Any]) -> ValidationResult[CreateClaimInput]:
    return _validate(CreateClaimForm, data)


def validate_create_project(data: Mapping[str, Any]) -> ValidationResult[CreateProjectInput]:
    return _validate(CreateProjectForm, data)


def validate_update_project(data: Mapping[str, Any]) -> ValidationResult[UpdateProjectInput]:
    return _validate(UpdateProjectForm, data)


__all__ = [
    "ClaimPeriodForm",
    "CreateClaimForm",
    "CreateProjectForm",
    "FormValidationError",
    "UpdateProjectForm",
    "ValidationResult",
    "collect_errors",
    "validate_claim_period",
    "validate_create_claim",
    "validate_create_project",
    "validate_update_project",
]
