"""Enumerations used across the claim tracker domain layer."""

from __future__ import annotations

from enum import StrEnum


class ClaimStatus(StrEnum):
    """Review lifecycle of a claim, in progression order."""

    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    APPROVED = "Approved"


class UserRole(StrEnum):
    """Mock roles that gate which status changes a user may trigger."""

    SUBMITTER = "submitter"
    REVIEWER = "reviewer"
