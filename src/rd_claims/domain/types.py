"""Identifier types for the domain layer."""

from __future__ import annotations

from typing import NewType

ClaimId = NewType("ClaimId", str)
ProjectId = NewType("ProjectId", str)
UserId = NewType("UserId", str)

__all__ = [
    "ClaimId",
    "ProjectId",
    "UserId",
]
