"""Domain models for claims, projects and mock users."""

from .aggregates import ClaimWithProjects, ProjectWithClaims
from .base import DomainModel, coerce_utc
from .claim import Claim, ClaimPeriod, CreateClaimInput, LinkProjectsInput, UpdateClaimInput
from .enums import ClaimStatus, UserRole
from .project import CreateProjectInput, Project, UpdateProjectInput
from .types import ClaimId, ProjectId, UserId
from .user import MOCK_USERS, User

__all__ = [
    "MOCK_USERS",
    "Claim",
    "ClaimId",
    "ClaimPeriod",
    "ClaimStatus",
    "ClaimWithProjects",
    "CreateClaimInput",
    "CreateProjectInput",
    "DomainModel",
    "LinkProjectsInput",
    "Project",
    "ProjectId",
    "ProjectWithClaims",
    "UpdateClaimInput",
    "UpdateProjectInput",
    "User",
    "UserId",
    "UserRole",
    "coerce_utc",
]
