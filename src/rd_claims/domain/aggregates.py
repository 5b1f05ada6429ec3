"""Claim/project views that embed the linked counterpart collection."""

from __future__ import annotations

from .claim import Claim
from .project import Project


class ClaimWithProjects(Claim):
    projects: tuple[Project, ...] = ()


class ProjectWithClaims(Project):
    claims: tuple[Claim, ...] = ()
