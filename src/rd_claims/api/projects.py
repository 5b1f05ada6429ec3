"""Gateway for the ``/projects`` endpoints."""

from __future__ import annotations

from rd_claims.domain import (
    CreateProjectInput,
    Project,
    ProjectId,
    ProjectWithClaims,
    UpdateProjectInput,
)

from .transport import ApiTransport, path_segment, unwrap, unwrap_list


class ProjectsApi:
    def __init__(self, transport: ApiTransport) -> None:
        self._transport = transport

    async def create(self, data: CreateProjectInput) -> Project:
        payload = await self._transport.request("POST", "/projects", json=data.to_payload())
        return unwrap(payload, "project", Project)

    async def list(self) -> list[Project]:
        payload = await self._transport.request("GET", "/projects")
        return unwrap_list(payload, "projects", Project)

    async def get(self, project_id: ProjectId | str) -> ProjectWithClaims:
        payload = await self._transport.request("GET", f"/projects/{path_segment(project_id)}")
        return unwrap(payload, "project", ProjectWithClaims)

    async def update(self, project_id: ProjectId | str, data: UpdateProjectInput) -> Project:
        payload = await self._transport.request(
            "PATCH", f"/projects/{path_segment(project_id)}", json=data.to_payload()
        )
        return unwrap(payload, "project", Project)

    async def delete(self, project_id: ProjectId | str) -> None:
        await self._transport.request("DELETE", f"/projects/{path_segment(project_id)}")


__all__ = ["ProjectsApi"]
