"""Gateway for the ``/claims`` endpoints."""

from __future__ import annotations

from collections.abc import Sequence

from rd_claims.domain import (
    Claim,
    ClaimId,
    ClaimStatus,
    ClaimWithProjects,
    CreateClaimInput,
    LinkProjectsInput,
    ProjectId,
    UpdateClaimInput,
)

from .transport import ApiTransport, path_segment, unwrap, unwrap_list


class ClaimsApi:
    def __init__(self, transport: ApiTransport) -> None:
        self._transport = transport

    async def create(self, data: CreateClaimInput) -> Claim:
        payload = await self._transport.request("POST", "/claims", json=data.to_payload())
        return unwrap(payload, "claim", Claim)

    async def list(self, status: ClaimStatus | str | None = None) -> list[ClaimWithProjects]:
        """Return the current snapshot, optionally filtered by status."""

        payload = await self._transport.request("GET", "/claims", params={"status": status})
        return unwrap_list(payload, "claims", ClaimWithProjects)

    async def get(self, claim_id: ClaimId | str) -> ClaimWithProjects:
        payload = await self._transport.request("GET", f"/claims/{path_segment(claim_id)}")
        return unwrap(payload, "claim", ClaimWithProjects)

    async def update(self, claim_id: ClaimId | str, data: UpdateClaimInput) -> Claim:
        payload = await self._transport.request(
            "PATCH", f"/claims/{path_segment(claim_id)}", json=data.to_payload()
        )
        return unwrap(payload, "claim", Claim)

    async def delete(self, claim_id: ClaimId | str) -> None:
        await self._transport.request("DELETE", f"/claims/{path_segment(claim_id)}")

    async def link_projects(
        self,
        claim_id: ClaimId | str,
        data: LinkProjectsInput | Sequence[ProjectId | str],
    ) -> None:
        if not isinstance(data, LinkProjectsInput):
            data = LinkProjectsInput(project_ids=tuple(ProjectId(item) for item in data))
        await self._transport.request(
            "POST", f"/claims/{path_segment(claim_id)}/projects", json=data.to_payload()
        )

    async def unlink_project(self, claim_id: ClaimId | str, project_id: ProjectId | str) -> None:
        await self._transport.request(
            "DELETE",
            f"/claims/{path_segment(claim_id)}/projects/{path_segment(project_id)}",
        )


__all__ = ["ClaimsApi"]
