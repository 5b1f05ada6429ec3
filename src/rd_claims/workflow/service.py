"""Status changes applied through the backend gateway."""

from __future__ import annotations

import logging

from rd_claims.api import ClaimsApi
from rd_claims.domain import Claim, ClaimStatus, UpdateClaimInput, User

from .exceptions import InvalidTransitionError
from .policy import allowed_transitions, can_transition

logger = logging.getLogger(__name__)


class ClaimWorkflow:
    """Checks the transition policy, then patches the claim's status.

    ``submittedAt``/``reviewedAt`` are left to the backend.
    """

    def __init__(self, claims: ClaimsApi) -> None:
        self._claims = claims

    async def change_status(self, claim: Claim, target: ClaimStatus, user: User | None) -> Claim:
        if not can_transition(claim.status, target, user):
            allowed = ", ".join(allowed_transitions(claim.status, user)) or "none"
            actor = user.name if user is not None else "anonymous user"
            msg = (
                f"Cannot move claim {claim.claim_id} from {claim.status} to {target} "
                f"as {actor}; allowed: {allowed}"
            )
            raise InvalidTransitionError(msg)

        updated = await self._claims.update(claim.claim_id, UpdateClaimInput(status=target))
        logger.info("Claim %s moved from %s to %s", claim.claim_id, claim.status, target)
        return updated


__all__ = ["ClaimWorkflow"]
