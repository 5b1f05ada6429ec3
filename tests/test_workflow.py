from __future__ import annotations

import asyncio
from typing import Any

import pytest

from rd_claims.domain import MOCK_USERS, Claim, ClaimId, ClaimStatus, UpdateClaimInput, User
from rd_claims.workflow import (
    INITIAL_STATUS,
    TERMINAL_STATUSES,
    ClaimWorkflow,
    InvalidTransitionError,
    allowed_transitions,
    can_transition,
)

SUBMITTER = MOCK_USERS["user-1"]
REVIEWER = MOCK_USERS["user-2"]


def _claim(status: ClaimStatus) -> Claim:
    return Claim.model_validate(
        {
            "claimId": "claim-1",
            "companyName": "Acme Ltd",
            "claimPeriod": {"startDate": "2024-01-01", "endDate": "2024-12-31"},
            "amount": 50000,
            "status": status,
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-01T00:00:00Z",
        }
    )


class FakeClaimsApi:
    def __init__(self) -> None:
        self.updates: list[tuple[str, UpdateClaimInput]] = []

    async def update(self, claim_id: ClaimId | str, data: UpdateClaimInput) -> Claim:
        self.updates.append((claim_id, data))
        assert data.status is not None
        return _claim(data.status)


def test_initial_status_is_draft() -> None:
    assert INITIAL_STATUS is ClaimStatus.DRAFT


@pytest.mark.parametrize(
    ("status", "user", "expected"),
    [
        (ClaimStatus.DRAFT, SUBMITTER, (ClaimStatus.SUBMITTED,)),
        (ClaimStatus.DRAFT, REVIEWER, ()),
        (ClaimStatus.DRAFT, None, ()),
        (ClaimStatus.SUBMITTED, SUBMITTER, (ClaimStatus.DRAFT,)),
        (ClaimStatus.SUBMITTED, REVIEWER, (ClaimStatus.DRAFT, ClaimStatus.APPROVED)),
        (ClaimStatus.SUBMITTED, None, (ClaimStatus.DRAFT,)),
        (ClaimStatus.APPROVED, SUBMITTER, ()),
        (ClaimStatus.APPROVED, REVIEWER, ()),
    ],
)
def test_allowed_transitions(status: ClaimStatus, user: User | None, expected: tuple[Any, ...]) -> None:
    assert allowed_transitions(status, user) == expected


def test_terminal_statuses_offer_no_moves() -> None:
    for status in TERMINAL_STATUSES:
        for user in (SUBMITTER, REVIEWER, None):
            assert allowed_transitions(status, user) == ()


def test_status_never_transitions_to_itself() -> None:
    for status in ClaimStatus:
        for user in (SUBMITTER, REVIEWER, None):
            assert not can_transition(status, status, user)


def test_user_without_role_cannot_submit() -> None:
    assert not can_transition(ClaimStatus.DRAFT, ClaimStatus.SUBMITTED, User(user_id="u", name="U"))


def test_change_status_patches_status_only() -> None:
    api = FakeClaimsApi()
    workflow = ClaimWorkflow(api)  # type: ignore[arg-type]

    updated = asyncio.run(
        workflow.change_status(_claim(ClaimStatus.DRAFT), ClaimStatus.SUBMITTED, SUBMITTER)
    )

    assert updated.status is ClaimStatus.SUBMITTED
    assert len(api.updates) == 1
    claim_id, patch = api.updates[0]
    assert claim_id == "claim-1"
    assert patch.to_payload() == {"status": "Submitted"}


def test_reviewer_approves_submitted_claim() -> None:
    api = FakeClaimsApi()
    workflow = ClaimWorkflow(api)  # type: ignore[arg-type]

    updated = asyncio.run(
        workflow.change_status(_claim(ClaimStatus.SUBMITTED), ClaimStatus.APPROVED, REVIEWER)
    )

    assert updated.status is ClaimStatus.APPROVED


def test_disallowed_change_is_rejected_before_any_request() -> None:
    api = FakeClaimsApi()
    workflow = ClaimWorkflow(api)  # type: ignore[arg-type]

    with pytest.raises(InvalidTransitionError, match="allowed: none"):
        asyncio.run(
            workflow.change_status(_claim(ClaimStatus.DRAFT), ClaimStatus.APPROVED, REVIEWER)
        )
    with pytest.raises(InvalidTransitionError, match="anonymous user"):
        asyncio.run(
            workflow.change_status(_claim(ClaimStatus.DRAFT), ClaimStatus.SUBMITTED, None)
        )
    assert api.updates == []
