"""Role-gated claim status transitions.

``Draft -> Submitted -> Approved``. A submitter submits drafts, a reviewer
approves submissions, and anyone may send a submitted claim back to draft.
``Approved`` is terminal. This is client-side workflow guidance only; the
backend's update endpoint accepts any status and must enforce the rules
itself.
"""

from __future__ import annotations

from types import MappingProxyType

from rd_claims.domain import ClaimStatus, User, UserRole

INITIAL_STATUS = ClaimStatus.DRAFT
TERMINAL_STATUSES = frozenset({ClaimStatus.APPROVED})

# (from, to) -> role required; ``None`` means any actor, logged in or not.
_TRANSITIONS: MappingProxyType[tuple[ClaimStatus, ClaimStatus], UserRole | None] = (
    MappingProxyType(
        {
            (ClaimStatus.DRAFT, ClaimStatus.SUBMITTED): UserRole.SUBMITTER,
            (ClaimStatus.SUBMITTED, ClaimStatus.APPROVED): UserRole.REVIEWER,
            (ClaimStatus.SUBMITTED, ClaimStatus.DRAFT): None,
        }
    )
)


def allowed_transitions(status: ClaimStatus, user: User | None) -> tuple[ClaimStatus, ...]:
    """Target statuses ``user`` may move a claim in ``status`` to, in lifecycle order."""

    return tuple(target for target in ClaimStatus if can_transition(status, target, user))


def can_transition(status: ClaimStatus, target: ClaimStatus, user: User | None) -> bool:
    key = (status, target)
    if key not in _TRANSITIONS:
        return False
    required = _TRANSITIONS[key]
    if required is None:
        return True
    return user is not None and user.role == required


__all__ = [
    "INITIAL_STATUS",
    "TERMINAL_STATUSES",
    "allowed_transitions",
    "can_transition",
]
