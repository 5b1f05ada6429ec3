"""Claim status lifecycle."""

from .exceptions import InvalidTransitionError, LifecycleError
from .policy import INITIAL_STATUS, TERMINAL_STATUSES, allowed_transitions, can_transition
from .service import ClaimWorkflow

__all__ = [
    "INITIAL_STATUS",
    "TERMINAL_STATUSES",
    "ClaimWorkflow",
    "InvalidTransitionError",
    "LifecycleError",
    "allowed_transitions",
    "can_transition",
]
