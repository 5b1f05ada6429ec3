"""Exceptions for the claim status workflow."""

from __future__ import annotations


class LifecycleError(RuntimeError):
    """Raised when a status transition fails validation."""


class InvalidTransitionError(LifecycleError):
    """Raised when the current user may not move a claim to the requested status."""
