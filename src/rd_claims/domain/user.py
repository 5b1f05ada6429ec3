"""Mock user identities for the submitter/reviewer workflow."""

from __future__ import annotations

from types import MappingProxyType

from .base import DomainModel
from .enums import UserRole
from .types import UserId


class User(DomainModel):
    """Client-local identity; ``role`` may be absent on hand-edited records."""

    user_id: UserId
    name: str
    role: UserRole | None = None


MOCK_USERS: MappingProxyType[str, User] = MappingProxyType(
    {
        "user-1": User(user_id=UserId("user-1"), name="Alice", role=UserRole.SUBMITTER),
        "user-2": User(user_id=UserId("user-2"), name="Bob", role=UserRole.REVIEWER),
    }
)
