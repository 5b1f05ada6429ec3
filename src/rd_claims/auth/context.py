"""Process-wide "current user" slot with derived role flags.

The role flags only drive which actions the client offers. They are workflow
guidance, not security: the backend has to enforce status transitions and
roles itself, since nothing here stops a direct API call.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from pydantic import ValidationError

from rd_claims.domain import User, UserRole

from .storage import KeyValueStorage

CURRENT_USER_KEY = "currentUser"

logger = logging.getLogger(__name__)


class AuthContextError(RuntimeError):
    """Raised when the auth context is used outside of an :class:`AuthProvider`."""


def load_user(raw: str | None) -> User | None:
    """Parse a stored user; missing, empty or corrupt values yield ``None``."""

    if not raw:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Discarding unparseable stored user")
        return None
    if data is None:
        return None
    try:
        return User.model_validate(data)
    except ValidationError:
        logger.debug("Discarding malformed stored user")
        return None


def dump_user(user: User) -> str:
    return json.dumps(user.to_payload())


class AuthState:
    """Holds the current user; :meth:`set_current_user` is the only writer."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage
        self._current_user = load_user(storage.get_item(CURRENT_USER_KEY))

    @property
    def current_user(self) -> User | None:
        return self._current_user

    @property
    def is_submitter(self) -> bool:
        user = self._current_user
        return user is not None and user.role == UserRole.SUBMITTER

    @property
    def is_reviewer(self) -> bool:
        user = self._current_user
        return user is not None and user.role == UserRole.REVIEWER

    def set_current_user(self, user: User | None) -> None:
        self._current_user = user
        if user is None:
            self._storage.remove_item(CURRENT_USER_KEY)
        else:
            self._storage.set_item(CURRENT_USER_KEY, dump_user(user))


_active_auth: ContextVar[AuthState | None] = ContextVar("rd_claims_auth", default=None)


@contextmanager
def AuthProvider(storage: KeyValueStorage) -> Iterator[AuthState]:  # noqa: N802
    """Install a fresh :class:`AuthState` for the duration of the block."""

    state = AuthState(storage)
    token = _active_auth.set(state)
    try:
        yield state
    finally:
        _active_auth.reset(token)


def use_auth() -> AuthState:
    state = _active_auth.get()
    if state is None:
        msg = "use_auth must be used within an AuthProvider"
        raise AuthContextError(msg)
    return state


__all__ = [
    "CURRENT_USER_KEY",
    "AuthContextError",
    "AuthProvider",
    "AuthState",
    "dump_user",
    "load_user",
    "use_auth",
]
