"""Mock authentication: current user, role flags and their persistence."""

from .context import (
    CURRENT_USER_KEY,
    AuthContextError,
    AuthProvider,
    AuthState,
    dump_user,
    load_user,
    use_auth,
)
from .storage import InMemoryStorage, JsonFileStorage, KeyValueStorage

__all__ = [
    "CURRENT_USER_KEY",
    "AuthContextError",
    "AuthProvider",
    "AuthState",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "dump_user",
    "load_user",
    "use_auth",
]
