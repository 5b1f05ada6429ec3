"""Shared CLI dependency helpers.

Each command runs its gateway calls inside one event loop and one pooled
HTTP session; the container itself is cached for the life of the process.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from functools import lru_cache
from typing import TypeVar

from rd_claims.auth import AuthProvider
from rd_claims.config import AppSettings
from rd_claims.container import ServiceContainer, build_container
from rd_claims.domain import User

T = TypeVar("T")


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    return build_container(AppSettings.from_env())


def reset_container() -> None:
    """Drop the cached container so the next call re-reads the environment."""

    get_container.cache_clear()


def run_session(container: ServiceContainer, work: Awaitable[T]) -> T:
    """Await ``work`` with the container's API client open for the duration."""

    async def _run() -> T:
        async with container.api:
            return await work

    return asyncio.run(_run())


def current_user(container: ServiceContainer) -> User | None:
    with AuthProvider(container.storage) as auth:
        return auth.current_user


__all__ = ["current_user", "get_container", "reset_container", "run_session"]
