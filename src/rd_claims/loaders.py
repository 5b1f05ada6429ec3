"""List loaders holding the last fetched snapshot plus loading/error state.

Refreshes are neither coalesced nor cancelled: every call issues its own
request and whichever response resolves last determines the final state.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Generic, TypeVar

from rd_claims.api import (
    LOAD_CLAIMS_ERROR_MESSAGE,
    LOAD_PROJECTS_ERROR_MESSAGE,
    ClaimsApi,
    ProjectsApi,
    get_error_message,
)
from rd_claims.domain import ClaimStatus, ClaimWithProjects, Project

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResourceLoader(Generic[T]):
    def __init__(self, fetch: Callable[[], Awaitable[Sequence[T]]], *, fallback_error: str) -> None:
        self._fetch = fetch
        self._fallback_error = fallback_error
        self.items: tuple[T, ...] = ()
        self.loading = False
        self.error: str | None = None

    async def refresh(self) -> tuple[T, ...]:
        self.loading = True
        try:
            items = await self._fetch()
        except Exception as exc:
            self.error = get_error_message(exc, self._fallback_error)
            logger.warning("Load failed: %s", self.error)
        else:
            self.items = tuple(items)
            self.error = None
        finally:
            self.loading = False
        return self.items


class ClaimsLoader(ResourceLoader[ClaimWithProjects]):
    def __init__(self, claims: ClaimsApi, status: ClaimStatus | None = None) -> None:
        super().__init__(self._load, fallback_error=LOAD_CLAIMS_ERROR_MESSAGE)
        self._claims = claims
        self.status = status

    def set_status(self, status: ClaimStatus | None) -> None:
        """Change the filter; takes effect on the next :meth:`refresh`."""

        self.status = status

    async def _load(self) -> Sequence[ClaimWithProjects]:
        return await self._claims.list(self.status)


class ProjectsLoader(ResourceLoader[Project]):
    def __init__(self, projects: ProjectsApi) -> None:
        super().__init__(projects.list, fallback_error=LOAD_PROJECTS_ERROR_MESSAGE)


__all__ = ["ClaimsLoader", "ProjectsLoader", "ResourceLoader"]
