"""Facade bundling the claims and projects gateways over one transport."""

from __future__ import annotations

from types import TracebackType

import httpx

from .claims import ClaimsApi
from .projects import ProjectsApi
from .transport import DEFAULT_API_URL, ApiTransport


class ApiClient:
    """Backend client.

    Use ``async with ApiClient(...)`` to share one connection pool across
    calls; otherwise each call opens and closes its own ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.transport = ApiTransport(base_url, client=client, timeout=timeout)
        self.claims = ClaimsApi(self.transport)
        self.projects = ProjectsApi(self.transport)

    async def __aenter__(self) -> ApiClient:
        await self.transport.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.transport.aclose()


__all__ = ["ApiClient"]
