"""JSON-over-HTTP transport shared by the claims and projects gateways."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .exceptions import ApiResponseError, ApiTransportError, MalformedResponseError

DEFAULT_API_URL = "http://localhost:3001"

M = TypeVar("M", bound=BaseModel)

logger = logging.getLogger(__name__)


def decode_json(response: httpx.Response) -> Any:
    """Best-effort JSON decode; returns ``None`` for empty or non-JSON bodies."""

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def path_segment(value: str) -> str:
    return quote(str(value), safe="")


class ApiTransport:
    """Issues single request/response exchanges against the backend.

    There is no retry and no batching; every failure is raised as an
    :class:`~rd_claims.api.exceptions.ApiError` subclass.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = (base_url or DEFAULT_API_URL).rstrip("/")
        self._client = client
        self._owns_client = False
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    async def open(self) -> None:
        """Keep one pooled client alive until :meth:`aclose`."""

        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        query = {key: value for key, value in (params or {}).items() if value is not None}
        async with self._client_scope() as client:
            try:
                response = await client.request(method, url, params=query or None, json=json)
                logger.debug("%s %s -> %s", method, url, response.status_code)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                msg = f"Request failed with status code {status}"
                raise ApiResponseError(
                    msg, status_code=status, payload=decode_json(exc.response)
                ) from exc
            except httpx.HTTPError as exc:
                logger.debug("%s %s failed: %s", method, url, exc)
                msg = str(exc) or f"{method} {path} failed"
                raise ApiTransportError(msg) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            msg = f"{method} {path} returned a non-JSON body"
            raise MalformedResponseError(msg) from exc

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client


def unwrap(payload: Any, key: str, model: type[M]) -> M:
    """Extract ``payload[key]`` and validate it as ``model``."""

    if not isinstance(payload, Mapping) or key not in payload:
        msg = f"Response is missing '{key}'"
        raise MalformedResponseError(msg)
    try:
        return model.model_validate(payload[key])
    except ValidationError as exc:
        msg = f"Response field '{key}' is invalid"
        raise MalformedResponseError(msg) from exc


def unwrap_list(payload: Any, key: str, model: type[M]) -> list[M]:
    """Extract ``payload[key]`` as a list of ``model``; an empty list is valid."""

    if not isinstance(payload, Mapping) or not isinstance(payload.get(key), list):
        msg = f"Response is missing list '{key}'"
        raise MalformedResponseError(msg)
    try:
        return [model.model_validate(item) for item in payload[key]]
    except ValidationError as exc:
        msg = f"Response field '{key}' is invalid"
        raise MalformedResponseError(msg) from exc


__all__ = [
    "DEFAULT_API_URL",
    "ApiTransport",
    "decode_json",
    "path_segment",
    "unwrap",
    "unwrap_list",
]
