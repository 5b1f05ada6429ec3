"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from rd_claims.api import ApiClient
from rd_claims.auth import JsonFileStorage, KeyValueStorage
from rd_claims.config import AppSettings
from rd_claims.workflow import ClaimWorkflow

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates services built from one set of settings."""

    settings: AppSettings
    api: ApiClient
    storage: KeyValueStorage
    workflow: ClaimWorkflow


def build_container(
    settings: AppSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
    storage: KeyValueStorage | None = None,
) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    api = ApiClient(
        resolved_settings.api_url,
        client=http_client,
        timeout=resolved_settings.http_timeout,
    )
    resolved_storage = storage or JsonFileStorage(resolved_settings.state_file)
    logger.debug(
        "Container built for %s against %s",
        resolved_settings.environment,
        api.transport.base_url,
    )
    return ServiceContainer(
        settings=resolved_settings,
        api=api,
        storage=resolved_storage,
        workflow=ClaimWorkflow(api.claims),
    )


__all__ = ["ServiceContainer", "build_container"]
