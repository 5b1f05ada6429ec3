"""Exceptions raised by the backend gateway."""

from __future__ import annotations

from typing import Any


class ApiError(RuntimeError):
    """Base class for failed backend exchanges."""


class ApiResponseError(ApiError):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int, payload: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class ApiTransportError(ApiError):
    """Raised when no response was received (connection failure, timeout)."""


class MalformedResponseError(ApiError):
    """Raised when a 2xx response body does not match the expected envelope."""


__all__ = ["ApiError", "ApiResponseError", "ApiTransportError", "MalformedResponseError"]
