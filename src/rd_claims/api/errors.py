"""Normalisation of arbitrary failures into one display message.

Rule, in order:

1. a non-empty ``error`` string in the body of a failed response;
2. the exception's own message, when non-empty;
3. the caller's fallback.

Anything that is not an exception (plain strings included) goes straight to
the fallback.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .exceptions import ApiResponseError
from .transport import decode_json

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
LOAD_CLAIMS_ERROR_MESSAGE = "Failed to load claims"
LOAD_PROJECTS_ERROR_MESSAGE = "Failed to load projects"


def server_message(error: BaseException) -> str | None:
    """Return the backend's structured error message, if the failure carries one."""

    payload: Any
    if isinstance(error, ApiResponseError):
        payload = error.payload
    elif isinstance(error, httpx.HTTPStatusError):
        payload = decode_json(error.response)
    else:
        return None
    if not isinstance(payload, Mapping):
        return None
    message = payload.get("error")
    if isinstance(message, str) and message:
        return message
    return None


def get_error_message(error: object, fallback: str = UNEXPECTED_ERROR_MESSAGE) -> str:
    if not isinstance(error, BaseException):
        return fallback
    return server_message(error) or str(error) or fallback


__all__ = [
    "LOAD_CLAIMS_ERROR_MESSAGE",
    "LOAD_PROJECTS_ERROR_MESSAGE",
    "UNEXPECTED_ERROR_MESSAGE",
    "get_error_message",
    "server_message",
]
