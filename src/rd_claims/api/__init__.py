"""Backend REST gateway."""

from .claims import ClaimsApi
from .client import ApiClient
from .errors import (
    LOAD_CLAIMS_ERROR_MESSAGE,
    LOAD_PROJECTS_ERROR_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    get_error_message,
    server_message,
)
from .exceptions import ApiError, ApiResponseError, ApiTransportError, MalformedResponseError
from .projects import ProjectsApi
from .transport import DEFAULT_API_URL, ApiTransport

__all__ = [
    "DEFAULT_API_URL",
    "LOAD_CLAIMS_ERROR_MESSAGE",
    "LOAD_PROJECTS_ERROR_MESSAGE",
    "UNEXPECTED_ERROR_MESSAGE",
    "ApiClient",
    "ApiError",
    "ApiResponseError",
    "ApiTransport",
    "ApiTransportError",
    "ClaimsApi",
    "MalformedResponseError",
    "ProjectsApi",
    "get_error_message",
    "server_message",
]
