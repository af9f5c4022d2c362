# sitepull/core/http.py
"""
HTTP client factory for content store APIs.

Usage:
    from sitepull.core.http import api_client, raise_for_status

    with api_client("https://abc123.api.sanity.io/v1", api_key=token) as client:
        response = client.get("/data/query/production", params={"query": "*"})
        raise_for_status(response, provider="sanity", endpoint="/data/query")

Errors from httpx are converted into structured APIError subclasses so
callers handle one error family regardless of the failure mode.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Generator, Optional

import httpx

from sitepull.logging.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


@dataclass
class APIError(Exception):
    """
    Structured API error with details.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if available)
        provider: API provider name (e.g., "sanity")
        endpoint: API endpoint that failed
        details: Additional error details from the API response
        original_error: The original exception that caused this error
    """

    message: str
    status_code: Optional[int] = None
    provider: Optional[str] = None
    endpoint: Optional[str] = None
    details: Optional[str] = None
    original_error: Optional[Exception] = None

    def __str__(self) -> str:
        parts = [self.message]

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        if self.details:
            parts.append(f"- {self.details}")

        return " ".join(parts)


class AuthenticationError(APIError):
    """Raised when API authentication fails."""

    pass


class RateLimitError(APIError):
    """Raised when API rate limit is exceeded."""

    pass


class ResourceNotFoundError(APIError):
    """Raised when the project or dataset doesn't exist."""

    pass


# =============================================================================
# Client Factory
# =============================================================================

DEFAULT_TIMEOUT = 60.0

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


def create_api_client(
    base_url: str,
    api_key: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> httpx.Client:
    """
    Create a configured HTTP client.

    Args:
        base_url: Base URL for the API
        api_key: Bearer token (optional; public datasets need none)
        timeout: Request timeout in seconds
        headers: Additional headers to include
        **kwargs: Additional arguments passed to httpx.Client (e.g. transport)
    """
    final_headers = dict(DEFAULT_HEADERS)
    if api_key:
        final_headers["Authorization"] = f"Bearer {api_key}"
    if headers:
        final_headers.update(headers)

    client = httpx.Client(
        base_url=base_url,
        headers=final_headers,
        timeout=timeout,
        **kwargs,
    )
    logger.debug(f"Created HTTP client for {base_url} (timeout={timeout}s)")
    return client


@contextmanager
def api_client(
    base_url: str,
    api_key: Optional[str] = None,
    **kwargs: Any,
) -> Generator[httpx.Client, None, None]:
    """Context manager for an HTTP client with automatic cleanup."""
    client = create_api_client(base_url, api_key, **kwargs)
    try:
        yield client
    finally:
        client.close()


# =============================================================================
# Error Handling
# =============================================================================


def _error_details(response: httpx.Response) -> Optional[str]:
    try:
        error_data = response.json()
    except ValueError:
        return response.text[:200] if response.text else None

    if not isinstance(error_data, dict):
        return None
    error = error_data.get("error")
    if isinstance(error, dict):
        return error.get("description") or error.get("message")
    return error_data.get("message") or error


def handle_api_error(
    exc: Exception,
    provider: str = "unknown",
    endpoint: str = "",
) -> APIError:
    """Convert an httpx exception to a structured APIError."""
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        details = _error_details(exc.response)

        if status_code in (401, 403):
            error_cls, message = AuthenticationError, f"{provider} authentication failed"
        elif status_code == 429:
            error_cls, message = RateLimitError, f"{provider} rate limit exceeded"
        elif status_code == 404:
            error_cls, message = ResourceNotFoundError, f"{provider} resource not found"
        else:
            error_cls, message = APIError, f"{provider} API request failed"

        return error_cls(
            message=message,
            status_code=status_code,
            provider=provider,
            endpoint=endpoint,
            details=details,
            original_error=exc,
        )

    if isinstance(exc, httpx.ConnectError):
        return APIError(
            message=f"Failed to connect to {provider}",
            provider=provider,
            endpoint=endpoint,
            details=str(exc),
            original_error=exc,
        )

    if isinstance(exc, httpx.TimeoutException):
        return APIError(
            message=f"{provider} request timed out",
            provider=provider,
            endpoint=endpoint,
            details="Consider increasing the timeout for this operation",
            original_error=exc,
        )

    return APIError(
        message=f"{provider} request failed: {exc}",
        provider=provider,
        endpoint=endpoint,
        original_error=exc,
    )


def raise_for_status(
    response: httpx.Response,
    provider: str = "unknown",
    endpoint: str = "",
) -> None:
    """Raise the matching APIError if the response indicates failure."""
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise handle_api_error(exc, provider=provider, endpoint=endpoint) from exc


__all__ = [
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "ResourceNotFoundError",
    "create_api_client",
    "api_client",
    "handle_api_error",
    "raise_for_status",
]
