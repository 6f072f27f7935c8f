"""Custom exceptions for pagemeta with context support."""

import uuid
from typing import Any


def generate_correlation_id() -> str:
    """
    Generate an 8-character UUID-based correlation ID.

    Returns:
        8-character correlation ID string.
    """
    return str(uuid.uuid4())[:8]


def describe_error(exc: BaseException) -> str:
    """
    Readable text for an exception, falling back to its class name.

    Some exceptions (bare ``TimeoutError()``, several httpx errors) carry an
    empty message.

    Args:
        exc: Exception to describe.

    Returns:
        Non-empty description string.
    """
    return str(exc) or type(exc).__name__


class PagemetaError(Exception):
    """Base exception for pagemeta with context and correlation ID support."""

    def __init__(
        self,
        message: str,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise exception with message, correlation ID, and context.

        Args:
            message: Error message.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        self.message = message
        self.correlation_id = correlation_id or generate_correlation_id()
        self.context = context or {}
        super().__init__(f"{message} [correlation_id={self.correlation_id}]")


class ConfigurationError(PagemetaError):
    """Raised when scraper configuration is invalid."""


class FetchError(PagemetaError):
    """Raised when the static HTTP fetch fails."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise fetch error with URL context.

        Args:
            message: Error message.
            url: Optional URL that was being fetched.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if url is not None:
            context["url"] = url
        super().__init__(message, correlation_id=correlation_id, context=context)


class FetchTimeoutError(FetchError):
    """Raised when the HTTP request does not complete within the timeout."""


class NetworkError(FetchError):
    """Raised on connection, DNS, or other transport-level failures."""


class HTTPStatusError(FetchError):
    """Raised when the server answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        if context is None:
            context = {}
        if status_code is not None:
            context["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, url=url, correlation_id=correlation_id, context=context)


class RenderError(PagemetaError):
    """Raised when headless browser rendering fails."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        provider: str | None = "playwright",
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise render error with URL and provider context.

        Args:
            message: Error message.
            url: Optional URL that was being rendered.
            provider: Browser automation provider (e.g., "playwright").
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if url is not None:
            context["url"] = url
        if provider is not None:
            context["provider"] = provider
        super().__init__(message, correlation_id=correlation_id, context=context)


class BrowserLaunchError(RenderError):
    """Raised when the headless browser cannot be started."""


class NavigationTimeoutError(RenderError):
    """Raised when the page does not reach network idle within the timeout."""
