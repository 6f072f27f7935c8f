"""Tests for the exception hierarchy and error context."""

import pytest

from pagemeta.exceptions import (
    BrowserLaunchError,
    ConfigurationError,
    FetchError,
    FetchTimeoutError,
    HTTPStatusError,
    NavigationTimeoutError,
    NetworkError,
    PagemetaError,
    RenderError,
    describe_error,
    generate_correlation_id,
)

URL = "https://example.com/"


class TestPagemetaError:
    """Tests for the base exception."""

    def test_message_includes_correlation_id(self) -> None:
        error = PagemetaError("Something broke", correlation_id="abcd1234")

        assert error.message == "Something broke"
        assert str(error) == "Something broke [correlation_id=abcd1234]"

    def test_generates_correlation_id(self) -> None:
        error = PagemetaError("Something broke")

        assert len(error.correlation_id) == 8
        assert error.context == {}

    def test_correlation_ids_are_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()


class TestFetchErrors:
    """Tests for static fetch errors."""

    @pytest.mark.parametrize("error_cls", [FetchTimeoutError, NetworkError, HTTPStatusError])
    def test_subclasses_fetch_error(self, error_cls: type[FetchError]) -> None:
        assert issubclass(error_cls, FetchError)
        assert issubclass(error_cls, PagemetaError)

    def test_url_added_to_context(self) -> None:
        error = NetworkError("Network failure", url=URL, context={"attempt": 1})

        assert error.context == {"attempt": 1, "url": URL}

    def test_status_code(self) -> None:
        error = HTTPStatusError(f"HTTP 404 fetching {URL}", url=URL, status_code=404)

        assert error.status_code == 404
        assert error.context["status_code"] == 404
        assert error.context["url"] == URL


class TestRenderErrors:
    """Tests for browser rendering errors."""

    def test_provider_defaults_to_playwright(self) -> None:
        error = RenderError("Rendering failed", url=URL)

        assert error.context == {"url": URL, "provider": "playwright"}

    @pytest.mark.parametrize("error_cls", [BrowserLaunchError, NavigationTimeoutError])
    def test_subclasses_render_error(self, error_cls: type[RenderError]) -> None:
        assert issubclass(error_cls, RenderError)

    def test_render_and_fetch_errors_are_distinct(self) -> None:
        assert not issubclass(RenderError, FetchError)
        assert not issubclass(ConfigurationError, FetchError)


class TestDescribeError:
    """Tests for describe_error."""

    def test_uses_message(self) -> None:
        assert describe_error(ValueError("bad value")) == "bad value"

    def test_falls_back_to_class_name(self) -> None:
        assert describe_error(TimeoutError()) == "TimeoutError"
