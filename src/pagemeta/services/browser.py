"""Browser rendering for JavaScript-heavy pages.

The expensive fallback path: launches headless Chromium through Playwright,
waits for network idle, and captures the rendered HTML. Each render call owns
its browser and always tears it down before returning.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pagemeta.config import DEFAULT_RENDER_TIMEOUT_MS, ScraperConfig
from pagemeta.exceptions import BrowserLaunchError, NavigationTimeoutError, RenderError
from pagemeta.models import RawDocument

if TYPE_CHECKING:
    from playwright.async_api import Browser, BrowserContext, Page

LOGGER = logging.getLogger(__name__)

# Containers typically run Chromium without a usable sandbox
LAUNCH_ARGS = ["--no-sandbox"]


class BrowserManager:
    """Manages a Playwright browser for page rendering.

    Usage:
        async with BrowserManager() as browser:
            document = await browser.fetch_page("https://example.com")
    """

    def __init__(self, timeout_ms: int = DEFAULT_RENDER_TIMEOUT_MS, headless: bool = True):
        """Initialize browser manager.

        Args:
            timeout_ms: Navigation timeout, including the wait for network idle
            headless: Run headless (default True)
        """
        self.timeout_ms = timeout_ms
        self.headless = headless
        self._browser: Browser | None = None
        self._playwright: Any = None

    async def __aenter__(self) -> BrowserManager:
        """Start browser (async context manager entry)."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close browser (async context manager exit)."""
        await self.stop()

    async def start(self) -> None:
        """Start Playwright and launch Chromium.

        Raises:
            BrowserLaunchError: If Playwright is missing or Chromium fails to launch.
        """
        if self._browser is not None:
            return  # Already started

        try:
            from playwright.async_api import async_playwright

            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=self.headless, args=LAUNCH_ARGS)
        except Exception as e:
            # Launch can fail after the driver is up; don't leak it
            await self.stop()
            raise BrowserLaunchError(f"Failed to launch browser: {e}") from e

        LOGGER.debug("Browser started (headless=%s)", self.headless)

    async def stop(self) -> None:
        """Stop the browser and cleanup resources.

        Safe to call multiple times. The Playwright driver is stopped even if
        closing the browser fails.
        """
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        try:
            if browser:
                await browser.close()
        finally:
            if playwright:
                await playwright.stop()
        LOGGER.debug("Browser stopped")

    async def fetch_page(self, url: str) -> RawDocument:
        """Render a page and return its final HTML.

        Args:
            url: URL to render

        Returns:
            RawDocument with rendered=True

        Raises:
            RuntimeError: If the browser has not been started
            NavigationTimeoutError: If the page doesn't reach network idle in time
            RenderError: On any other navigation or rendering failure
        """
        if not self._browser:
            raise RuntimeError("Browser not initialized. Use 'async with BrowserManager()' context manager.")

        from playwright.async_api import TimeoutError as PlaywrightTimeoutError

        context: BrowserContext | None = None
        page: Page | None = None

        try:
            # Fresh context per page for isolation
            context = await self._browser.new_context()
            page = await context.new_page()

            response = await page.goto(url, wait_until="networkidle", timeout=self.timeout_ms)
            html = await page.content()
            status_code = response.status if response else None

        except PlaywrightTimeoutError as e:
            raise NavigationTimeoutError(
                f"Timed out after {self.timeout_ms}ms waiting for network idle on {url}",
                url=url,
            ) from e
        except Exception as e:
            raise RenderError(f"Rendering failed for {url}: {e}", url=url) from e

        finally:
            if page:
                try:
                    await page.close()
                except Exception as e:
                    LOGGER.debug("Error closing page: %s", e)
            if context:
                try:
                    await context.close()
                except Exception as e:
                    LOGGER.debug("Error closing browser context: %s", e)

        LOGGER.debug("Rendered %s: %d chars", url, len(html))
        return RawDocument(url=url, html=html, rendered=True, status_code=status_code)


class RenderFetcher:
    """Render pages with a dedicated browser per call.

    Each fetch launches its own BrowserManager and closes it before
    returning, on success and failure alike. Concurrent fetches share nothing.
    """

    def __init__(self, config: ScraperConfig | None = None):
        """Initialize render fetcher.

        Args:
            config: Scraper configuration (defaults used if not provided)
        """
        self._config = config or ScraperConfig()

    async def fetch(self, url: str) -> RawDocument:
        """Render a URL in a fresh headless browser.

        Raises:
            BrowserLaunchError: If the browser can't be started
            NavigationTimeoutError: If network idle isn't reached in time
            RenderError: On any other rendering failure
        """
        LOGGER.debug("Rendering %s (timeout=%dms)", url, self._config.render_timeout_ms)
        async with BrowserManager(timeout_ms=self._config.render_timeout_ms) as browser:
            return await browser.fetch_page(url)
