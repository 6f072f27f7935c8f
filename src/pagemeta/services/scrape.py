"""Scrape service: fetch a page and extract its metadata.

Pipeline:
    1. Static fetch over HTTP, then metadata extraction.
    2. If that fails and render fallback is enabled, render the page in a
       headless browser, then run the same extraction.
    3. Otherwise (or if rendering also fails) return a failed result carrying
       the static fetch error text.

Rendering is only attempted after the static path has definitively failed,
never concurrently with it. Extraction runs in a worker thread so parsing a
large page does not block the event loop.
"""

import asyncio
import logging
from typing import Protocol

from pagemeta.config import ScraperConfig, load_config
from pagemeta.exceptions import describe_error
from pagemeta.models import FetchRequest, RawDocument, ScrapeResult
from pagemeta.services.browser import RenderFetcher
from pagemeta.services.extractor import MetadataExtractor
from pagemeta.services.fetcher import DocumentFetcher

LOGGER = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Anything that can turn a URL into a RawDocument."""

    async def fetch(self, url: str) -> RawDocument: ...


class ScrapeService:
    """Scrape a single URL and extract normalised metadata.

    Usage:
        # Static fetch only
        service = ScrapeService()
        result = await service.scrape("https://example.com")

        # With headless browser fallback
        service = ScrapeService(ScraperConfig(enable_render_fallback=True))
        result = await service.scrape("https://spa.example.com")

    Returns:
        ScrapeResult with success=True and data, or success=False and error.
        Check result.success before accessing result.data. scrape() never
        raises for fetch or extraction failures.
    """

    def __init__(
        self,
        config: ScraperConfig | None = None,
        fetcher: Fetcher | None = None,
        renderer: Fetcher | None = None,
        extractor: MetadataExtractor | None = None,
    ):
        """Initialize scrape service.

        Args:
            config: Scraper configuration (defaults used if not provided)
            fetcher: Static fetcher (DocumentFetcher created if not provided)
            renderer: Render fetcher (RenderFetcher created if not provided)
            extractor: Metadata extractor (created if not provided)
        """
        self._config = config or ScraperConfig()
        self._fetcher = fetcher or DocumentFetcher(self._config)
        self._renderer = renderer or RenderFetcher(self._config)
        self._extractor = extractor or MetadataExtractor(max_images=self._config.max_images)

    async def scrape(self, url: str | FetchRequest) -> ScrapeResult:
        """Scrape a URL and return its metadata.

        Args:
            url: Absolute URL to scrape, or a FetchRequest

        Returns:
            ScrapeResult; on failure, error holds the static fetch error text
        """
        if isinstance(url, FetchRequest):
            url = url.url

        try:
            document = await self._fetcher.fetch(url)
            data = await asyncio.to_thread(self._extractor.extract, document.html, url, rendered=False)
            return ScrapeResult.ok(url, data)
        except Exception as e:
            static_error = e

        if not self._config.enable_render_fallback:
            LOGGER.error(f"Scrape failed for {url}: {static_error}")
            return ScrapeResult.fail(url, describe_error(static_error))

        LOGGER.info(f"Static fetch failed for {url}, retrying with browser rendering")
        try:
            document = await self._renderer.fetch(url)
            data = await asyncio.to_thread(self._extractor.extract, document.html, url, rendered=True)
            return ScrapeResult.ok(url, data)
        except Exception as e:
            # The caller sees the static error; the render error is only logged
            LOGGER.warning(f"Render fallback failed for {url}: {e}")

        LOGGER.error(f"Scrape failed for {url}: {static_error}")
        return ScrapeResult.fail(url, describe_error(static_error))


async def scrape(url: str | FetchRequest, config: ScraperConfig | None = None) -> ScrapeResult:
    """Scrape a URL using configuration from the environment.

    Args:
        url: Absolute URL to scrape, or a FetchRequest
        config: Optional explicit configuration; load_config() if not provided

    Returns:
        ScrapeResult for the URL
    """
    service = ScrapeService(config or load_config())
    return await service.scrape(url)
