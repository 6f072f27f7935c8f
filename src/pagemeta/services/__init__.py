"""Service layer for pagemeta.

This module provides the core services:
- DocumentFetcher: Static HTML fetching over HTTP
- BrowserManager / RenderFetcher: Playwright rendering fallback
- MetadataExtractor: Title, meta, JSON-LD, image and product extraction
- ScrapeService: Fetch, fall back, and extract in one call
"""

from pagemeta.services.browser import BrowserManager, RenderFetcher
from pagemeta.services.extractor import MetadataExtractor
from pagemeta.services.fetcher import DocumentFetcher
from pagemeta.services.scrape import ScrapeService

__all__ = [
    "BrowserManager",
    "DocumentFetcher",
    "MetadataExtractor",
    "RenderFetcher",
    "ScrapeService",
]
