"""Static HTML fetching over plain HTTP.

The fast path: a single GET with a bounded timeout and client identity
headers. No retries here; the scrape service decides whether to fall back to
browser rendering.
"""

import logging

import httpx

from pagemeta.config import ScraperConfig
from pagemeta.exceptions import FetchError, FetchTimeoutError, HTTPStatusError, NetworkError, describe_error
from pagemeta.models import RawDocument

LOGGER = logging.getLogger(__name__)


class DocumentFetcher:
    """Fetch raw HTML with httpx.

    Usage:
        fetcher = DocumentFetcher(ScraperConfig())
        document = await fetcher.fetch("https://example.com")
        print(document.html)
    """

    def __init__(
        self,
        config: ScraperConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize fetcher.

        Args:
            config: Scraper configuration (defaults used if not provided)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self._config = config or ScraperConfig()
        self._transport = transport

    async def fetch(self, url: str) -> RawDocument:
        """Fetch a URL and return its body as text.

        Args:
            url: Absolute URL to fetch

        Returns:
            RawDocument with rendered=False

        Raises:
            FetchTimeoutError: If the request exceeds the configured timeout
            HTTPStatusError: If the server returns a non-2xx status
            NetworkError: On connection or other transport failures
            FetchError: If the URL cannot be requested at all
        """
        LOGGER.debug("Fetching %s (timeout=%ss)", url, self._config.fetch_timeout)

        try:
            async with httpx.AsyncClient(
                headers=self._config.headers,
                timeout=self._config.fetch_timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                html = response.text
                status_code = response.status_code
        except httpx.TimeoutException as e:
            raise FetchTimeoutError(
                f"Timed out after {self._config.fetch_timeout}s fetching {url}: {describe_error(e)}",
                url=url,
            ) from e
        except httpx.HTTPStatusError as e:
            raise HTTPStatusError(
                f"HTTP {e.response.status_code} fetching {url}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network failure fetching {url}: {describe_error(e)}", url=url) from e
        except (httpx.InvalidURL, httpx.HTTPError) as e:
            raise FetchError(f"Request failed for {url}: {describe_error(e)}", url=url) from e

        LOGGER.debug("Fetched %s: HTTP %d, %d chars", url, status_code, len(html))
        return RawDocument(url=url, html=html, rendered=False, status_code=status_code)
