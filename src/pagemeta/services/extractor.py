"""Metadata extraction from HTML.

Produces an ExtractionResult from raw HTML: title, description, canonical URL,
Open Graph/Twitter meta map, JSON-LD blocks, representative images, and the
first schema.org product found in JSON-LD.

The same extractor is applied to HTML from the static fetch and from browser
rendering, so it must stay pure: identical HTML and URL give identical output.
"""

import json
import logging
from typing import Any

from bs4 import BeautifulSoup, Tag

from pagemeta.config import DEFAULT_MAX_IMAGES
from pagemeta.models import ExtractionResult

LOGGER = logging.getLogger(__name__)

META_KEY_PREFIXES = ("og:", "twitter:")
JSON_LD_SELECTOR = 'script[type="application/ld+json"]'

# Checked in order, first present wins
OG_IMAGE_KEYS = ("og:image", "og:image:url", "twitter:image")

# Lazy-loading libraries move the real URL out of src
IMG_SOURCE_ATTRS = ("src", "data-src", "data-lazy-src")


def _reject_constant(name: str) -> Any:
    """Refuse NaN and Infinity, which strict JSON does not allow."""
    raise ValueError(f"Invalid JSON constant: {name}")


def try_parse_json(text: str) -> Any | None:
    """Parse JSON text, returning None instead of raising on bad input.

    Args:
        text: JSON source text

    Returns:
        Parsed value, or None if the text is not valid JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        return None


def _attr(tag: Tag | None, name: str) -> str:
    """Get an attribute as a string, or empty string if missing."""
    if tag is None:
        return ""
    value = tag.get(name)
    # Multi-valued attributes (rel, class) come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return value or ""


def _is_product_type(type_value: Any) -> bool:
    """Check whether a JSON-LD @type value names a product."""
    if not type_value:
        return False
    if isinstance(type_value, list):
        return any("product" in str(t).lower() for t in type_value)
    return "product" in str(type_value).lower()


class MetadataExtractor:
    """Extract page metadata from HTML.

    Usage:
        extractor = MetadataExtractor()
        result = extractor.extract(html, "https://example.com/item")
        print(result.title, result.images)
    """

    def __init__(self, max_images: int = DEFAULT_MAX_IMAGES, parser: str = "html.parser"):
        """Initialize extractor.

        Args:
            max_images: Cap on collected image URLs
            parser: BeautifulSoup parser backend
        """
        self.max_images = max_images
        self.parser = parser

    def extract(self, html: str, url: str, rendered: bool = False) -> ExtractionResult:
        """Extract metadata from HTML.

        Args:
            html: HTML content
            url: Original request URL, used as the canonical fallback
            rendered: Whether the HTML came from browser rendering

        Returns:
            ExtractionResult for the page
        """
        soup = BeautifulSoup(html, self.parser)

        og = self.extract_open_graph(soup)
        json_ld = self.extract_json_ld(soup)

        title = self._extract_title(soup)
        description = _attr(soup.select_one('meta[name="description"]'), "content") or _attr(
            soup.select_one('meta[property="og:description"]'), "content"
        )
        canonical = _attr(soup.select_one('link[rel="canonical"]'), "href") or url

        images = self.collect_images(soup, og)
        product = self.find_product(json_ld)

        LOGGER.debug(
            "Extracted %s: %d og keys, %d json-ld blocks, %d images, product=%s",
            url,
            len(og),
            len(json_ld),
            len(images),
            product is not None,
        )

        return ExtractionResult(
            canonical=canonical,
            title=title,
            description=description,
            images=images,
            og=og,
            json_ld=json_ld,
            product=product,
            rendered=rendered,
        )

    def _extract_title(self, soup: BeautifulSoup) -> str:
        """Resolve title: <title> in head, then og:title, then empty."""
        title_tag = soup.select_one("head > title")
        if title_tag is None:
            # html.parser does not synthesize <head>, so a bare top-level
            # <title> is accepted as long as it is not inside body or svg
            title_tag = next(
                (t for t in soup.find_all("title") if t.find_parent(["body", "svg"]) is None),
                None,
            )

        title = title_tag.get_text().strip() if title_tag else ""
        return title or _attr(soup.select_one('meta[property="og:title"]'), "content")

    def extract_open_graph(self, soup: BeautifulSoup) -> dict[str, str]:
        """Collect og:*, twitter:* and description meta tags.

        Keys are lower-cased; a later tag overwrites an earlier one with the
        same key.

        Args:
            soup: Parsed HTML

        Returns:
            Mapping of meta key to content
        """
        og: dict[str, str] = {}
        for tag in soup.find_all("meta"):
            key = (_attr(tag, "property") or _attr(tag, "name")).lower()
            if not (key.startswith(META_KEY_PREFIXES) or key == "description"):
                continue
            og[key] = _attr(tag, "content") or _attr(tag, "value")
        return og

    def extract_json_ld(self, soup: BeautifulSoup) -> list[Any]:
        """Parse every JSON-LD script block, skipping malformed ones.

        Args:
            soup: Parsed HTML

        Returns:
            Parsed JSON-LD values in document order
        """
        blocks: list[Any] = []
        for index, script in enumerate(soup.select(JSON_LD_SELECTOR)):
            text = script.get_text()
            parsed = try_parse_json(text or "{}")
            if parsed is None:
                LOGGER.debug("Skipping unparsable JSON-LD block #%d", index)
                continue
            blocks.append(parsed)
        return blocks

    def collect_images(self, soup: BeautifulSoup, og: dict[str, str]) -> list[str]:
        """Collect representative image URLs.

        Seeds with the Open Graph image and <link rel="image_src">, then adds
        <img> sources in document order until the cap is reached. The result
        is deduplicated preserving first-seen order.

        Args:
            soup: Parsed HTML
            og: Meta map from extract_open_graph

        Returns:
            Image URLs, at most max_images long
        """
        og_image = next((og[key] for key in OG_IMAGE_KEYS if og.get(key)), "")
        link_image = _attr(soup.select_one('link[rel="image_src"]'), "href")
        images = [src for src in (og_image, link_image) if src and not src.startswith("data:")]

        for img in soup.find_all("img"):
            if len(images) >= self.max_images:
                break
            src = next((_attr(img, name) for name in IMG_SOURCE_ATTRS if _attr(img, name)), "")
            if not src or src.startswith("data:"):
                continue
            images.append(src)

        seen: set[str] = set()
        unique: list[str] = []
        for src in images[: self.max_images]:
            if src in seen:
                continue
            seen.add(src)
            unique.append(src)
        return unique

    @staticmethod
    def find_product(json_ld: list[Any]) -> dict[str, Any] | None:
        """Return the first JSON-LD object whose @type mentions "product".

        Args:
            json_ld: Parsed JSON-LD values

        Returns:
            The matching object (same instance as in json_ld), or None
        """
        for item in json_ld:
            if not isinstance(item, dict) or not item:
                continue
            if _is_product_type(item.get("@type")):
                return item
        return None
