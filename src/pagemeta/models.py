"""Data models for pagemeta."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FetchRequest(BaseModel):
    """A single page to scrape.

    The URL is passed through unvalidated; malformed URLs fail in the fetcher.
    """

    url: str


@dataclass
class RawDocument:
    """HTML obtained from one of the fetch paths.

    Transient: lives only for the duration of one scrape call.
    """

    url: str
    html: str
    rendered: bool = False
    status_code: int | None = None


class ExtractionResult(BaseModel):
    """Normalised metadata extracted from a page."""

    model_config = ConfigDict(populate_by_name=True)

    canonical: str
    title: str = ""
    description: str = ""
    images: list[str] = Field(default_factory=list)
    # Lower-cased og:*, twitter:* and description meta keys
    og: dict[str, str] = Field(default_factory=dict)
    json_ld: list[Any] = Field(default_factory=list, alias="jsonLd")
    product: dict[str, Any] | None = None
    rendered: bool = False


class ScrapeResult(BaseModel):
    """Outcome of a scrape call.

    Exactly one of ``data`` (success) or ``error`` (failure) is set.
    Check ``success`` before accessing ``data``.
    """

    success: bool
    url: str
    data: ExtractionResult | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _check_variant(self) -> "ScrapeResult":
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("successful result requires data and no error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("failed result requires an error and no data")
        return self

    @classmethod
    def ok(cls, url: str, data: ExtractionResult) -> "ScrapeResult":
        """Build a successful result."""
        return cls(success=True, url=url, data=data)

    @classmethod
    def fail(cls, url: str, error: str) -> "ScrapeResult":
        """Build a failed result."""
        return cls(success=False, url=url, error=error)

    def to_output(self) -> dict[str, Any]:
        """Flatten into the JSON envelope printed by the CLI.

        Returns:
            ``{"success": true, "url", "canonical", ...}`` on success, or
            ``{"success": false, "url", "error"}`` on failure.
        """
        if not self.success or self.data is None:
            return {"success": False, "url": self.url, "error": self.error}

        output: dict[str, Any] = {"success": True, "url": self.url}
        output.update(self.data.model_dump(by_alias=True))
        return output
