"""Scraper configuration management."""

import os
from dataclasses import dataclass

from pagemeta.exceptions import ConfigurationError, generate_correlation_id

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; Bot/1.0)"
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.9"
DEFAULT_FETCH_TIMEOUT = 15.0
DEFAULT_RENDER_TIMEOUT_MS = 20000
DEFAULT_MAX_IMAGES = 6


@dataclass(frozen=True)
class ScraperConfig:
    """Immutable scraper configuration.

    Passed to ScrapeService at construction; the service itself never
    reads the environment.
    """

    user_agent: str = DEFAULT_USER_AGENT
    enable_render_fallback: bool = False
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    render_timeout_ms: int = DEFAULT_RENDER_TIMEOUT_MS
    max_images: int = DEFAULT_MAX_IMAGES

    def __post_init__(self) -> None:
        """Validate configuration after initialisation."""
        if self.fetch_timeout <= 0:
            raise ConfigurationError(
                f"fetch_timeout must be positive, got {self.fetch_timeout}",
                correlation_id=generate_correlation_id(),
                context={"fetch_timeout": self.fetch_timeout},
            )
        if self.render_timeout_ms <= 0:
            raise ConfigurationError(
                f"render_timeout_ms must be positive, got {self.render_timeout_ms}",
                correlation_id=generate_correlation_id(),
                context={"render_timeout_ms": self.render_timeout_ms},
            )
        if self.max_images < 1:
            raise ConfigurationError(
                f"max_images must be at least 1, got {self.max_images}",
                correlation_id=generate_correlation_id(),
                context={"max_images": self.max_images},
            )

    @property
    def headers(self) -> dict[str, str]:
        """Request headers sent by the static fetch path."""
        return {
            "User-Agent": self.user_agent,
            "Accept-Language": self.accept_language,
        }


def load_config() -> ScraperConfig:
    """
    Load scraper configuration from environment variables.

    Reads:
        SCRAPER_USER_AGENT: Overrides the default User-Agent header.
        USE_PLAYWRIGHT: "1" enables the headless browser fallback.

    Returns:
        ScraperConfig with validated settings.
    """
    user_agent = os.getenv("SCRAPER_USER_AGENT") or DEFAULT_USER_AGENT
    enable_render_fallback = os.getenv("USE_PLAYWRIGHT") == "1"

    return ScraperConfig(
        user_agent=user_agent,
        enable_render_fallback=enable_render_fallback,
    )
