"""pagemeta: extract titles, Open Graph tags, JSON-LD, images and products from web pages."""

from pagemeta.config import ScraperConfig, load_config
from pagemeta.models import ExtractionResult, FetchRequest, ScrapeResult
from pagemeta.services.scrape import ScrapeService, scrape

__version__ = "0.1.0"

__all__ = [
    "ExtractionResult",
    "FetchRequest",
    "ScrapeResult",
    "ScrapeService",
    "ScraperConfig",
    "__version__",
    "load_config",
    "scrape",
]
