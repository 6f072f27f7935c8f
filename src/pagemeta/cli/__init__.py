"""Command-line interface for pagemeta.

Usage:
    pagemeta <url> [--render] [--output FILE]
"""

from pagemeta.cli.scrape import scrape_url as app

__all__ = ["app"]
