"""Scrape command."""

import asyncio
import dataclasses
import json
from pathlib import Path

import click

from pagemeta import __version__
from pagemeta.cli._common import configure_logging, load_env_file
from pagemeta.config import load_config
from pagemeta.services.scrape import scrape


@click.command("pagemeta", help="Extract page metadata from a URL and print it as JSON.")
@click.argument("url")
@click.option(
    "--render/--no-render",
    default=None,
    help="Fall back to headless browser rendering when the plain fetch fails. Defaults to USE_PLAYWRIGHT=1.",
)
@click.option(
    "--user-agent",
    type=str,
    default=None,
    help="User-Agent header for the plain fetch. Also reads SCRAPER_USER_AGENT env.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Write the JSON result to a file instead of stdout.",
)
@click.option("--compact", is_flag=True, default=False, help="Print JSON on a single line.")
@click.option(
    "--fail-on-error",
    is_flag=True,
    default=False,
    help="Exit with status 1 when the scrape fails (the JSON result is still printed).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging on stderr.")
@click.version_option(__version__, prog_name="pagemeta")
def scrape_url(
    url: str,
    render: bool | None,
    user_agent: str | None,
    output: Path | None,
    compact: bool,
    fail_on_error: bool,
    verbose: bool,
) -> None:
    """Scrape a single URL and print its metadata.

    Output is a JSON object with "success" and either the extracted fields
    (url, canonical, title, description, images, og, jsonLd, product,
    rendered) or an "error" message.

    Examples:
        pagemeta https://example.com
        pagemeta https://example.com --compact
        pagemeta https://spa-site.com --render
        pagemeta https://example.com --output meta.json
        USE_PLAYWRIGHT=1 pagemeta https://spa-site.com
    """
    configure_logging(verbose=verbose)
    load_env_file()

    config = load_config()
    overrides: dict[str, object] = {}
    if render is not None:
        overrides["enable_render_fallback"] = render
    if user_agent:
        overrides["user_agent"] = user_agent
    if overrides:
        config = dataclasses.replace(config, **overrides)

    result = asyncio.run(scrape(url, config))
    payload = json.dumps(result.to_output(), indent=None if compact else 2, ensure_ascii=False, allow_nan=False)

    if output:
        output.write_text(payload + "\n", encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(payload)

    if fail_on_error and not result.success:
        raise SystemExit(1)
