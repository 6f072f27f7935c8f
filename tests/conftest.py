"""Pytest configuration and shared fixtures for pagemeta tests."""

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests with no I/O, network, or browser")
    config.addinivalue_line("markers", "integration: Tests wiring several components with faked I/O")
    config.addinivalue_line(
        "markers",
        "e2e: End-to-end tests with live network or Playwright",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Apply default markers to tests without explicit markers.

    Tests should use explicit markers (@pytest.mark.unit, @pytest.mark.e2e).
    Unmarked tests default to unit.
    """
    for item in items:
        markers = list(item.iter_markers())
        marker_names = [m.name for m in markers]
        if any(m in marker_names for m in ("unit", "integration", "e2e")):
            continue

        item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_scraper_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of configuration tests."""
    monkeypatch.delenv("SCRAPER_USER_AGENT", raising=False)
    monkeypatch.delenv("USE_PLAYWRIGHT", raising=False)


@pytest.fixture
def product_page_html() -> str:
    """A product page with meta tags, JSON-LD and images."""
    return """
    <html>
        <head>
            <title>Blue Widget | Shop</title>
            <meta name="description" content="A very blue widget.">
            <meta property="og:title" content="Blue Widget">
            <meta property="og:image" content="https://shop.example.com/img/widget.jpg">
            <meta name="twitter:card" content="summary_large_image">
            <link rel="canonical" href="https://shop.example.com/widget">
            <script type="application/ld+json">
                {"@context": "https://schema.org", "@type": "BreadcrumbList", "itemListElement": []}
            </script>
            <script type="application/ld+json">
                {"@context": "https://schema.org", "@type": "Product", "name": "Blue Widget",
                 "offers": {"@type": "Offer", "price": "19.99", "priceCurrency": "USD"}}
            </script>
        </head>
        <body>
            <h1>Blue Widget</h1>
            <img src="https://shop.example.com/img/widget.jpg">
            <img src="https://shop.example.com/img/widget-side.jpg">
        </body>
    </html>
    """
