"""Shared fixtures for sitemap-redirects tests."""

import pytest


def build_sitemap(paths: list[str], domain: str = "example.com") -> str:
    """Return a minimal urlset document with one <loc> per path."""
    entries = "".join(
        f"  <url>\n    <loc>https://{domain}/{path}</loc>\n  </url>\n" for path in paths
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{entries}"
        "</urlset>\n"
    )


@pytest.fixture
def make_sitemap():
    return build_sitemap


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
