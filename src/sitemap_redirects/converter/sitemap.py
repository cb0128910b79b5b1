"""Sitemap reading and URL path extraction."""

import re
from pathlib import Path

from ..shared.config import settings
from ..shared.models import SitemapEntry


class SitemapExtractor:
    """Extract URL paths from the <loc> entries of a sitemap document.

    Extraction is pattern-based: the document is never parsed as XML, so
    malformed markup elsewhere is ignored rather than rejected.
    """

    # Groups: full URL, domain, path. The path must be non-empty, so a bare
    # "https://example.com/" entry does not match.
    LOC_PATTERN = re.compile(r"<loc>(https?://(?:www\.)?([^/]+)/([^<]+))</loc>")

    def read(self, path: Path = settings.sitemap_path, encoding: str = settings.encoding) -> str:
        """Read the whole sitemap file into memory."""
        return Path(path).read_text(encoding=encoding)

    def extract_entries(self, text: str) -> list[SitemapEntry]:
        """Return every matching <loc> entry in document order."""
        return [
            SitemapEntry(url=match.group(1), domain=match.group(2), path=match.group(3))
            for match in self.LOC_PATTERN.finditer(text)
        ]

    def extract_paths(self, text: str) -> list[str]:
        """Return the path portion of every matching <loc> entry.

        Duplicates are kept; an input with no matches yields [].
        """
        return [entry.path for entry in self.extract_entries(text)]
