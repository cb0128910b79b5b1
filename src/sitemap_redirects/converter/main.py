"""Main converter entry point."""

import argparse
from pathlib import Path

from ..shared.config import settings
from ..shared.models import ConversionResult
from .formatter import RedirectFormatter
from .sitemap import SitemapExtractor
from .writer import RedirectWriter


def convert(
    sitemap_path: Path = settings.sitemap_path,
    output_path: Path = settings.output_path,
    encoding: str = settings.encoding,
) -> ConversionResult:
    """Main conversion workflow.

    Args:
        sitemap_path: Sitemap file to read
        output_path: File to overwrite with the redirect declarations
        encoding: Text encoding for both files
    """
    extractor = SitemapExtractor()
    formatter = RedirectFormatter()
    writer = RedirectWriter(output_path, encoding=encoding)

    # 1. Read the sitemap; a missing or unreadable file fails here
    content = extractor.read(sitemap_path, encoding=encoding)

    # 2. Extract paths in document order
    paths = extractor.extract_paths(content)

    # 3. Format and write
    output = formatter.format(paths)
    return writer.write(output, len(paths))


def main():
    """CLI entry point."""
    arg_parser = argparse.ArgumentParser(
        description=(
            f"Convert {settings.sitemap_path} in the current directory into "
            f"Django redirects written to {settings.output_path}"
        )
    )
    arg_parser.parse_args()

    result = convert()
    print(result.summary())


if __name__ == "__main__":
    main()
