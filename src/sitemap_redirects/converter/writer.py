"""Persist generated redirects to disk."""

from pathlib import Path

from ..shared.config import settings
from ..shared.models import ConversionResult
from .formatter import CHUNK_SIZE, group_count


class RedirectWriter:
    """Write the formatted redirect text to a single output file."""

    def __init__(self, output_path: Path = settings.output_path, encoding: str = settings.encoding):
        self.output_path = Path(output_path)
        self.encoding = encoding

    def write(self, text: str, redirect_count: int) -> ConversionResult:
        """Overwrite the output file with text and return the run summary.

        OSError from the filesystem propagates unchanged.
        """
        self.output_path.write_text(text, encoding=self.encoding, newline="")

        return ConversionResult(
            redirect_count=redirect_count,
            group_count=group_count(redirect_count),
            chunk_size=CHUNK_SIZE,
            output_path=self.output_path,
        )
