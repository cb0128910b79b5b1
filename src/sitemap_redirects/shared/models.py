"""Pydantic models for sitemap entries and generated redirects."""

from pathlib import Path

from pydantic import BaseModel, Field


class SitemapEntry(BaseModel):
    """A single <loc> match from a sitemap document."""

    url: str = Field(description="Full URL as it appears in <loc>")
    domain: str = Field(description="Host portion, without a leading www.")
    path: str = Field(description="Everything after the host's trailing slash")


class RedirectRule(BaseModel):
    """A redirect from an anchored URL pattern to a target path."""

    pattern: str = Field(description="Regex source, e.g. ^about/?$")
    target: str = Field(description="Redirect target, e.g. /about")
    permanent: bool = True


class ConversionResult(BaseModel):
    """Summary of one sitemap-to-redirects run."""

    redirect_count: int = Field(description="Number of redirect lines written")
    group_count: int = Field(description="Number of groups, ceil(count / chunk_size)")
    chunk_size: int
    output_path: Path

    def summary(self) -> str:
        """Human-readable line reported to the operator."""
        return (
            f"Generated {self.redirect_count} redirects in "
            f"{self.group_count} groups of {self.chunk_size}"
        )
