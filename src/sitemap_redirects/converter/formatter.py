"""Render extracted paths as grouped Django redirect declarations."""

import math

from ..shared.models import RedirectRule

CHUNK_SIZE = 50


def group_count(redirect_count: int, chunk_size: int = CHUNK_SIZE) -> int:
    """Number of groups reported for a given redirect count (0 for none)."""
    return math.ceil(redirect_count / chunk_size)


class RedirectFormatter:
    """Build the redirect declaration text for a list of paths.

    The target syntax lives in HEADER, CONTINUATION, FOOTER and render_rule();
    the grouping logic in format() does not depend on them.
    """

    HEADER = "redirects = [\n"
    CONTINUATION = "]\n\nredirects += [\n"
    FOOTER = "]"

    def __init__(self, chunk_size: int = CHUNK_SIZE):
        self.chunk_size = chunk_size

    def build_rule(self, path: str) -> RedirectRule:
        """Map a path to a permanent redirect onto itself."""
        return RedirectRule(pattern=f"^{path}/?$", target=f"/{path}", permanent=True)

    def render_rule(self, rule: RedirectRule) -> str:
        """Render one rule as a single indented urlpatterns entry."""
        return (
            f"  url(r'{rule.pattern}', "
            f"RedirectView.as_view(url='{rule.target}', permanent={rule.permanent})),\n"
        )

    def format(self, paths: list[str]) -> str:
        """Return the complete declaration text.

        A new block is opened after every chunk_size paths, except after the
        last path, so an exact multiple never leaves an empty trailing block.
        """
        parts = [self.HEADER]

        for index, path in enumerate(paths):
            parts.append(self.render_rule(self.build_rule(path)))

            if (index + 1) % self.chunk_size == 0 and index < len(paths) - 1:
                parts.append(self.CONTINUATION)

        parts.append(self.FOOTER)
        return "".join(parts)
