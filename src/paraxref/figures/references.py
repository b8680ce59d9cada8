from __future__ import annotations

import re
from typing import Optional, Sequence
from urllib.parse import unquote

from bs4 import Tag

from paraxref.common import FigureRecord
from paraxref.config import logger

FIGURE_TARGET_RE = re.compile(r"#\^figure([^\s&]*)")


def figure_id_from_href(href: str) -> Optional[str]:
    match = FIGURE_TARGET_RE.search(unquote(href))
    if match is None:
        return None
    return match.group(1)


class FigureReferenceLinker:
    """Replace the text of links pointing at ``#^figure<id>`` with the figure label.

    The lookup uses the link target, never the visible text, so running it again on an already rewritten link
    produces the same result.
    """

    def link(self, fragment: Tag, figures: Sequence[FigureRecord]) -> int:
        by_id = {}
        for figure in figures:
            by_id.setdefault(figure.id, figure)

        links = fragment.find_all("a", href=True)
        if fragment.name == "a" and fragment.get("href"):
            links.insert(0, fragment)

        updated = 0
        for link in links:
            try:
                href = link.get("href", "")
                figure_id = figure_id_from_href(href)
                if figure_id is None:
                    continue

                figure = by_id.get(figure_id)
                if figure is None:
                    logger.debug(f"Could not find figure info for ID: {figure_id}")
                    continue

                link.string = figure.sequence_label
                updated += 1
                logger.debug(f"Updated figure reference: {href} -> {figure.sequence_label}")
            except Exception as e:
                logger.warning(f"Failed to update figure reference: {e}")

        return updated
