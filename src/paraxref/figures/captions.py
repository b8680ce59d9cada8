from __future__ import annotations

import re
from typing import Optional, Sequence, Set

from bs4 import Tag

from paraxref.common import FIGURE_TEXT, FigureRecord
from paraxref.config import logger
from paraxref.dom import iter_self_and_descendants, replace_inner_html

_LABEL_WORDS = "|".join(FIGURE_TEXT.values())
EXISTING_LABEL_RE = re.compile(rf"^({_LABEL_WORDS})\s+[\w.-]+:")
LABEL_PREFIX_RE = re.compile(rf"^({_LABEL_WORDS})\s+[\d.-]+:\s*", re.IGNORECASE)


def next_available_figure(figures: Sequence[FigureRecord], assigned: Set[str]) -> Optional[FigureRecord]:
    for figure in figures:
        if figure.id not in assigned:
            return figure
    return None


class CaptionAssignmentMatcher:
    """Prefix block quoted captions with figure labels, strictly in document order.

    Captions are the first paragraph of a ``<blockquote>``. Each unlabelled caption consumes the first figure of
    the table whose id is not yet assigned. There is no matching by image identity: the n-th caption gets the
    n-th free figure.
    """

    def assign(self, fragment: Tag, figures: Sequence[FigureRecord], assigned: Set[str]) -> int:
        blockquotes = list(iter_self_and_descendants(fragment, "blockquote"))
        if len(blockquotes) == 0:
            return 0

        logger.debug(f"Found {len(blockquotes)} blockquotes in block")
        labelled = 0
        for blockquote in blockquotes:
            try:
                if self._label_caption(blockquote, figures, assigned):
                    labelled += 1
            except Exception as e:
                logger.warning(f"Failed to label caption: {e}")

        return labelled

    def _label_caption(self, blockquote: Tag, figures: Sequence[FigureRecord], assigned: Set[str]) -> bool:
        paragraph = blockquote.find("p")
        if paragraph is None:
            return False

        original_text = paragraph.get_text()
        if EXISTING_LABEL_RE.match(original_text):
            logger.debug(f'Caption already has figure number, skipping: "{original_text[:50]}"')
            return False

        figure = next_available_figure(figures, assigned)
        if figure is None:
            logger.debug(f'No more figures available for caption: "{original_text[:30]}"')
            return False

        assigned.add(figure.id)

        clean_html = LABEL_PREFIX_RE.sub("", paragraph.decode_contents().strip(), count=1).strip()
        replace_inner_html(paragraph, f"{figure.sequence_label}: {clean_html}")

        logger.debug(f'Assigned {figure.sequence_label} to caption "{original_text[:50]}" (ID: {figure.id})')
        return True
