from __future__ import annotations

from typing import List, Mapping, Optional

from bs4 import Tag

from paraxref.common import EQUATION_REDIRECT_CLASS, REDIRECT_ATTR, EquationAnchor, equation_anchor_id
from paraxref.config import logger
from paraxref.dom import new_tag, root_of

from .adapters import MathAdapter, MathJaxAdapter
from .patterns import recognized_tags

REDIRECT_STYLE = "display:block;width:0;height:0;overflow:hidden;"


def create_redirect_marker(equation: Tag, anchor_id: str, target_id: str) -> Tag:
    """Invisible zero size element standing in for an extra tag of ``equation``, forwarding to its anchor."""
    marker = new_tag(
        equation,
        "span",
        attrs={
            "id": anchor_id,
            "class": EQUATION_REDIRECT_CLASS,
            REDIRECT_ATTR: target_id,
            "aria-hidden": "true",
            "style": REDIRECT_STYLE,
        },
    )
    equation.insert_before(marker)
    return marker


class EquationAnchorResolver:
    """Give tagged display equations navigable anchors.

    The first recognised tag becomes the ``eq-<tag>`` id of the equation node, unless the node already has an
    id. Every further tag on the same equation gets a redirect marker placed right before the equation, unless
    an element with that anchor id already exists in the tree or the tag is already anchored elsewhere in the
    document.
    """

    def __init__(self, adapter: Optional[MathAdapter] = None):
        self.adapter = adapter or MathJaxAdapter()

    def resolve(
        self, fragment: Tag, known_anchors: Optional[Mapping[str, EquationAnchor]] = None
    ) -> List[EquationAnchor]:
        """
        Anchor the display equations of a fragment.

        :param fragment: Rendered fragment
        :param known_anchors: Anchors already resolved for the document, by tag. An extra tag that already points
            at another equation gets no redirect marker.
        :return: Anchors created or confirmed in this fragment
        """
        equations = self.adapter.display_equations(fragment)
        if len(equations) > 0:
            logger.debug(f"Found {len(equations)} display equations")

        known_anchors = known_anchors or {}
        anchors = []
        for equation in equations:
            try:
                anchor = self._anchor_equation(equation, known_anchors)
            except Exception as e:
                logger.warning(f"Failed to anchor equation: {e}")
                continue
            if anchor is not None:
                anchors.append(anchor)

        return anchors

    def _anchor_equation(self, equation: Tag, known_anchors: Mapping[str, EquationAnchor]) -> Optional[EquationAnchor]:
        tags = recognized_tags(self.adapter.tag_texts(equation))
        if len(tags) == 0:
            return None

        primary_tag, alias_tags = tags[0], tags[1:]
        if not equation.get("id"):
            equation["id"] = equation_anchor_id(primary_tag)
            logger.debug(f"Anchor: {equation['id']}")
        anchor_id = equation["id"]

        root = root_of(equation)
        for tag in alias_tags:
            alias_id = equation_anchor_id(tag)
            if alias_id == anchor_id or root.find(id=alias_id) is not None:
                continue
            known = known_anchors.get(tag)
            if known is not None and known.anchor_id != anchor_id:
                logger.debug(f"Tag {tag} already anchored at {known.anchor_id}, no redirect")
                continue
            create_redirect_marker(equation, alias_id, anchor_id)
            logger.debug(f"Redirect anchor: {alias_id} -> {anchor_id}")

        return EquationAnchor(primary_tag=primary_tag, anchor_id=anchor_id, alias_tags=tuple(alias_tags))
