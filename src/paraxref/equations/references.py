"""Turn inline equation references into links to equation anchors.

An inline equation whose text reads ``(4.13)``, ``Eq. 4.13``, ``Equation 4.13`` or ``(Eq. 4.13)`` is wrapped in
``<a class="equation-reference" href="#eq-4.13">``. In exported HTML the navigation script resolves the anchor
when the link is clicked; ``resolve_navigation`` implements the same resolution on a parsed tree.
"""
from __future__ import annotations

from typing import Mapping, Optional

from bs4 import Tag

from paraxref.common import (
    EQUATION_REFERENCE_CLASS,
    REDIRECT_ATTR,
    EquationAnchor,
    NavigationAction,
    NavigationPlan,
    equation_anchor_id,
)
from paraxref.config import logger
from paraxref.dom import new_tag

from .adapters import MathAdapter, MathJaxAdapter
from .patterns import match_reference


def convert_to_equation_link(node: Tag, equation_number: str, anchor: Optional[EquationAnchor] = None) -> Optional[Tag]:
    if node.find_parent("a") is not None:
        return None

    attrs = {
        "href": f"#{equation_anchor_id(equation_number)}",
        "class": EQUATION_REFERENCE_CLASS,
        "data-equation-number": equation_number,
    }
    if anchor is not None:
        attrs["data-equation-target"] = anchor.anchor_id

    link = new_tag(node, "a", attrs=attrs)
    return node.wrap(link)


class EquationReferenceLinker:
    def __init__(self, adapter: Optional[MathAdapter] = None):
        self.adapter = adapter or MathJaxAdapter()

    def link(self, fragment: Tag, anchors: Optional[Mapping[str, EquationAnchor]] = None) -> int:
        """
        Wrap matching inline equations of the fragment in equation links.

        :param fragment: Rendered fragment, after anchors have been resolved
        :param anchors: Known anchors by tag, used to record the canonical target on the link
        :return: Number of links created
        """
        anchors = anchors or {}
        containers = self.adapter.inline_equations(fragment)
        logger.debug(f"Processing {len(containers)} inline equations")

        linked = 0
        for container in containers:
            try:
                if container.find_parent("a") is not None or self.adapter.is_display(container):
                    continue

                text = self.adapter.extract_text(container)
                equation_number = match_reference(text)
                if equation_number is None:
                    continue

                logger.debug(f'Ref: "{text}" -> {equation_anchor_id(equation_number)}')
                if convert_to_equation_link(container, equation_number, anchors.get(equation_number)) is not None:
                    linked += 1
            except Exception as e:
                logger.warning(f"Error processing equation reference: {e}")

        return linked


def resolve_navigation(root: Tag, equation_number: str) -> NavigationPlan:
    """
    Resolve where a click on an equation reference leads.

    The anchor ``eq-<number>`` is looked up in ``root``. A redirect marker is followed exactly one hop. When a
    target exists the plan is to scroll to it, otherwise to fall back to plain hash navigation.
    """
    anchor_id = equation_anchor_id(equation_number)
    target = root.find(id=anchor_id)
    if target is not None and target.get(REDIRECT_ATTR):
        target = root.find(id=target[REDIRECT_ATTR])

    if target is None:
        logger.debug(f"Target equation {anchor_id} not found, trying standard navigation")
        return NavigationPlan(equation_number, anchor_id, None, NavigationAction.HASH)

    return NavigationPlan(equation_number, anchor_id, target.get("id"), NavigationAction.SCROLL)
