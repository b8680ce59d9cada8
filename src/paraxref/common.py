from __future__ import annotations

import pathlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

EQUATION_NAV_JS = pathlib.Path(__file__).resolve().absolute().parent / "io" / "html" / "js" / "equation_nav.js"

FIGURE_TEXT = {
    "english": "Figure",
    "hebrew": "איור",
}

EQUATION_ANCHOR_PREFIX = "eq-"
EQUATION_REFERENCE_CLASS = "equation-reference"
EQUATION_REDIRECT_CLASS = "equation-anchor-redirect"
REDIRECT_ATTR = "data-redirect-to"


class Language(str, Enum):
    ENGLISH = "english"
    HEBREW = "hebrew"

    @property
    def label(self) -> str:
        return FIGURE_TEXT[self.value]


@dataclass(frozen=True)
class FigureRecord:
    """One figure declaration found in a document.

    Attributes:
        sequence_label: The formatted, human visible label (e.g. "Figure 2.3")
        id: The identifier suffix after "^figure" (possibly empty)
        image_path: The embedded asset path, informational only
    """

    sequence_label: str
    id: str
    image_path: str


@dataclass(frozen=True)
class EquationAnchor:
    """Canonical anchor of a display equation and the extra tags redirecting to it."""

    primary_tag: str
    anchor_id: str
    alias_tags: Tuple[str, ...] = field(default_factory=tuple)


class NavigationAction(str, Enum):
    SCROLL = "scroll"
    HASH = "hash"


@dataclass(frozen=True)
class NavigationPlan:
    number: str
    anchor_id: str
    target_id: Optional[str]
    action: NavigationAction

    @property
    def hash(self) -> str:
        return f"#{self.anchor_id}"


def equation_anchor_id(tag: str) -> str:
    return f"{EQUATION_ANCHOR_PREFIX}{tag}"
