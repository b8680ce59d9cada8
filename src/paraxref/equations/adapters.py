"""Recover equation text from rendered math markup.

Typeset equations carry no stable semantic text, so each rendering technology gets an adapter that knows how
to find display and inline equations and how to reconstruct the author's text (e.g. the tag ``(4.13)``) from
the rendered nodes. The anchor and reference engines only talk to the adapter.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import List

from bs4 import Tag

from paraxref.config import MathRenderer, logger

_TEXT_ATTRIBUTES = ("title", "aria-label", "data-original-text")


class MathAdapter(ABC):
    name: str = ""

    @abstractmethod
    def display_equations(self, fragment: Tag) -> List[Tag]:
        pass

    @abstractmethod
    def inline_equations(self, fragment: Tag) -> List[Tag]:
        pass

    @abstractmethod
    def is_display(self, node: Tag) -> bool:
        pass

    @abstractmethod
    def tag_texts(self, equation: Tag) -> List[str]:
        """Texts of the label/tag sub-nodes of a display equation, in label order."""
        pass

    @abstractmethod
    def extract_text(self, node: Tag) -> str:
        """Best effort text of an equation node. Empty string when nothing can be recovered."""
        pass


def _find_with_self(fragment: Tag, name: str, class_name: str) -> List[Tag]:
    found = fragment.find_all(name, class_=class_name)
    if fragment.name == name and class_name in (fragment.get("class") or []):
        found.insert(0, fragment)
    return found


class MathJaxAdapter(MathAdapter):
    """MathJax 3 CommonHTML output (``mjx-container`` trees with per-glyph ``mjx-c`` nodes)."""

    name = MathRenderer.MATHJAX.value

    def display_equations(self, fragment: Tag) -> List[Tag]:
        return [c for c in _find_with_self(fragment, "mjx-container", "MathJax") if self.is_display(c)]

    def inline_equations(self, fragment: Tag) -> List[Tag]:
        return [c for c in _find_with_self(fragment, "mjx-container", "MathJax") if not self.is_display(c)]

    def is_display(self, node: Tag) -> bool:
        return node.get("display") == "true"

    def tag_texts(self, equation: Tag) -> List[str]:
        return [self.extract_text(label) for label in equation.select("mjx-labels mjx-mtext")]

    def extract_text(self, node: Tag) -> str:
        try:
            for attr in _TEXT_ATTRIBUTES:
                value = node.get(attr)
                if value and value.strip():
                    return value.strip()

            result = "".join(self._glyph_chars(node))
            if result:
                return result

            fallback_text = node.get_text().strip()
            if fallback_text:
                return fallback_text

            mjx_math = node.find("mjx-math")
            if mjx_math is not None:
                math_text = mjx_math.get_text().strip()
                if math_text:
                    return math_text

            return ""
        except Exception as e:
            logger.debug(f"Error extracting MathJax text: {e}")
            return ""

    def _glyph_chars(self, node: Tag) -> List[str]:
        chars = []
        glyphs = node.find_all("mjx-c")
        if node.name == "mjx-c":
            glyphs.insert(0, node)

        for glyph in glyphs:
            try:
                char_class = next(
                    (cls for cls in (glyph.get("class") or []) if cls.startswith("mjx-c") and len(cls) > 5), None
                )
                if char_class is not None:
                    char_code = int(char_class[5:], 16)
                    if char_code > 0:
                        chars.append(chr(char_code))
                else:
                    text = glyph.get_text().strip()
                    if text:
                        chars.append(text)
            except (ValueError, OverflowError) as e:
                logger.debug(f"Warning: Failed to extract character: {e}")
        return chars


_TAG_RE = re.compile(r"\\tag\*?\s*\{\s*\(?(?P<tag>[^{}()]*?)\)?\s*\}")
_TEXT_WRAPPER_RE = re.compile(r"\\(?:text|mathrm|textrm|mbox|operatorname)\s*\{([^{}]*)\}")
_DELIMITERS = (("\\(", "\\)"), ("\\[", "\\]"), ("$$", "$$"), ("$", "$"))


class PandocMathAdapter(MathAdapter):
    """Pandoc HTML output (``<span class="math display|inline">`` holding the TeX source)."""

    name = MathRenderer.PANDOC.value

    def display_equations(self, fragment: Tag) -> List[Tag]:
        return [s for s in _find_with_self(fragment, "span", "math") if self.is_display(s)]

    def inline_equations(self, fragment: Tag) -> List[Tag]:
        return [s for s in _find_with_self(fragment, "span", "math") if not self.is_display(s)]

    def is_display(self, node: Tag) -> bool:
        return "display" in (node.get("class") or [])

    def tag_texts(self, equation: Tag) -> List[str]:
        source = equation.get_text()
        # \tag*{x} prints x without parentheses; both forms name the same tag
        return [f"({m.group('tag').strip()})" for m in _TAG_RE.finditer(source)]

    def extract_text(self, node: Tag) -> str:
        for attr in _TEXT_ATTRIBUTES:
            value = node.get(attr)
            if value and value.strip():
                return value.strip()

        text = node.get_text().strip()
        for start, end in _DELIMITERS:
            if text.startswith(start) and text.endswith(end) and len(text) >= len(start) + len(end):
                text = text[len(start) : len(text) - len(end)].strip()
                break

        text = _TEXT_WRAPPER_RE.sub(lambda m: m.group(1), text)
        text = text.replace("\\,", " ").replace("\\ ", " ").replace("~", " ")
        return re.sub(r"\s+", " ", text).strip()


def get_math_adapter(renderer=MathRenderer.MATHJAX) -> MathAdapter:
    renderer = MathRenderer(renderer)
    if renderer is MathRenderer.PANDOC:
        return PandocMathAdapter()
    return MathJaxAdapter()
