"""Equation tag grammar.

A tag is an optional ``*``, up to two category letters, a number with dot or hyphen separated components and an
optional trailing letter: ``4.13``, ``4-13``, ``HW3.8``, ``L2.5``, ``4.13a``, ``*7``.
The ``*`` marks an unnumbered-style tag and is not part of the anchor identifier.
"""
import re
from typing import List, Optional

TAG = r"[A-Za-z]{0,2}\d+(?:[.\-]\d+)*[A-Za-z]?"

TAG_PATTERNS = [
    re.compile(rf"^\(\*?(?P<tag>{TAG})\)$"),
]

REFERENCE_PATTERNS = [
    re.compile(rf"^\(\*?(?P<tag>{TAG})\)$"),  # (4.13) or (HW3-8)
    re.compile(rf"^Eq\.?\s*(?P<tag>{TAG})$", re.IGNORECASE),  # Eq. 4.13
    re.compile(rf"^Equation\s*(?P<tag>{TAG})$", re.IGNORECASE),  # Equation 4.13
    re.compile(rf"^\(Eq\.?\s*(?P<tag>{TAG})\)$", re.IGNORECASE),  # (Eq. 4.13)
]


def _first_match(patterns, text: str) -> Optional[str]:
    text = text.strip()
    for pattern in patterns:
        match = pattern.match(text)
        if match:
            return match.group("tag")
    return None


def match_tag(text: str) -> Optional[str]:
    return _first_match(TAG_PATTERNS, text)


def match_reference(text: str) -> Optional[str]:
    return _first_match(REFERENCE_PATTERNS, text)


def recognized_tags(texts) -> List[str]:
    tags = []
    for text in texts:
        tag = match_tag(text)
        if tag is not None:
            tags.append(tag)
    return tags
