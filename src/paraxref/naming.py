import re

from .common import Language

_PREFIX_RE = re.compile(r"[A-Z]+\d+_([A-Z]*\d+)", re.IGNORECASE)
_PREFIX_PARTS_RE = re.compile(r"^(?P<letters>\D*)(?P<digits>\d+)$")
_HEADING_RE = re.compile(r"^#+\s+(.+)$", re.MULTILINE)
_HEBREW_RE = re.compile(r"[\u0590-\u05FF]")


def get_file_prefix(file_name: str) -> str:
    """
    Extract the figure numbering prefix from a file base name.

    "SLD1_002" -> "2", "IRB1_HW003" -> "HW3". Leading zeros are removed from the numeric tail while the
    leading letters are kept. Names that do not follow the pattern, or whose prefix is empty after stripping,
    fall back to "1".

    :param file_name: Base name of the document, without extension
    :return:
    """
    match = _PREFIX_RE.search(file_name)
    if match is None:
        return "1"

    parts = _PREFIX_PARTS_RE.match(match.group(1))
    if parts is None:
        return "1"

    prefix = parts.group("letters") + parts.group("digits").lstrip("0")
    return prefix or "1"


def detect_language(content: str) -> Language:
    """Classify the document language from the first character of its first heading."""
    heading = _HEADING_RE.search(content)
    if heading is None:
        return Language.ENGLISH

    heading_text = heading.group(1).strip()
    if heading_text and _HEBREW_RE.match(heading_text[0]):
        return Language.HEBREW
    return Language.ENGLISH


def is_hebrew_content(content: str) -> bool:
    return detect_language(content) is Language.HEBREW
