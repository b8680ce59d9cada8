"""Scan raw document text for figure declarations.

A figure declaration is an embedded image immediately followed by a figure marker::

    ![[diagrams/setup.png]]^figure1
    ![[photo.jpg|300]]^figureCamera

Every declaration gets the next sequence number in document order, independent of its identifier.
"""
from __future__ import annotations

import pathlib
import re
from typing import List

from paraxref.common import FigureRecord, Language
from paraxref.config import logger
from paraxref.exceptions import DocumentReadError
from paraxref.naming import detect_language, get_file_prefix

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "bmp", "svg", "webp")


def build_figure_regex(include_pdf: bool = False) -> re.Pattern:
    extensions = IMAGE_EXTENSIONS + ("pdf",) if include_pdf else IMAGE_EXTENSIONS
    ext_alternation = "|".join(extensions)
    return re.compile(
        rf"!\[\[(?P<image_path>[^\]]+\.(?:{ext_alternation})[^\]]*)\]\]\^figure(?P<figure_id>\S*)",
        re.IGNORECASE,
    )


class FigureScanner:
    def __init__(self, include_pdf: bool = False):
        self.include_pdf = include_pdf
        self._figure_re = build_figure_regex(include_pdf)

    def scan_text(self, content: str, prefix: str, language: Language = Language.ENGLISH) -> List[FigureRecord]:
        figures: List[FigureRecord] = []
        for counter, match in enumerate(self._figure_re.finditer(content), start=1):
            image_path = match.group("image_path").strip()
            figure_id = match.group("figure_id") or ""
            sequence_label = f"{language.label} {prefix}.{counter}"
            figures.append(FigureRecord(sequence_label=sequence_label, id=figure_id, image_path=image_path))
            logger.debug(f"Found figure: {image_path} -> {sequence_label} (ID: {figure_id})")

        return figures

    def scan_document(self, host, path: str) -> List[FigureRecord]:
        """
        Read a document through the host and build its figure table.

        An unreadable document yields an empty table rather than an error, so the caller can register it and
        avoid rescanning on every fragment.

        :param host: Object implementing ``read_document_text(path)``
        :param path: Document path as known to the host
        :return:
        """
        try:
            content = host.read_document_text(path)
        except DocumentReadError as e:
            logger.warning(f"Figure scan failed, registering empty figure table: {e}")
            return []

        prefix = get_file_prefix(pathlib.PurePath(path).stem)
        language = detect_language(content)
        figures = self.scan_text(content, prefix, language)
        logger.debug(f"Found {len(figures)} figures in {path} (language: {language.value}, prefix: {prefix})")
        return figures
