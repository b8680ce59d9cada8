"""Logging and settings for paraxref."""
from __future__ import annotations

import json
import logging
import pathlib
from enum import Enum
from typing import Union

from pydantic import BaseModel

logger = logging.getLogger("paraxref")


class MathRenderer(str, Enum):
    MATHJAX = "mathjax"
    PANDOC = "pandoc"


class ParaxrefSettings(BaseModel):
    """User facing toggles for the reference engines."""

    enable_figure_numbering: bool = True
    enable_equation_references: bool = True
    debug_mode: bool = False
    include_pdf_figures: bool = False
    math_renderer: MathRenderer = MathRenderer.MATHJAX


def set_debug_mode(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


def load_settings(path: Union[str, pathlib.Path, None] = None) -> ParaxrefSettings:
    """
    Load settings from a JSON file. Keys missing from the file fall back to the defaults.

    :param path: Path to the settings file. A missing file yields the default settings.
    :return:
    """
    if path is None:
        return ParaxrefSettings()

    path = pathlib.Path(path)
    if not path.exists():
        logger.debug(f'Settings file "{path}" not found, using defaults')
        return ParaxrefSettings()

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    settings = ParaxrefSettings(**data)
    if settings.debug_mode:
        set_debug_mode(True)
    return settings


def save_settings(settings: ParaxrefSettings, path: Union[str, pathlib.Path]) -> None:
    path = pathlib.Path(path)
    path.parent.mkdir(exist_ok=True, parents=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings.model_dump(mode="json"), f, indent=2)
    logger.info(f'Saved settings to "{path}"')
