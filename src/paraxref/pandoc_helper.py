import os
import pathlib
import platform
import shutil
import sys
from typing import List

from paraxref.config import logger


def _pandoc_candidates() -> List[pathlib.Path]:
    candidates = []
    on_path = shutil.which("pandoc")
    if on_path is not None:
        candidates.append(pathlib.Path(on_path))

    exe_name = "pandoc.exe" if platform.system() == "Windows" else "pandoc"
    env_bin = "Library/bin" if platform.system() == "Windows" else "bin"
    candidates.append(pathlib.Path(sys.prefix) / env_bin / exe_name)
    return candidates


def ensure_pandoc_path() -> pathlib.Path:
    """
    Make sure pypandoc can run pandoc before the ``render`` pipeline converts markdown.

    pypandoc's own lookup is tried first. Otherwise PATH and the active environment's bin directory are searched
    and the hit is exported as ``PYPANDOC_PANDOC``.

    :return: Path of the pandoc executable in use
    """
    import pypandoc

    try:
        return pathlib.Path(pypandoc.get_pandoc_path())
    except OSError:
        logger.debug("pypandoc could not find pandoc, searching PATH and the environment")

    for candidate in _pandoc_candidates():
        if candidate.exists():
            os.environ["PYPANDOC_PANDOC"] = str(candidate)
            logger.debug(f"Using pandoc at {candidate}")
            return candidate

    raise OSError("Pandoc executable not found. Install pandoc to use the render command.")
