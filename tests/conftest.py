import pathlib

import pytest

from paraxref.dom import parse_fragment
from paraxref.host import InMemoryHost


@pytest.fixture
def top_dir() -> pathlib.Path:
    return pathlib.Path(__file__).resolve().absolute().parent


@pytest.fixture
def files_dir(top_dir):
    return (top_dir / ".." / "files").resolve().absolute()


@pytest.fixture
def doc_dir(files_dir):
    return files_dir / "doc_figures"


@pytest.fixture
def fragment():
    """Parse an HTML snippet and return its first top level tag."""

    def _parse(html: str):
        soup = parse_fragment(html)
        return soup.find(True)

    return _parse


@pytest.fixture
def memory_host():
    content = "\n".join(
        [
            "# Results",
            "![[a.png]]^figure1",
            "> first caption",
            "![[b.jpg]]^figureX",
            "> second caption",
        ]
    )
    return InMemoryHost({"notes/SLD3_003.md": content}, active_path="notes/SLD3_003.md")
