import shutil

import pytest
from bs4 import BeautifulSoup

from paraxref import FileSystemHost, ParaxrefSettings, ProcessingCoordinator
from paraxref.io.html import HTMLAnnotator
from paraxref.io.html.exporter import NAV_SCRIPT_ID


@pytest.fixture
def annotator(doc_dir):
    return HTMLAnnotator(ProcessingCoordinator(FileSystemHost(doc_dir)))


def test_annotate_sample_document(annotator, doc_dir):
    html = (doc_dir / "SLD1_002.html").read_text(encoding="utf-8")

    soup = BeautifulSoup(annotator.annotate(html, "SLD1_002.md"), "html.parser")

    captions = [p.get_text() for p in soup.select("div.content > div > blockquote > p")]
    assert captions == [
        "not a caption",
        "Figure 2.1: Temperature profile across a plane wall",
        "Figure 9.9: Wall with convection boundary conditions",
    ]
    assert soup.find("a", class_="internal-link").get_text() == "Figure 2.2"
    assert soup.find("mjx-container", display="true")["id"] == "eq-4.13"
    assert soup.find("a", class_="equation-reference")["href"] == "#eq-4.13"
    assert soup.find("script", id=NAV_SCRIPT_ID) is not None


def test_annotate_is_stable(annotator, doc_dir):
    html = (doc_dir / "SLD1_002.html").read_text(encoding="utf-8")

    once = annotator.annotate(html, "SLD1_002.md")
    twice = annotator.annotate(once, "SLD1_002.md")

    assert twice == once
    assert twice.count(NAV_SCRIPT_ID) == 1


def test_export_writes_file(annotator, doc_dir, tmp_path):
    html = (doc_dir / "SLD1_002.html").read_text(encoding="utf-8")

    dest = annotator.export(tmp_path / "out" / "doc.html", "SLD1_002.md", html=html)

    assert dest.exists()
    assert "Figure 2.1: Temperature profile" in dest.read_text(encoding="utf-8")


@pytest.mark.skipif(shutil.which("pandoc") is None, reason="pandoc is not installed")
def test_render_markdown_with_pandoc(doc_dir):
    settings = ParaxrefSettings(math_renderer="pandoc")
    annotator = HTMLAnnotator(ProcessingCoordinator(FileSystemHost(doc_dir), settings))

    soup = BeautifulSoup(annotator.render_markdown(doc_dir / "SLD1_002.md"), "html.parser")

    captions = [p.get_text().strip() for p in soup.select("blockquote p")]
    assert captions[0].startswith("Figure 2.1:")
    assert soup.find(id="eq-4.13") is not None
