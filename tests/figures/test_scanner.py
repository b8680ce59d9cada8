from paraxref.common import FigureRecord, Language
from paraxref.figures import FigureScanner
from paraxref.host import FileSystemHost, InMemoryHost


def test_sequence_follows_document_order():
    content = "intro ![[a.png]]^figure1 then\n\n![[b.jpg]]^figureX\n"
    figures = FigureScanner().scan_text(content, "3", Language.ENGLISH)

    assert [(f.sequence_label, f.id) for f in figures] == [("Figure 3.1", "1"), ("Figure 3.2", "X")]
    assert figures[0].image_path == "a.png"


def test_identifier_text_does_not_affect_numbering():
    content = "![[z.png]]^figure9\n![[y.png]]^figure\n![[x.PNG]]^figure1"
    figures = FigureScanner().scan_text(content, "1", Language.ENGLISH)

    assert [f.sequence_label for f in figures] == ["Figure 1.1", "Figure 1.2", "Figure 1.3"]
    assert [f.id for f in figures] == ["9", "", "1"]


def test_marker_must_follow_without_whitespace():
    content = "![[a.png]] ^figure1\n![[notes.md]]^figure2\n![[b.svg|200]]^figureB"
    figures = FigureScanner().scan_text(content, "1", Language.ENGLISH)

    assert figures == [FigureRecord("Figure 1.1", "B", "b.svg|200")]


def test_pdf_only_when_enabled():
    content = "![[slides.pdf]]^figure1\n![[a.webp]]^figure2"

    assert [f.id for f in FigureScanner().scan_text(content, "1")] == ["2"]
    assert [f.id for f in FigureScanner(include_pdf=True).scan_text(content, "1")] == ["1", "2"]


def test_hebrew_label():
    figures = FigureScanner().scan_text("![[a.gif]]^figure1", "HW3", Language.HEBREW)
    assert figures[0].sequence_label == "איור HW3.1"


def test_scan_document_uses_file_name_and_language(doc_dir):
    host = FileSystemHost(doc_dir)
    scanner = FigureScanner()

    figures = scanner.scan_document(host, "SLD1_002.md")
    assert [(f.sequence_label, f.id) for f in figures] == [("Figure 2.1", "1"), ("Figure 2.2", "Conv")]

    hebrew = scanner.scan_document(host, "HEB1_HW003.md")
    assert [f.sequence_label for f in hebrew] == ["איור HW3.1"]


def test_unreadable_document_gives_empty_table():
    host = InMemoryHost()
    assert FigureScanner().scan_document(host, "missing.md") == []
    assert host.read_count == 1
