import shutil

from typer.testing import CliRunner

from paraxref.cli_app import app

runner = CliRunner()


def test_annotate_command(doc_dir, tmp_path):
    source = tmp_path / "SLD1_002.md"
    html_file = tmp_path / "SLD1_002.html"
    shutil.copy(doc_dir / "SLD1_002.md", source)
    shutil.copy(doc_dir / "SLD1_002.html", html_file)
    dest = tmp_path / "annotated.html"

    result = runner.invoke(app, ["annotate", str(source), str(html_file), "--output", str(dest)])

    assert result.exit_code == 0, result.output
    text = dest.read_text(encoding="utf-8")
    assert "Figure 2.1: Temperature profile" in text
    assert 'href="#eq-4.13"' in text


def test_annotate_with_pdf_figures(doc_dir, tmp_path):
    html_file = tmp_path / "page.html"
    html_file.write_text(
        "<html><body><div><blockquote><p>a</p></blockquote></div><div><blockquote><p>b</p></blockquote></div>"
        "<div><blockquote><p>c</p></blockquote></div></body></html>",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["annotate", str(doc_dir / "SLD1_002.md"), str(html_file), "--include-pdf"])

    assert result.exit_code == 0, result.output
    text = (tmp_path / "page.annotated.html").read_text(encoding="utf-8")
    assert "Figure 2.3: c" in text
