import pathlib
from typing import Optional

import typer

from paraxref.config import MathRenderer, load_settings
from paraxref.coordinator import ProcessingCoordinator
from paraxref.host import FileSystemHost
from paraxref.io.html import HTMLAnnotator

app = typer.Typer()


def _make_annotator(settings_file, math_renderer, include_pdf, debug) -> HTMLAnnotator:
    settings = load_settings(settings_file)
    if math_renderer is not None:
        settings.math_renderer = math_renderer
    if include_pdf:
        settings.include_pdf_figures = True
    if debug:
        settings.debug_mode = True
    return HTMLAnnotator(ProcessingCoordinator(FileSystemHost(), settings))


@app.command("annotate")
def annotate(
    source_file: pathlib.Path,
    html_file: pathlib.Path,
    output: Optional[pathlib.Path] = None,
    settings_file: Optional[pathlib.Path] = None,
    math_renderer: Optional[MathRenderer] = None,
    include_pdf: bool = False,
    debug: bool = False,
):
    """Number figures and link equation references in an HTML rendering of SOURCE_FILE."""
    annotator = _make_annotator(settings_file, math_renderer, include_pdf, debug)
    html = html_file.read_text(encoding="utf-8")
    dest = output if output is not None else html_file.with_name(f"{html_file.stem}.annotated.html")
    annotator.export(dest, str(source_file.resolve()), html=html)
    typer.echo(f'Annotated HTML written to "{dest}"')


@app.command("render")
def render(
    source_file: pathlib.Path,
    output: Optional[pathlib.Path] = None,
    settings_file: Optional[pathlib.Path] = None,
    link_equations: bool = False,
    include_pdf: bool = False,
    debug: bool = False,
):
    """Convert SOURCE_FILE to HTML with pandoc and annotate it."""
    annotator = _make_annotator(settings_file, MathRenderer.PANDOC, include_pdf, debug)
    dest = output if output is not None else source_file.with_suffix(".html")
    annotator.export(dest, str(source_file.resolve()), link_equations=link_equations)
    typer.echo(f'Rendered HTML written to "{dest}"')


if __name__ == "__main__":
    app()
