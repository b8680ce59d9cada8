from __future__ import annotations

import pathlib
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Script

from paraxref.common import EQUATION_NAV_JS
from paraxref.config import MathRenderer, logger
from paraxref.coordinator import ProcessingCoordinator
from paraxref.dom import top_level_blocks
from paraxref.io.markdown import preprocess_markdown

NAV_SCRIPT_ID = "paraxref-equation-nav"
MATHJAX_URL = "https://cdnjs.cloudflare.com/ajax/libs/mathjax/3.2.2/es5/tex-mml-chtml.js"


class HTMLAnnotator:
    """Apply the reference engines to a complete HTML page.

    The page body (or its ``div.content`` wrapper) is split into its top level blocks and each block is handed to
    the coordinator as one rendered fragment, the way a live rendering pipeline would.
    """

    def __init__(self, coordinator: ProcessingCoordinator):
        self.coordinator = coordinator

    def annotate(self, html: str, source_path: str, include_nav_script: bool = True) -> str:
        soup = BeautifulSoup(html, "html.parser")
        container = soup.find("div", class_="content") or soup.body or soup

        fragments = top_level_blocks(container)
        logger.debug(f"Annotating {len(fragments)} fragments of {source_path}")
        for fragment in fragments:
            self.coordinator.render_fragment(fragment, source_path)

        if include_nav_script:
            self._inject_nav_script(soup)

        return str(soup)

    def _inject_nav_script(self, soup: BeautifulSoup) -> None:
        if soup.find("script", id=NAV_SCRIPT_ID) is not None:
            return

        script = soup.new_tag("script", attrs={"id": NAV_SCRIPT_ID})
        with open(EQUATION_NAV_JS, "r", encoding="utf-8") as f:
            script.string = Script(f.read())

        target = soup.head or soup.body or soup
        target.append(script)

    def render_markdown(self, md_file: pathlib.Path, link_equations: bool = False) -> str:
        """
        Convert a markdown document to HTML with pandoc and annotate it.

        :param md_file: Markdown source. It is also the document the figure table is scanned from.
        :param link_equations: Convert ``$(4.13)$`` style references to links before typesetting
        :return:
        """
        import pypandoc

        from paraxref.pandoc_helper import ensure_pandoc_path

        ensure_pandoc_path()
        md_file = pathlib.Path(md_file)
        with open(md_file, "r", encoding="utf-8") as f:
            content = f.read()

        html_str = pypandoc.convert_text(
            preprocess_markdown(content, link_equations=link_equations),
            "html",
            format="markdown",
            extra_args=["--mathjax", f"--resource-path={md_file.parent}"],
        )

        title = md_file.stem
        styled_html = f"""<html>
        <head>
        <meta charset="utf-8">
        <title>{title}</title>
        <script type="text/javascript" async src="{MATHJAX_URL}"></script>
        </head>
        <body>
        <div class="content">
        {html_str}
        </div>
        </body>
        </html>"""

        if self.coordinator.settings.math_renderer is not MathRenderer.PANDOC:
            logger.warning("Pandoc output holds TeX math, set math_renderer to 'pandoc' to link equations")

        return self.annotate(styled_html, str(md_file))

    def export(self, dest_file, source_path: str, html: Optional[str] = None, link_equations: bool = False):
        dest_file = pathlib.Path(dest_file)
        if html is None:
            annotated = self.render_markdown(pathlib.Path(source_path), link_equations=link_equations)
        else:
            annotated = self.annotate(html, source_path)

        dest_file.parent.mkdir(exist_ok=True, parents=True)
        with open(dest_file, "w", encoding="utf-8") as f:
            f.write(annotated)

        logger.info(f'Successfully exported annotated HTML to "{dest_file}"')
        return dest_file
