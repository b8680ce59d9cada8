"""Builders for MathJax CommonHTML markup as produced in a browser."""


def mjx_glyphs(text: str) -> str:
    return "".join(f'<mjx-c class="mjx-c{ord(char):X}"></mjx-c>' for char in text)


def display_equation(*tags: str, equation_id: str = None) -> str:
    labels = "".join(f"<mjx-mtr><mjx-mtd><mjx-mtext>{mjx_glyphs(tag)}</mjx-mtext></mjx-mtd></mjx-mtr>" for tag in tags)
    id_attr = f' id="{equation_id}"' if equation_id else ""
    return (
        f'<mjx-container class="MathJax" jax="CHTML" display="true"{id_attr}>'
        f'<mjx-math display="true">{mjx_glyphs("x=1")}</mjx-math>'
        f"<mjx-labels><mjx-itable>{labels}</mjx-itable></mjx-labels>"
        "</mjx-container>"
    )


def inline_equation(text: str) -> str:
    return f'<mjx-container class="MathJax" jax="CHTML"><mjx-math>{mjx_glyphs(text)}</mjx-math></mjx-container>'
