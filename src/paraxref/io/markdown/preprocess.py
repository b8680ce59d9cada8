"""Markdown rewrites applied before handing a document to pandoc.

Pandoc does not understand wiki style embeds and links. These are converted to standard markdown so that the
rendered HTML has the shape the reference engines expect: an ``<img>`` for every figure declaration, a
``<blockquote>`` caption after it and ``<a href="...#^figure<id>">`` links for figure references.
"""
from __future__ import annotations

import re

from paraxref.common import EQUATION_REFERENCE_CLASS, equation_anchor_id
from paraxref.equations.patterns import TAG

WIKI_EMBED_RE = re.compile(r"!\[\[(?P<target>[^\]|]+)(?:\|(?P<alias>[^\]]*))?\]\](?:\^figure\S*)?")
WIKI_LINK_RE = re.compile(r"(?<!!)\[\[(?P<target>[^\]|]+)(?:\|(?P<alias>[^\]]*))?\]\]")

EQUATION_REFERENCE_RES = [
    re.compile(rf"\$\\text\{{\((?P<tag>{TAG})\)\}}\$"),  # $\text{(4.13)}$
    re.compile(rf"\$\((?P<tag>{TAG})\)\$"),  # $(4.13)$
]


def _link_target(target: str) -> str:
    return target.strip().replace(" ", "%20")


def convert_wiki_embeds(content: str) -> str:
    """``![[img.png|300]]^figure1`` -> ``![](img.png)``. The figure marker is consumed."""

    def repl(m):
        alias = m.group("alias") or ""
        alt = "" if alias.strip().isdigit() else alias.strip()
        return f"![{alt}]({_link_target(m.group('target'))})"

    return WIKI_EMBED_RE.sub(repl, content)


def convert_wiki_links(content: str) -> str:
    """``[[#^figure1|see]]`` -> ``[see](#^figure1)``. Links without alias show their target."""

    def repl(m):
        target = m.group("target").strip()
        alias = m.group("alias")
        text = alias.strip() if alias else target
        return f"[{text}]({_link_target(target)})"

    return WIKI_LINK_RE.sub(repl, content)


def link_equation_references(content: str) -> str:
    """Turn inline math references like ``$(4.13)$`` into raw HTML equation links before typesetting."""

    def repl(m):
        tag = m.group("tag")
        return (
            f'<a href="#{equation_anchor_id(tag)}" class="{EQUATION_REFERENCE_CLASS}" '
            f'data-equation-number="{tag}">({tag})</a>'
        )

    for pattern in EQUATION_REFERENCE_RES:
        content = pattern.sub(repl, content)
    return content


def preprocess_markdown(content: str, link_equations: bool = False) -> str:
    content = convert_wiki_embeds(content)
    content = convert_wiki_links(content)
    if link_equations:
        content = link_equation_references(content)
    return content
