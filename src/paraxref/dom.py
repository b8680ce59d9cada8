"""Small helpers for working on rendered fragments (BeautifulSoup trees)."""
from __future__ import annotations

import hashlib
from typing import Iterator, List

from bs4 import BeautifulSoup, Tag

SKIPPED_FRAGMENT_CLASSES = ("mod-frontmatter", "mod-header", "frontmatter")


def parse_fragment(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def root_of(node: Tag) -> Tag:
    """Walk up to the top of the tree the node is attached to."""
    root = node
    while root.parent is not None:
        root = root.parent
    return root


def new_tag(node: Tag, name: str, attrs=None) -> Tag:
    """Create a tag through the soup owning ``node`` so the builder settings (e.g. multi valued class) apply."""
    root = root_of(node)
    soup = root if isinstance(root, BeautifulSoup) else BeautifulSoup("", "html.parser")
    return soup.new_tag(name, attrs=attrs or {})


def iter_self_and_descendants(fragment: Tag, name: str) -> Iterator[Tag]:
    if fragment.name == name:
        yield fragment
    yield from fragment.find_all(name)


def has_class(node: Tag, class_name: str) -> bool:
    return class_name in (node.get("class") or [])


def replace_inner_html(node: Tag, html: str) -> None:
    parsed = BeautifulSoup(html, "html.parser")
    node.clear()
    for child in list(parsed.contents):
        node.append(child.extract())


def should_skip_fragment(fragment: Tag) -> bool:
    """Frontmatter, header and code blocks never carry captions or references."""
    if fragment.name == "pre":
        return True
    return any(has_class(fragment, cls) for cls in SKIPPED_FRAGMENT_CLASSES)


def fragment_key(fragment: Tag) -> str:
    """Stable structural key of a fragment, independent of the identity of the tree objects."""
    return hashlib.sha1(str(fragment).encode("utf-8")).hexdigest()


def top_level_blocks(container: Tag) -> List[Tag]:
    return [child for child in container.children if isinstance(child, Tag)]
