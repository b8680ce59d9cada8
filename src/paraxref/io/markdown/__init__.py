from .preprocess import (
    convert_wiki_embeds,
    convert_wiki_links,
    link_equation_references,
    preprocess_markdown,
)

__all__ = ["convert_wiki_embeds", "convert_wiki_links", "link_equation_references", "preprocess_markdown"]
