"""Document host abstraction.

The host owns the documents: it reads their text and knows which one is active. The reference engines only
consume it through the ``DocumentHost`` protocol, so the same coordinator runs inside an editor integration or on
plain files.
"""
from __future__ import annotations

import pathlib
from typing import Optional, Protocol, Union

from .exceptions import DocumentReadError


class DocumentHost(Protocol):
    def read_document_text(self, path: str) -> str:
        """Return the raw text of the document, raise DocumentReadError when it cannot be read."""
        ...

    def active_document_path(self) -> Optional[str]:
        ...


class FileSystemHost:
    """Reads documents from disk, relative paths are resolved against ``root_dir``."""

    def __init__(self, root_dir: Union[str, pathlib.Path, None] = None, active_path: Optional[str] = None):
        self.root_dir = pathlib.Path().resolve().absolute() if root_dir is None else pathlib.Path(root_dir)
        self.active_path = active_path

    def resolve(self, path: str) -> pathlib.Path:
        p = pathlib.Path(path)
        if p.is_absolute():
            return p
        return self.root_dir / p

    def read_document_text(self, path: str) -> str:
        file_path = self.resolve(path)
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(path, e) from e

    def active_document_path(self) -> Optional[str]:
        return self.active_path


class InMemoryHost:
    """Host backed by a dict of path -> text. Missing paths behave like unreadable files."""

    def __init__(self, documents=None, active_path: Optional[str] = None):
        self.documents = dict(documents or {})
        self.active_path = active_path
        self.read_count = 0

    def read_document_text(self, path: str) -> str:
        self.read_count += 1
        if path not in self.documents:
            raise DocumentReadError(path, "no such document")
        return self.documents[path]

    def active_document_path(self) -> Optional[str]:
        return self.active_path
