"""
Per-document state of the reference engines.

Everything the engines remember about a document lives in one ``DocumentState`` keyed by the document path:
the figure table, the set of figure ids already consumed by captions, the keys of fragments that were fully
processed and the equation anchors seen so far. ``invalidate`` drops that state when the document changes.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Set, Tuple

from .common import EquationAnchor, FigureRecord
from .config import logger


@dataclass
class DocumentState:
    """State owned by the registry for a single document.

    Attributes:
        figure_table: Ordered figure records, None until the document has been scanned
        assigned: Figure ids already consumed by caption matching
        processed: Structural keys of fragments that were fully processed
        anchors: Equation anchors by tag (primary and alias tags)
    """

    figure_table: Optional[Tuple[FigureRecord, ...]] = None
    assigned: Set[str] = field(default_factory=set)
    processed: Set[str] = field(default_factory=set)
    anchors: Dict[str, EquationAnchor] = field(default_factory=dict)

    def clear(self) -> None:
        self.figure_table = None
        self.assigned.clear()
        self.processed.clear()
        self.anchors.clear()


class DocumentLocks:
    """One mutex per document key. Documents never block each other."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def _lock_for(self, path: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(path)
            if lock is None:
                lock = threading.Lock()
                self._locks[path] = lock
            return lock

    def is_locked(self, path: str) -> bool:
        return self._lock_for(path).locked()

    @contextmanager
    def hold(self, path: str, blocking: bool = True) -> Iterator[bool]:
        """
        Acquire the lock of a document for the duration of the block.

        Yields whether the lock was acquired. With ``blocking=False`` a held lock yields False immediately,
        the caller is expected to drop its work. The lock is always released on exit, also on error.
        """
        lock = self._lock_for(path)
        acquired = lock.acquire(blocking)
        try:
            yield acquired
        finally:
            if acquired:
                lock.release()


class ReferenceRegistry:
    """Session scoped owner of all per-document reference state."""

    def __init__(self):
        self._documents: Dict[str, DocumentState] = {}
        self.locks = DocumentLocks()

    def state(self, path: str) -> DocumentState:
        doc_state = self._documents.get(path)
        if doc_state is None:
            doc_state = DocumentState()
            self._documents[path] = doc_state
        return doc_state

    def hold(self, path: str, blocking: bool = True):
        return self.locks.hold(path, blocking=blocking)

    def has_figure_table(self, path: str) -> bool:
        return path in self._documents and self._documents[path].figure_table is not None

    def figure_table(self, path: str) -> Optional[Tuple[FigureRecord, ...]]:
        if path not in self._documents:
            return None
        return self._documents[path].figure_table

    def set_figure_table(self, path: str, figures: Iterable[FigureRecord]) -> Tuple[FigureRecord, ...]:
        """Replace the figure table of a document. Must be called with the document lock held."""
        doc_state = self.state(path)
        doc_state.figure_table = tuple(figures)
        doc_state.assigned.clear()
        logger.debug(f"Registered {len(doc_state.figure_table)} figures for {path}")
        return doc_state.figure_table

    def assignments(self, path: str) -> Set[str]:
        return self.state(path).assigned

    def is_processed(self, path: str, key: str) -> bool:
        return path in self._documents and key in self._documents[path].processed

    def mark_processed(self, path: str, key: str) -> None:
        self.state(path).processed.add(key)

    def record_anchor(self, path: str, anchor: EquationAnchor) -> None:
        anchors = self.state(path).anchors
        for tag in (anchor.primary_tag, *anchor.alias_tags):
            anchors.setdefault(tag, anchor)

    def anchors(self, path: str) -> Dict[str, EquationAnchor]:
        if path not in self._documents:
            return {}
        return dict(self._documents[path].anchors)

    def invalidate(self, path: Optional[str] = None) -> None:
        """
        Drop cached state.

        :param path: Document to invalidate, or None to clear all documents
        """
        if path is None:
            for doc_path in list(self._documents.keys()):
                self.invalidate(doc_path)
            logger.info("Cleared all reference caches")
            return

        doc_state = self._documents.get(path)
        if doc_state is None:
            return
        with self.hold(path):
            doc_state.clear()
        logger.debug(f"Invalidated reference cache: {path}")
