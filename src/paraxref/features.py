"""Reference features run by the coordinator on every rendered fragment."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from bs4 import Tag

from .config import ParaxrefSettings, logger
from .equations import EquationAnchorResolver, EquationReferenceLinker, MathAdapter, MathJaxAdapter
from .figures import CaptionAssignmentMatcher, FigureReferenceLinker, FigureScanner
from .registry import ReferenceRegistry


class BaseFeature(ABC):
    def __init__(self, registry: ReferenceRegistry):
        self.registry = registry

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def is_enabled(self, settings: ParaxrefSettings) -> bool:
        pass

    @abstractmethod
    def process(self, fragment: Tag, source_path: str) -> bool:
        """Process a fragment in place. Returns False when the fragment was dropped and not processed."""
        pass

    def on_document_opened(self, path: str) -> None:
        pass

    def on_layout_changed(self, active_path: Optional[str]) -> None:
        pass

    def cleanup(self) -> None:
        pass

    def log(self, message: str) -> None:
        logger.debug(f"[{self.get_name()}] {message}")


class FigureNumberingFeature(BaseFeature):
    def __init__(self, registry: ReferenceRegistry, host, include_pdf: bool = False):
        super().__init__(registry)
        self.host = host
        self.scanner = FigureScanner(include_pdf=include_pdf)
        self.matcher = CaptionAssignmentMatcher()
        self.linker = FigureReferenceLinker()

    def get_name(self) -> str:
        return "FigureNumbering"

    def is_enabled(self, settings: ParaxrefSettings) -> bool:
        return settings.enable_figure_numbering

    def scan(self, path: str):
        """Scan a document and register its table. Must be called with the document lock held."""
        return self.registry.set_figure_table(path, self.scanner.scan_document(self.host, path))

    def process(self, fragment: Tag, source_path: str) -> bool:
        with self.registry.hold(source_path, blocking=False) as acquired:
            if not acquired:
                self.log(f"Processing locked for file: {source_path}")
                return False

            figures = self.registry.figure_table(source_path)
            if figures is None:
                figures = self.scan(source_path)
            if len(figures) == 0:
                return True

            self.log(f"Processing block for figure numbering: {fragment.name}")
            self.matcher.assign(fragment, figures, self.registry.assignments(source_path))
            self.linker.link(fragment, figures)
            return True

    def on_document_opened(self, path: str) -> None:
        self.registry.invalidate(path)
        with self.registry.hold(path):
            self.scan(path)

    def on_layout_changed(self, active_path: Optional[str]) -> None:
        if active_path is None or self.registry.has_figure_table(active_path):
            return
        with self.registry.hold(active_path, blocking=False) as acquired:
            if acquired:
                self.scan(active_path)

    def cleanup(self) -> None:
        self.registry.invalidate()


class EquationReferencesFeature(BaseFeature):
    def __init__(self, registry: ReferenceRegistry, adapter: Optional[MathAdapter] = None):
        super().__init__(registry)
        adapter = adapter or MathJaxAdapter()
        self.resolver = EquationAnchorResolver(adapter)
        self.linker = EquationReferenceLinker(adapter)

    def get_name(self) -> str:
        return "EquationReferences"

    def is_enabled(self, settings: ParaxrefSettings) -> bool:
        return settings.enable_equation_references

    def process(self, fragment: Tag, source_path: str) -> bool:
        for anchor in self.resolver.resolve(fragment, self.registry.anchors(source_path)):
            self.registry.record_anchor(source_path, anchor)

        linked = self.linker.link(fragment, self.registry.anchors(source_path))
        if linked:
            self.log(f"Linked {linked} equation references in {source_path}")
        return True
