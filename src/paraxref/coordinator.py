"""
Entry point used by a rendering pipeline.

The pipeline calls ``render_fragment`` once per rendered fragment, in any order and possibly more than once for
the same fragment. The coordinator routes each fragment through the enabled features, drops fragments that are
already processed and keeps the per-document caches in sync with host events.
"""
from __future__ import annotations

from typing import List, Optional

from bs4 import Tag

from .config import ParaxrefSettings, logger, set_debug_mode
from .dom import fragment_key, should_skip_fragment
from .equations import get_math_adapter
from .features import BaseFeature, EquationReferencesFeature, FigureNumberingFeature
from .host import DocumentHost
from .registry import ReferenceRegistry


class ProcessingCoordinator:
    def __init__(self, host: DocumentHost, settings: Optional[ParaxrefSettings] = None, registry=None):
        self.host = host
        self.settings = settings or ParaxrefSettings()
        self.registry = registry or ReferenceRegistry()
        if self.settings.debug_mode:
            set_debug_mode(True)

        self.features: List[BaseFeature] = [
            FigureNumberingFeature(self.registry, host, include_pdf=self.settings.include_pdf_figures),
            EquationReferencesFeature(self.registry, get_math_adapter(self.settings.math_renderer)),
        ]

    @property
    def enabled_features(self) -> List[BaseFeature]:
        return [feature for feature in self.features if feature.is_enabled(self.settings)]

    def render_fragment(self, fragment: Tag, source_path: str) -> None:
        """Annotate a rendered fragment in place. Never raises."""
        try:
            self._render_fragment(fragment, source_path)
        except Exception as e:
            logger.error(f"Failed to process fragment of {source_path}: {e}")

    def _render_fragment(self, fragment: Tag, source_path: str) -> None:
        if should_skip_fragment(fragment):
            return

        if self.registry.is_processed(source_path, fragment_key(fragment)):
            logger.debug(f"Fragment already processed, skipping: {fragment.name}")
            return

        completed = True
        for feature in self.enabled_features:
            try:
                completed = feature.process(fragment, source_path) and completed
            except Exception as e:
                completed = False
                logger.error(f"{feature.get_name()} failed on fragment of {source_path}: {e}")

        if completed:
            self.registry.mark_processed(source_path, fragment_key(fragment))

    def on_document_opened(self, path: str) -> None:
        logger.debug(f"File opened: {path}")
        for feature in self.enabled_features:
            feature.on_document_opened(path)

    def on_layout_changed(self, active_path: Optional[str] = None) -> None:
        if active_path is None:
            active_path = self.host.active_document_path()
        for feature in self.enabled_features:
            feature.on_layout_changed(active_path)

    def on_document_modified(self, path: str) -> None:
        logger.debug(f"File modified: {path}")
        self.registry.invalidate(path)

    def invalidate(self, path: Optional[str] = None) -> None:
        self.registry.invalidate(path)

    def cleanup(self) -> None:
        for feature in self.features:
            feature.cleanup()
        self.registry.invalidate()
