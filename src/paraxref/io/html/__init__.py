from .exporter import HTMLAnnotator

__all__ = ["HTMLAnnotator"]
