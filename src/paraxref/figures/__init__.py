from .captions import CaptionAssignmentMatcher
from .references import FigureReferenceLinker
from .scanner import FigureScanner

__all__ = ["CaptionAssignmentMatcher", "FigureReferenceLinker", "FigureScanner"]
