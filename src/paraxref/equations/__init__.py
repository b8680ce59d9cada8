from .adapters import MathAdapter, MathJaxAdapter, PandocMathAdapter, get_math_adapter
from .anchors import EquationAnchorResolver
from .references import EquationReferenceLinker, resolve_navigation

__all__ = [
    "MathAdapter",
    "MathJaxAdapter",
    "PandocMathAdapter",
    "get_math_adapter",
    "EquationAnchorResolver",
    "EquationReferenceLinker",
    "resolve_navigation",
]
