from .common import EquationAnchor, FigureRecord, Language
from .config import ParaxrefSettings
from .coordinator import ProcessingCoordinator
from .host import FileSystemHost
from .registry import ReferenceRegistry

__all__ = [
    "EquationAnchor",
    "FigureRecord",
    "Language",
    "ParaxrefSettings",
    "ProcessingCoordinator",
    "FileSystemHost",
    "ReferenceRegistry",
]
