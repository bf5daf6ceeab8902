"""Shipyard engine components."""

from .builder import build_ship, classify_part
from .loader import LoadErrorType, PartsLoadError, load_parts

__all__ = [
    "build_ship",
    "classify_part",
    "load_parts",
    "LoadErrorType",
    "PartsLoadError",
]
