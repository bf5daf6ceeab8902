"""Data models for the shipyard."""

from .part import SINGLE_SLOT_TYPES, PartType
from .ship import Ship

__all__ = [
    "PartType",
    "SINGLE_SLOT_TYPES",
    "Ship",
]
