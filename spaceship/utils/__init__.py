"""Utility functions and constants for the shipyard."""

from .constants import DEFAULT_PARTS_FILE, EMPTY_SLOT, WEAPON_CAPACITY
from .rng import ShipRNG

__all__ = [
    "DEFAULT_PARTS_FILE",
    "EMPTY_SLOT",
    "WEAPON_CAPACITY",
    "ShipRNG",
]
