"""Shipyard configuration constants."""

# Input
DEFAULT_PARTS_FILE = "vehicle_parts.txt"

# Ship layout
WEAPON_CAPACITY = 4  # Fixed number of weapon hardpoints

# Rendering
EMPTY_SLOT = "(empty)"  # Placeholder for a slot no part was filed into
