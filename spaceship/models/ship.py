"""Ship data model."""

from dataclasses import dataclass, fields
from functools import total_ordering
from typing import Optional, Tuple

from ..utils.constants import WEAPON_CAPACITY
from .part import SINGLE_SLOT_TYPES, PartType


def _empty_weapons() -> Tuple[str, ...]:
    return ("",) * WEAPON_CAPACITY


@total_ordering
@dataclass(frozen=True)
class Ship:
    """A built ship: every slot after classification.

    Single-valued slots and wing slots hold None when no part line was
    filed into them. Weapons are a fixed-length tuple of WEAPON_CAPACITY
    entries in encounter order, padded with empty strings.

    Ships compare member-wise in field order. An absent slot sorts before
    any present value; present values compare by string content.
    """

    engine: Optional[str] = None
    fuselage: Optional[str] = None
    cabin: Optional[str] = None
    armor: Optional[str] = None
    small_wings: Optional[str] = None
    large_wings: Optional[str] = None
    weapons: Tuple[str, ...] = _empty_weapons()

    def __post_init__(self):
        """Validate ship data after initialization."""
        if len(self.weapons) != WEAPON_CAPACITY:
            raise ValueError(
                f"Invalid weapons: {len(self.weapons)} entries (must be {WEAPON_CAPACITY})"
            )
        # Accept any sequence, store as tuple so the ship stays hashable
        object.__setattr__(self, "weapons", tuple(self.weapons))

    def slot(self, part_type: PartType) -> Optional[str]:
        """Return the part filed in a single-valued slot.

        Args:
            part_type: One of ENGINE, FUSELAGE, CABIN, ARMOR

        Returns:
            Part line, or None if the slot is empty

        Raises:
            ValueError: If part_type is WINGS or WEAPON
        """
        if part_type not in SINGLE_SLOT_TYPES:
            raise ValueError(f"{part_type.name} is not a single-valued slot")
        return getattr(self, part_type.keyword)

    @property
    def wings(self) -> Tuple[Optional[str], Optional[str]]:
        """(small, large) wing slots."""
        return (self.small_wings, self.large_wings)

    @property
    def armed_weapons(self) -> Tuple[str, ...]:
        """Weapon entries that hold a part, in encounter order."""
        return tuple(weapon for weapon in self.weapons if weapon)

    def _sort_key(self) -> tuple:
        key = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "weapons":
                key.append(tuple((bool(w), w) for w in value))
            else:
                key.append((value is not None, value or ""))
        return tuple(key)

    def __lt__(self, other):
        if not isinstance(other, Ship):
            return NotImplemented
        return self._sort_key() < other._sort_key()
