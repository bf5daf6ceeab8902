"""Ship building: shuffle part lines and file them into slots.

Each line is tested against every category keyword, in PartType order,
by case-sensitive substring search. A line containing several keywords
is filed under every matching category:

- WEAPON: appended to the weapon list; only the first WEAPON_CAPACITY
  collected entries are mounted.
- WINGS: small wing slot if empty, else large wing slot if empty, else
  dropped.
- Any other category: overwrites that slot, so the last matching line
  wins.

Classification depends only on line content. Shuffle order matters only
for which line wins a contested single-valued slot, which wing lines
become small/large, and which weapons are mounted when more than
WEAPON_CAPACITY are supplied. With an unseeded RNG those outcomes vary
between runs.
"""

import logging
from typing import Dict, List, Optional

from ..models.part import PartType
from ..models.ship import Ship
from ..utils.constants import WEAPON_CAPACITY
from ..utils.rng import ShipRNG

logger = logging.getLogger(__name__)


def classify_part(part: str) -> List[PartType]:
    """Return every category whose keyword occurs in the part line.

    Args:
        part: Part line to classify

    Returns:
        Matching categories in PartType order (empty if none match)

    Examples:
        >>> classify_part("big engine")
        [<PartType.ENGINE: 'engine'>]
        >>> classify_part("armor plated engine")
        [<PartType.ENGINE: 'engine'>, <PartType.ARMOR: 'armor'>]
    """
    return [part_type for part_type in PartType if part_type.keyword in part]


def build_ship(part_list: List[str], rng: Optional[ShipRNG] = None) -> Ship:
    """Shuffle part lines and classify them into a Ship.

    The list is shuffled in place; callers hand it over and should not
    rely on its order afterwards.

    Args:
        part_list: Part lines as loaded from a parts file
        rng: Randomness source with a shuffle(list) method. Defaults to an
            unseeded ShipRNG (system entropy).

    Returns:
        The built Ship
    """
    if rng is None:
        rng = ShipRNG()
    rng.shuffle(part_list)

    slots: Dict[PartType, str] = {}
    small_wings: Optional[str] = None
    large_wings: Optional[str] = None
    weapon_parts: List[str] = []

    for part in part_list:
        for part_type in classify_part(part):
            logger.debug("Filing %r as %s", part, part_type.name)
            if part_type == PartType.WEAPON:
                weapon_parts.append(part)
            elif part_type == PartType.WINGS:
                if small_wings is None:
                    small_wings = part
                elif large_wings is None:
                    large_wings = part
                else:
                    logger.debug("Both wing slots filled, dropping %r", part)
            else:
                slots[part_type] = part

    for dropped in weapon_parts[WEAPON_CAPACITY:]:
        logger.debug("All %d weapon slots filled, dropping %r", WEAPON_CAPACITY, dropped)

    mounted = weapon_parts[:WEAPON_CAPACITY]
    weapons = tuple(mounted) + ("",) * (WEAPON_CAPACITY - len(mounted))

    return Ship(
        engine=slots.get(PartType.ENGINE),
        fuselage=slots.get(PartType.FUSELAGE),
        cabin=slots.get(PartType.CABIN),
        armor=slots.get(PartType.ARMOR),
        small_wings=small_wings,
        large_wings=large_wings,
        weapons=weapons,
    )
