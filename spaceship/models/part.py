"""Part category model."""

from enum import Enum


class PartType(Enum):
    """Category a part line is filed under.

    The value is the keyword searched for in each part line. Definition
    order is the order keywords are tested in.
    """

    ENGINE = "engine"
    FUSELAGE = "fuselage"
    CABIN = "cabin"
    WINGS = "wings"
    ARMOR = "armor"
    WEAPON = "weapon"

    @property
    def keyword(self) -> str:
        return self.value


# Categories holding exactly one part (last matching line wins)
SINGLE_SLOT_TYPES = (
    PartType.ENGINE,
    PartType.FUSELAGE,
    PartType.CABIN,
    PartType.ARMOR,
)
