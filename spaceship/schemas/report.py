"""Pydantic schemas for machine-readable ship reports."""

from pydantic import BaseModel, Field

from ..models.ship import Ship


class WingsReport(BaseModel):
    """Wing slots of a ship."""

    small: str | None = None
    large: str | None = None


class ShipReport(BaseModel):
    """Ship contents as emitted by ``shipyard.py --json``."""

    engine: str | None = None
    fuselage: str | None = None
    cabin: str | None = None
    armor: str | None = None
    wings: WingsReport = Field(default_factory=WingsReport)
    weapons: list[str] = Field(
        default_factory=list, description="Mounted weapons in encounter order"
    )

    @classmethod
    def from_ship(cls, ship: Ship) -> "ShipReport":
        """Build a report from a Ship, leaving out empty weapon entries."""
        return cls(
            engine=ship.engine,
            fuselage=ship.fuselage,
            cabin=ship.cabin,
            armor=ship.armor,
            wings=WingsReport(small=ship.small_wings, large=ship.large_wings),
            weapons=list(ship.armed_weapons),
        )
