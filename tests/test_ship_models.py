"""Tests for ship data models."""

import pytest

from spaceship.models import SINGLE_SLOT_TYPES, PartType, Ship
from spaceship.utils import WEAPON_CAPACITY


class TestPartType:
    """Test PartType enumeration."""

    def test_keywords(self):
        """Each category matches on its lowercase keyword."""
        assert [p.keyword for p in PartType] == [
            "engine",
            "fuselage",
            "cabin",
            "wings",
            "armor",
            "weapon",
        ]

    def test_single_slot_types(self):
        """Wings and weapons are not single-valued slots."""
        assert PartType.WINGS not in SINGLE_SLOT_TYPES
        assert PartType.WEAPON not in SINGLE_SLOT_TYPES
        assert len(SINGLE_SLOT_TYPES) == 4


class TestShip:
    """Test Ship dataclass."""

    def test_default_ship_is_empty(self):
        """A default ship has every slot unset."""
        ship = Ship()
        assert ship.engine is None
        assert ship.fuselage is None
        assert ship.cabin is None
        assert ship.armor is None
        assert ship.wings == (None, None)
        assert ship.weapons == ("",) * WEAPON_CAPACITY
        assert ship.armed_weapons == ()

    def test_weapons_must_fill_capacity(self):
        """Weapon sequence must have exactly WEAPON_CAPACITY entries."""
        with pytest.raises(ValueError, match="Invalid weapons"):
            Ship(weapons=("laser weapon",))

        with pytest.raises(ValueError, match="Invalid weapons"):
            Ship(weapons=("a weapon",) * (WEAPON_CAPACITY + 1))

    def test_weapons_stored_as_tuple(self):
        """A list of weapons is stored as a tuple."""
        ship = Ship(weapons=["laser weapon", "", "", ""])
        assert ship.weapons == ("laser weapon", "", "", "")
        hash(ship)

    def test_ship_is_immutable(self):
        """Ships cannot be changed after construction."""
        ship = Ship(engine="big engine")
        with pytest.raises(AttributeError):
            ship.engine = "small engine"

    def test_slot_lookup(self):
        """slot() returns single-valued slots by category."""
        ship = Ship(engine="big engine", armor="steel armor")
        assert ship.slot(PartType.ENGINE) == "big engine"
        assert ship.slot(PartType.ARMOR) == "steel armor"
        assert ship.slot(PartType.CABIN) is None

    def test_slot_rejects_multi_valued_categories(self):
        """slot() is only defined for single-valued categories."""
        ship = Ship()
        with pytest.raises(ValueError, match="not a single-valued slot"):
            ship.slot(PartType.WINGS)
        with pytest.raises(ValueError, match="not a single-valued slot"):
            ship.slot(PartType.WEAPON)

    def test_armed_weapons_skips_empty_entries(self):
        """armed_weapons keeps only mounted weapons, in order."""
        ship = Ship(weapons=("laser weapon", "ion weapon", "", ""))
        assert ship.armed_weapons == ("laser weapon", "ion weapon")


class TestShipComparison:
    """Test Ship equality and ordering."""

    def test_equal_ships(self):
        """Ships with identical slots are equal."""
        a = Ship(engine="big engine", weapons=("laser weapon", "", "", ""))
        b = Ship(engine="big engine", weapons=("laser weapon", "", "", ""))
        assert a == b
        assert len({a, b}) == 1

    def test_absent_slot_sorts_first(self):
        """An unset slot sorts before any filled slot, even an empty string."""
        assert Ship() < Ship(engine="")
        assert Ship() < Ship(engine="a engine")
        assert not Ship(engine="a engine") < Ship()

    def test_orders_by_content(self):
        """Filled slots compare by string content."""
        assert Ship(engine="a engine") < Ship(engine="b engine")
        assert Ship(engine="b engine") > Ship(engine="a engine")

    def test_earlier_fields_take_precedence(self):
        """Comparison is lexicographic in field order."""
        a = Ship(engine="a engine", armor="z armor")
        b = Ship(engine="b engine", armor="a armor")
        assert a < b

    def test_weapon_ordering(self):
        """Empty weapon entries sort before mounted ones."""
        a = Ship(weapons=("laser weapon", "", "", ""))
        b = Ship(weapons=("laser weapon", "ion weapon", "", ""))
        assert a < b
        assert a <= b
        assert b >= a

    def test_sorting(self):
        """Ships can be sorted."""
        ships = [Ship(cabin="z cabin"), Ship(), Ship(cabin="a cabin")]
        assert sorted(ships) == [Ship(), Ship(cabin="a cabin"), Ship(cabin="z cabin")]

    def test_comparison_with_other_types(self):
        """Ordering against a non-Ship is unsupported."""
        with pytest.raises(TypeError):
            Ship() < "ship"
