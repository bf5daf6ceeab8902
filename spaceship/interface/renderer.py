"""Ship report rendering.

This module renders a built Ship as a multi-line report with one line per
slot and a bracketed weapon list, or as a JSON document.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

from ..models.ship import Ship
from ..schemas.report import ShipReport
from ..utils.constants import EMPTY_SLOT

logger = logging.getLogger(__name__)


class ShipRenderer:
    """Renders a Ship as a text report."""

    def render(self, ship: Ship) -> str:
        """Render the ship report.

        Output format:

        This ship is loaded with:
          Engine: big engine
          Fuselage: (empty)
          Cabin: (empty)
          Armor: steel armor
          Wings:
            (small): small wings
            (large): (empty)
          Weapons: [laser weapon]

        Empty weapon entries are left out of the list entirely.

        Args:
            ship: Ship to render

        Returns:
            Multi-line report string (leading blank line, trailing newline)
        """
        lines = [
            "",
            "This ship is loaded with:",
            f"  Engine: {self._slot_text(ship.engine)}",
            f"  Fuselage: {self._slot_text(ship.fuselage)}",
            f"  Cabin: {self._slot_text(ship.cabin)}",
            f"  Armor: {self._slot_text(ship.armor)}",
            "  Wings:",
            f"    (small): {self._slot_text(ship.small_wings)}",
            f"    (large): {self._slot_text(ship.large_wings)}",
            f"  Weapons: [{', '.join(ship.armed_weapons)}]",
        ]
        return "\n".join(lines) + "\n"

    def _slot_text(self, value: Optional[str]) -> str:
        return EMPTY_SLOT if value is None else value


def print_ship(ship: Ship, stream: Optional[TextIO] = None) -> bool:
    """Write the text report, best-effort.

    Rendering or write failures are logged and never raised.

    Args:
        ship: Ship to print
        stream: Output stream (default: sys.stdout)

    Returns:
        True if the report was written, False if it failed
    """
    return _write_best_effort(lambda: ShipRenderer().render(ship), stream)


def print_ship_json(ship: Ship, stream: Optional[TextIO] = None) -> bool:
    """Write the ship as a JSON document, best-effort.

    Args:
        ship: Ship to print
        stream: Output stream (default: sys.stdout)

    Returns:
        True if the document was written, False if it failed
    """
    return _write_best_effort(
        lambda: ShipReport.from_ship(ship).model_dump_json(indent=2) + "\n", stream
    )


def _write_best_effort(render: Callable[[], str], stream: Optional[TextIO]) -> bool:
    if stream is None:
        stream = sys.stdout
    try:
        stream.write(render())
        stream.flush()
    except Exception as e:
        logger.error("Error printing ship: %s", e)
        return False
    return True
