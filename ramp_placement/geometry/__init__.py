"""
Ramp geometry.

Maps AR world poses onto the ramp's rows x 2 sides slot grid and back.

Components:
1. SlotIdentifier - immutable (row, side) value with "<row><L|R>" codes
2. RampCoordinateConverter - world <-> local <-> normalized <-> slot
"""

from ramp_placement.geometry.converter import RampCoordinateConverter
from ramp_placement.geometry.slot import Side, SlotIdentifier, clamp_row

__all__ = [
    "RampCoordinateConverter",
    "Side",
    "SlotIdentifier",
    "clamp_row",
]
