"""
Discrete ramp slot identifiers.

A ramp is modeled as a grid of rows x 2 sides. Each cell is addressed by
a SlotIdentifier with the canonical string form "<row><L|R>", e.g. "2R".

Row 1 is the row nearest the ramp's reference corner; rows increase
toward the back of the ramp.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


class Side(Enum):
    """Ramp side, as seen from the reference corner."""

    LEFT = "L"
    RIGHT = "R"


def clamp_row(scaled_depth: float, total_rows: int) -> int:
    """
    Map a depth measured in row units to a row number in [1, total_rows].

    Values beyond the ramp (including infinities) clamp to the first or
    last row.

    Raises:
        ValueError: If scaled_depth is NaN.
    """
    if math.isnan(scaled_depth):
        raise ValueError("Depth coordinate must be a number, got NaN")

    bounded = min(max(scaled_depth, -1.0), float(total_rows))
    row = int(math.floor(bounded)) + 1
    return min(max(row, 1), total_rows)


@dataclass(frozen=True)
class SlotIdentifier:
    """
    Logical ramp slot such as "2R" or "4L".

    Attributes:
        row: Row number, 1-based.
        side: LEFT or RIGHT.
    """

    row: int
    side: Side

    def __post_init__(self) -> None:
        if not isinstance(self.side, Side):
            raise TypeError(f"side must be a Side, got {type(self.side).__name__}")
        if self.row < 1:
            raise ValueError(f"row must be >= 1, got {self.row}")

    def as_code(self) -> str:
        """Canonical string form, e.g. "2R"."""
        return f"{self.row}{self.side.value}"

    def __str__(self) -> str:
        return self.as_code()

    @classmethod
    def parse(cls, code: Optional[str]) -> Optional["SlotIdentifier"]:
        """
        Parse a slot code such as "2R" or "12l".

        The side character is case-insensitive and the row must be plain
        ASCII digits ("+2R" and "2 R" are malformed). Malformed codes return None
        instead of raising, so callers can treat them as "no slot".

        Example:
            >>> SlotIdentifier.parse("3l")
            SlotIdentifier(row=3, side=<Side.LEFT: 'L'>)
            >>> SlotIdentifier.parse("R2") is None
            True
        """
        if code is None:
            return None

        text = code.strip()
        if len(text) < 2:
            return None

        side_char = text[-1].upper()
        if side_char == Side.LEFT.value:
            side = Side.LEFT
        elif side_char == Side.RIGHT.value:
            side = Side.RIGHT
        else:
            logger.debug(f"Unknown side character in slot code '{code}'")
            return None

        row_text = text[:-1]
        if not (row_text.isascii() and row_text.isdigit()):
            logger.debug(f"Non-integer row in slot code '{code}'")
            return None
        row = int(row_text)

        if row < 1:
            return None

        return cls(row=row, side=side)

    @classmethod
    def from_normalized(cls, nx: float, nz: float, total_rows: int) -> "SlotIdentifier":
        """
        Convert normalized ramp coordinates into a slot.

        nx: 0 -> left edge, 1 -> right edge
        nz: 0 -> front (row 1), 1 -> back (row total_rows)

        Values outside [0, 1] are clamped, never rejected.

        Raises:
            ValueError: If total_rows < 1 or a coordinate is NaN.
        """
        if total_rows <= 0:
            raise ValueError(f"total_rows must be > 0, got {total_rows}")
        if math.isnan(nx):
            raise ValueError("Lateral coordinate must be a number, got NaN")

        side = Side.LEFT if nx < 0.5 else Side.RIGHT
        row = clamp_row(nz * total_rows, total_rows)
        return cls(row=row, side=side)

    @staticmethod
    def all_slots(total_rows: int) -> List["SlotIdentifier"]:
        """Every slot of a ramp, row ascending, LEFT before RIGHT."""
        return [
            SlotIdentifier(row=row, side=side)
            for row in range(1, total_rows + 1)
            for side in (Side.LEFT, Side.RIGHT)
        ]
