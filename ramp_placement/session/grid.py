"""
Ramp grid state for visualization.

One GridCell per slot, holding the slot's world center pose and the
container currently shown there. The presentation layer reads this to
draw slot labels (grey when empty, green/red by placement verdict).
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from ramp_placement.common.types import Pose
from ramp_placement.geometry.converter import RampCoordinateConverter
from ramp_placement.geometry.slot import SlotIdentifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridCell:
    """
    A single ramp cell (e.g. 1L, 2R).

    Attributes:
        slot: Cell identifier.
        world_pose: World pose of the cell center.
        container_id: Container shown in the cell, or None.
        is_correct: Verdict of the container's last evaluation.
    """

    slot: SlotIdentifier
    world_pose: Pose
    container_id: Optional[str] = None
    is_correct: bool = False

    @property
    def is_occupied(self) -> bool:
        return self.container_id is not None

    @property
    def label(self) -> str:
        return self.slot.as_code()

    def cleared(self) -> "GridCell":
        """Copy of this cell with no container."""
        return replace(self, container_id=None, is_correct=False)


class RampGrid:
    """
    Grid cells for every slot of a ramp, in enumeration order.

    Cells are immutable; record_placement swaps in updated copies, so cells
    handed out earlier never change. Not thread-safe on its own;
    RampSession guards it with its lock.
    """

    def __init__(self, converter: RampCoordinateConverter):
        self._cells: Dict[SlotIdentifier, GridCell] = {
            slot: GridCell(slot=slot, world_pose=converter.slot_to_world(slot))
            for slot in SlotIdentifier.all_slots(converter.total_rows)
        }
        self._placements: Dict[str, SlotIdentifier] = {}
        logger.info(f"Created {len(self._cells)} grid cells")

    def cell(self, slot: SlotIdentifier) -> Optional[GridCell]:
        return self._cells.get(slot)

    def cells(self) -> List[GridCell]:
        return list(self._cells.values())

    def labels(self) -> List[str]:
        return [cell.label for cell in self._cells.values()]

    def record_placement(
        self, container_id: str, slot: SlotIdentifier, is_correct: bool
    ) -> None:
        """Show a container in a cell, clearing its previous cell."""
        previous = self._placements.get(container_id)
        if previous is not None and previous != slot:
            previous_cell = self._cells.get(previous)
            if previous_cell is not None and previous_cell.container_id == container_id:
                self._cells[previous] = previous_cell.cleared()

        target = self._cells.get(slot)
        if target is not None:
            if target.container_id not in (None, container_id):
                self._placements.pop(target.container_id, None)
            self._cells[slot] = replace(
                target, container_id=container_id, is_correct=is_correct
            )

        self._placements[container_id] = slot

    def __len__(self) -> int:
        return len(self._cells)
