"""
Occupancy table: which container currently sits in which slot.

Maintains a 1:1 bidirectional mapping. For every pair present,
slot_to_container[slot] == container <=> container_to_slot[container] == slot.

Not thread-safe on its own; PlacementEvaluator guards it with its lock.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class OccupancyTable:
    """Bidirectional slot <-> container mapping."""

    def __init__(self):
        self._slot_to_container: Dict[str, str] = {}
        self._container_to_slot: Dict[str, str] = {}

    def place(self, container_id: str, slot_code: str) -> Optional[str]:
        """
        Record container_id at slot_code.

        The container's previous slot is vacated first. A different
        container already in slot_code is evicted from the table.

        Returns:
            The evicted container id, if any.
        """
        previous_slot = self._container_to_slot.pop(container_id, None)
        if previous_slot is not None:
            del self._slot_to_container[previous_slot]

        evicted = self._slot_to_container.get(slot_code)
        if evicted is not None:
            del self._container_to_slot[evicted]
            logger.info(f"Container {evicted} evicted from {slot_code} by {container_id}")

        self._slot_to_container[slot_code] = container_id
        self._container_to_slot[container_id] = slot_code
        return evicted

    def remove(self, container_id: str) -> Optional[str]:
        """Forget a container. Returns the slot it occupied."""
        slot_code = self._container_to_slot.pop(container_id, None)
        if slot_code is not None:
            del self._slot_to_container[slot_code]
        return slot_code

    def slot_of(self, container_id: str) -> Optional[str]:
        return self._container_to_slot.get(container_id)

    def occupant_of(self, slot_code: str) -> Optional[str]:
        return self._slot_to_container.get(slot_code)

    def is_occupied(self, slot_code: str) -> bool:
        return slot_code in self._slot_to_container

    def snapshot(self) -> Dict[str, str]:
        """Copy of the slot -> container mapping."""
        return dict(self._slot_to_container)

    def clear(self) -> None:
        self._slot_to_container.clear()
        self._container_to_slot.clear()

    def __len__(self) -> int:
        return len(self._slot_to_container)
