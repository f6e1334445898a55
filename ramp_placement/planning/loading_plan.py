"""
Loading plan: the supervisor's expected container placements plus the
per-slot weight limits the placements are checked against.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from ramp_placement.common.constants import UNLIMITED_WEIGHT_KG
from ramp_placement.planning.types import PlanEntry

if TYPE_CHECKING:
    from ramp_placement.aircraft.types import AircraftProfile

logger = logging.getLogger(__name__)


class LoadingPlan:
    """
    Container -> expected slot mapping with a slot -> max weight table.

    Entries are keyed by container id; inserting an id that already exists
    replaces the earlier entry. Entries are never removed implicitly.

    Example:
        >>> plan = LoadingPlan()
        >>> plan.put_entry(PlanEntry("AKE123", 4800.0, "2R"))
        >>> plan.set_max_weight_for_slot("2R", 5000.0)
        >>> plan.get_entry("AKE123").expected_slot_code
        '2R'
        >>> plan.get_max_weight_for_slot("4L") == UNLIMITED_WEIGHT_KG
        True
    """

    def __init__(self):
        self._entries: Dict[str, PlanEntry] = {}
        self._max_weight_by_slot: Dict[str, float] = {}

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def put_entry(self, entry: PlanEntry) -> None:
        if entry.container_id in self._entries:
            logger.debug(f"Replacing plan entry for {entry.container_id}")
        self._entries[entry.container_id] = entry

    def get_entry(self, container_id: str) -> Optional[PlanEntry]:
        return self._entries.get(container_id)

    def entries(self) -> List[PlanEntry]:
        """All entries in insertion order."""
        return list(self._entries.values())

    def container_ids(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, container_id: object) -> bool:
        return container_id in self._entries

    # ------------------------------------------------------------------
    # Weight limits
    # ------------------------------------------------------------------

    def set_max_weight_for_slot(self, slot_code: str, max_weight_kg: float) -> None:
        self._max_weight_by_slot[slot_code] = float(max_weight_kg)

    def get_max_weight_for_slot(self, slot_code: str) -> float:
        """Configured limit, or UNLIMITED_WEIGHT_KG when the slot has none."""
        return self._max_weight_by_slot.get(slot_code, UNLIMITED_WEIGHT_KG)

    def weight_limits(self) -> Dict[str, float]:
        return dict(self._max_weight_by_slot)

    def apply_limits(self, profile: "AircraftProfile") -> None:
        """
        Overwrite slot limits with every limit defined by an aircraft profile.

        Plan entries are left untouched.
        """
        for slot_code, limit in profile.weight_limits_kg.items():
            self._max_weight_by_slot[slot_code] = limit

        logger.info(
            f"Applied {len(profile.weight_limits_kg)} weight limits "
            f"from {profile.display_name}"
        )

    # ------------------------------------------------------------------
    # Demo data
    # ------------------------------------------------------------------

    @classmethod
    def create_demo_plan(cls) -> "LoadingPlan":
        """
        Hard-coded plan for a 4-row aircraft.

        Used when no plan file can be read.
        """
        plan = cls()
        plan.put_entry(PlanEntry("AKE123", 4800.0, "2R"))
        plan.put_entry(PlanEntry("AKE456", 3000.0, "1L"))

        for row in range(1, 5):
            for side in ("L", "R"):
                plan.set_max_weight_for_slot(f"{row}{side}", 5000.0)

        return plan

    def __repr__(self) -> str:
        return (
            f"LoadingPlan(entries={len(self._entries)}, "
            f"limits={len(self._max_weight_by_slot)})"
        )
