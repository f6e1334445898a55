"""
Demo placement targets.

When the host application cannot identify containers, the session cycles
through one synthetic container per slot ("ULD-1L", "ULD-1R", ...), each
with a weight safely under its slot's limit.
"""

from dataclasses import dataclass
from typing import List, Optional

from ramp_placement.aircraft.types import AircraftProfile
from ramp_placement.common.constants import UNLIMITED_WEIGHT_KG
from ramp_placement.planning.loading_plan import LoadingPlan
from ramp_placement.planning.types import PlanEntry

DEFAULT_DEMO_WEIGHT_KG = 3000.0
MIN_DEMO_WEIGHT_KG = 500.0
DEMO_WEIGHT_MARGIN_KG = 100.0


@dataclass(frozen=True)
class DemoTarget:
    container_id: str
    weight_kg: float
    slot_code: str


def build_demo_targets(profile: AircraftProfile) -> List[DemoTarget]:
    targets = []
    for code in profile.slot_codes():
        limit = profile.weight_limit_for(code)
        if limit == UNLIMITED_WEIGHT_KG:
            weight = DEFAULT_DEMO_WEIGHT_KG
        else:
            weight = max(MIN_DEMO_WEIGHT_KG, limit - DEMO_WEIGHT_MARGIN_KG)
        targets.append(DemoTarget(f"ULD-{code}", weight, code))
    return targets


class DemoTargetCycle:
    """Round-robin over demo targets."""

    def __init__(self, targets: List[DemoTarget]):
        self._targets = list(targets)
        self._index = 0

    def current(self) -> Optional[DemoTarget]:
        if not self._targets:
            return None
        return self._targets[self._index % len(self._targets)]

    def advance(self) -> Optional[DemoTarget]:
        """Move to the next target and return it."""
        if not self._targets:
            return None
        self._index = (self._index + 1) % len(self._targets)
        return self.current()

    def reset(self) -> None:
        """Go back to the first target."""
        self._index = 0

    def register_in(self, plan: LoadingPlan) -> None:
        """Add every target to the plan so evaluations have an expected slot."""
        for target in self._targets:
            plan.put_entry(PlanEntry(target.container_id, target.weight_kg, target.slot_code))

    def __len__(self) -> int:
        return len(self._targets)
