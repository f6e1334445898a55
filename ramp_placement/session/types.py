"""
Data types for the Session module.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ramp_placement.common.types import Pose
from ramp_placement.evaluation.types import EvaluationResult


@dataclass
class PlacementOutcome:
    """
    Everything the presentation layer needs after one placement event.

    Attributes:
        result: Evaluation verdict.
        local: Ramp-local (x, y, z) of the placement.
        normalized: (nx, nz) of the placement; [0, 1] on the ramp.
        on_ramp: Whether the placement was inside the ramp footprint.
        suggested_world_pose: World pose of the suggested slot center, if any.
    """

    result: EvaluationResult
    local: Tuple[float, float, float]
    normalized: Tuple[float, float]
    on_ramp: bool = True
    suggested_world_pose: Optional[Pose] = None

    @property
    def slot_code(self) -> str:
        return self.result.actual_slot.as_code()

    def is_pass(self) -> bool:
        return self.result.is_pass()
