"""
Placement evaluation.

Validates each placed container against the loading plan and slot weight
limits and suggests the nearest valid alternative on failure.
"""

from ramp_placement.evaluation.evaluator import PlacementEvaluator
from ramp_placement.evaluation.occupancy import OccupancyTable
from ramp_placement.evaluation.types import (
    DecisionStatus,
    EvaluationResult,
    RejectionReason,
)

__all__ = [
    "DecisionStatus",
    "EvaluationResult",
    "OccupancyTable",
    "PlacementEvaluator",
    "RejectionReason",
]
