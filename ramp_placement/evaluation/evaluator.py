"""
Placement evaluator.

Checks each placement event against the loading plan and slot weight
limits, tracks occupancy, and suggests the nearest valid slot when a
placement fails.

Evaluation steps:
1. Plan lookup (expected slot, position match)
2. Weight check against the actual slot's limit
3. Occupancy update (container moves, displaced container is evicted)
4. Nearest-valid-slot search (only on failure)

Rule violations are results, never exceptions.
"""

import logging
import math
import threading
from typing import Dict, Optional, Union

from ramp_placement.evaluation.occupancy import OccupancyTable
from ramp_placement.evaluation.types import EvaluationResult
from ramp_placement.geometry.slot import SlotIdentifier
from ramp_placement.planning.loading_plan import LoadingPlan

logger = logging.getLogger(__name__)


class PlacementEvaluator:
    """
    Stateful placement validator for one ramp.

    All evaluations and occupancy queries share one lock, so events may
    arrive from an input thread while a render thread reads state.

    Args:
        loading_plan: Plan with expected slots and weight limits.
        total_rows: Ramp row count, used to enumerate candidate slots.

    Example:
        >>> plan = LoadingPlan.create_demo_plan()
        >>> evaluator = PlacementEvaluator(plan, total_rows=4)
        >>> result = evaluator.evaluate("AKE123", 4800.0, SlotIdentifier.parse("1L"))
        >>> result.overall_ok, result.suggested_slot.as_code()
        (False, '1R')
    """

    def __init__(self, loading_plan: LoadingPlan, total_rows: int):
        if loading_plan is None:
            raise ValueError("loading_plan cannot be None")
        if total_rows < 1:
            raise ValueError(f"total_rows must be >= 1, got {total_rows}")

        self.loading_plan = loading_plan
        self.total_rows = int(total_rows)
        self._occupancy = OccupancyTable()
        self._lock = threading.Lock()

    def evaluate(
        self, container_id: str, weight_kg: float, actual_slot: SlotIdentifier
    ) -> EvaluationResult:
        """
        Evaluate one placement and record it in the occupancy table.

        Args:
            container_id: Container that was placed.
            weight_kg: Its weight.
            actual_slot: Slot it was placed in.

        Returns:
            EvaluationResult with match/weight verdicts and, on failure,
            the suggested slot.

        Raises:
            ValueError: If weight_kg is NaN or infinite.
        """
        if not math.isfinite(weight_kg):
            raise ValueError(f"weight_kg must be finite, got {weight_kg}")

        actual_code = actual_slot.as_code()

        with self._lock:
            # Step 1: Plan lookup
            expected_slot = None
            position_matches = False
            entry = self.loading_plan.get_entry(container_id)
            if entry is not None:
                expected_slot = SlotIdentifier.parse(entry.expected_slot_code)
                if expected_slot is None:
                    logger.warning(
                        f"Plan entry for {container_id} has unparseable slot "
                        f"'{entry.expected_slot_code}'"
                    )
                else:
                    position_matches = (
                        entry.expected_slot_code.strip().upper() == actual_code.upper()
                    )

            # Step 2: Weight check
            allowed_max = self.loading_plan.get_max_weight_for_slot(actual_code)
            weight_ok = weight_kg <= allowed_max

            # Step 3: Occupancy
            self._occupancy.place(container_id, actual_code)

            # Step 4: Suggestion
            suggested_slot = None
            if not (position_matches and weight_ok):
                suggested_slot = self._find_nearest_valid_slot(weight_kg, actual_slot)

        result = EvaluationResult(
            container_id=container_id,
            weight_kg=weight_kg,
            position_matches=position_matches,
            weight_ok=weight_ok,
            actual_slot=actual_slot,
            expected_slot=expected_slot,
            suggested_slot=suggested_slot,
            allowed_max_kg=allowed_max,
        )

        logger.debug(
            f"EVAL id={container_id} actual={actual_code} "
            f"expected={expected_slot} posMatch={position_matches} "
            f"weightOk={weight_ok} suggestion={suggested_slot}"
        )
        if not result.overall_ok:
            logger.info(
                f"Placement of {container_id} at {actual_code} rejected: "
                f"{', '.join(r.value for r in result.rejection_reasons)}"
            )

        return result

    def _find_nearest_valid_slot(
        self, weight_kg: float, from_slot: SlotIdentifier
    ) -> Optional[SlotIdentifier]:
        """
        Closest free slot able to carry weight_kg.

        Distance = |row difference| + 1 if the side differs. Ties go to the
        first candidate in enumeration order (row ascending, LEFT before
        RIGHT). Caller must hold the lock.
        """
        best = None
        best_distance = None

        for candidate in SlotIdentifier.all_slots(self.total_rows):
            code = candidate.as_code()
            if self._occupancy.is_occupied(code):
                continue
            if weight_kg > self.loading_plan.get_max_weight_for_slot(code):
                continue

            distance = abs(candidate.row - from_slot.row)
            if candidate.side != from_slot.side:
                distance += 1

            if best_distance is None or distance < best_distance:
                best = candidate
                best_distance = distance

        if best is None:
            logger.debug(f"No free slot can carry {weight_kg:.0f} kg")
        return best

    # ------------------------------------------------------------------
    # Occupancy queries
    # ------------------------------------------------------------------

    def slot_of(self, container_id: str) -> Optional[SlotIdentifier]:
        """Slot a container currently occupies, or None."""
        with self._lock:
            code = self._occupancy.slot_of(container_id)
        return SlotIdentifier.parse(code)

    def occupant_of(self, slot: Union[SlotIdentifier, str]) -> Optional[str]:
        """Container currently in a slot, or None."""
        code = slot.as_code() if isinstance(slot, SlotIdentifier) else slot
        with self._lock:
            return self._occupancy.occupant_of(code)

    def occupancy_snapshot(self) -> Dict[str, str]:
        """Copy of the slot code -> container mapping."""
        with self._lock:
            return self._occupancy.snapshot()

    def release(self, container_id: str) -> Optional[SlotIdentifier]:
        """Remove a container from the ramp. Returns the slot it left."""
        with self._lock:
            code = self._occupancy.remove(container_id)
        if code is not None:
            logger.info(f"Container {container_id} released from {code}")
        return SlotIdentifier.parse(code)

    def reset(self) -> None:
        """Clear all occupancy."""
        with self._lock:
            self._occupancy.clear()
        logger.info("Occupancy cleared")
