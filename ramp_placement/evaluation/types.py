"""
Data types and structures for the Evaluation module.

Provides the result container returned for every placement event.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ramp_placement.common.constants import UNLIMITED_WEIGHT_KG
from ramp_placement.geometry.slot import SlotIdentifier


class DecisionStatus(Enum):
    """Placement decision outcomes."""

    PASS = "PASS"
    REJECT = "REJECT"


class RejectionReason(Enum):
    """Specific reasons a placement fails."""

    NOT_IN_PLAN = "Not In Plan"  # Container has no expected slot
    POSITION_MISMATCH = "Position Mismatch"  # Placed at a different slot
    OVERWEIGHT = "Overweight"  # Heavier than the slot's limit


@dataclass
class EvaluationResult:
    """
    Output of one placement evaluation.

    Attributes:
        container_id: Container that was placed.
        weight_kg: Weight used for the limit check.
        position_matches: Actual slot equals the planned slot.
        weight_ok: Weight is within the actual slot's limit.
        actual_slot: Slot the container was placed in.
        expected_slot: Planned slot (None if not in plan).
        suggested_slot: Nearest free slot that can carry the weight
            (None when the placement passed or nothing qualifies).
        allowed_max_kg: Limit of the actual slot.
    """

    container_id: str
    weight_kg: float
    position_matches: bool
    weight_ok: bool
    actual_slot: SlotIdentifier
    expected_slot: Optional[SlotIdentifier] = None
    suggested_slot: Optional[SlotIdentifier] = None
    allowed_max_kg: float = UNLIMITED_WEIGHT_KG

    @property
    def overall_ok(self) -> bool:
        return self.position_matches and self.weight_ok

    @property
    def decision(self) -> DecisionStatus:
        return DecisionStatus.PASS if self.overall_ok else DecisionStatus.REJECT

    def is_pass(self) -> bool:
        """Check if the placement passed."""
        return self.decision == DecisionStatus.PASS

    @property
    def rejection_reasons(self) -> List[RejectionReason]:
        reasons = []
        if not self.position_matches:
            if self.expected_slot is None:
                reasons.append(RejectionReason.NOT_IN_PLAN)
            else:
                reasons.append(RejectionReason.POSITION_MISMATCH)
        if not self.weight_ok:
            reasons.append(RejectionReason.OVERWEIGHT)
        return reasons

    def get_message(self) -> str:
        """
        Operator-facing summary.

        Example:
            ULD AKE123
            ✗ Wrong: 1L
            Expected: 2R
            → Try: 2R
        """
        expected = self.expected_slot.as_code() if self.expected_slot else None

        if self.overall_ok:
            return (
                f"ULD {self.container_id}\n"
                f"✓ Correct at {self.actual_slot}\n"
                f"Target: {expected}"
            )

        lines = [f"ULD {self.container_id}", f"✗ Wrong: {self.actual_slot}"]
        lines.append(f"Expected: {expected}" if expected else "Expected: <none in plan>")
        if not self.weight_ok:
            lines.append("⚠ Overweight")
        if self.suggested_slot is not None:
            lines.append(f"→ Try: {self.suggested_slot}")
        return "\n".join(lines)
