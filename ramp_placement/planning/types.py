"""
Data types for the Planning module.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlanEntry:
    """
    Expected placement of one container.

    Attributes:
        container_id: Container (ULD) identifier, e.g. "AKE123".
        expected_weight_kg: Declared container weight.
        expected_slot_code: Slot the container should occupy, e.g. "2R".
    """

    container_id: str
    expected_weight_kg: float
    expected_slot_code: str
