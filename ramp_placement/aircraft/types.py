"""
Data types for the Aircraft module.

An AircraftProfile is the static description of one aircraft's cargo
ramp: its physical size, row count, and per-slot weight limits.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping

from ramp_placement.common.constants import UNLIMITED_WEIGHT_KG
from ramp_placement.geometry.slot import SlotIdentifier


@dataclass(frozen=True)
class AircraftProfile:
    """
    Immutable ramp specification for one aircraft type.

    Attributes:
        type_tag: Registry key, e.g. "AIRCRAFT_A".
        display_name: Human-readable name, e.g. "Aircraft A".
        ramp_width_m: Total ramp width spanning both sides (meters).
        ramp_length_m: Total ramp length spanning all rows (meters).
        total_rows: Number of rows; each row has an L and an R slot.
        weight_limits_kg: Slot code -> maximum weight (kg). Slots without
            an entry are unlimited.
    """

    type_tag: str
    display_name: str
    ramp_width_m: float
    ramp_length_m: float
    total_rows: int
    weight_limits_kg: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.ramp_width_m <= 0:
            raise ValueError(f"{self.type_tag}: ramp_width_m must be > 0")
        if self.ramp_length_m <= 0:
            raise ValueError(f"{self.type_tag}: ramp_length_m must be > 0")
        if self.total_rows < 1:
            raise ValueError(f"{self.type_tag}: total_rows must be >= 1")

        # Freeze the limit table so the profile cannot change after creation
        object.__setattr__(
            self,
            "weight_limits_kg",
            MappingProxyType({str(k): float(v) for k, v in self.weight_limits_kg.items()}),
        )

    def weight_limit_for(self, slot_code: str) -> float:
        """Limit for a slot, or UNLIMITED_WEIGHT_KG when not configured."""
        return self.weight_limits_kg.get(slot_code, UNLIMITED_WEIGHT_KG)

    def slot_codes(self) -> List[str]:
        """All slot codes of this ramp in enumeration order."""
        return [slot.as_code() for slot in SlotIdentifier.all_slots(self.total_rows)]

    def missing_limit_codes(self) -> List[str]:
        """Slots that have no configured weight limit."""
        return [code for code in self.slot_codes() if code not in self.weight_limits_kg]
