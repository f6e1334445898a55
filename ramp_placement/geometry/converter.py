"""
Ramp coordinate converter.

Converts between AR world poses and the ramp's discrete slot grid:

    world pose -> ramp-local (x, y, z) -> normalized (nx, nz) -> slot

The ramp frame is defined by a single reference pose placed at the
ramp's top-left (front-left) corner. Grid layout as seen from above:

      1L | 1R     <- row 1, nearest the reference corner
      2L | 2R
      ...
      NL | NR

Local +X points from the left side to the right side. The forward
direction of the reference frame is -Z, so depth into the ramp is -z.
"""

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from ramp_placement.common.types import Pose
from ramp_placement.geometry.slot import Side, SlotIdentifier, clamp_row

if TYPE_CHECKING:
    from ramp_placement.aircraft.types import AircraftProfile

logger = logging.getLogger(__name__)


class RampCoordinateConverter:
    """
    Anchor-relative geometry for one ramp session.

    All conversions are pure functions of (reference pose, target pose,
    ramp dimensions). The reference pose is never modified.

    Args:
        reference_pose: World pose of the ramp's top-left corner.
        ramp_width_m: Total width spanning both sides (meters).
        ramp_length_m: Total length spanning all rows (meters).
        total_rows: Number of rows (>= 1).

    Raises:
        ValueError: If the reference pose is missing or a dimension is invalid.

    Example:
        >>> anchor = Pose.from_translation(0.0, 0.0, 0.0)
        >>> converter = RampCoordinateConverter(anchor, 8.0, 20.0, 4)
        >>> converter.to_slot(Pose.from_translation(6.0, 0.0, -7.5)).as_code()
        '2R'
    """

    def __init__(
        self,
        reference_pose: Optional[Pose],
        ramp_width_m: float,
        ramp_length_m: float,
        total_rows: int,
    ):
        if reference_pose is None:
            raise ValueError("reference_pose cannot be None")
        if ramp_width_m <= 0 or ramp_length_m <= 0:
            raise ValueError(
                f"Ramp dimensions must be positive, got "
                f"{ramp_width_m} x {ramp_length_m}"
            )
        if total_rows < 1:
            raise ValueError(f"total_rows must be >= 1, got {total_rows}")

        self._reference_pose = reference_pose
        self._reference_inverse = reference_pose.inverse()
        self.ramp_width_m = float(ramp_width_m)
        self.ramp_length_m = float(ramp_length_m)
        self.total_rows = int(total_rows)

        # One side's width, one row's depth
        self.cell_width = self.ramp_width_m / 2.0
        self.cell_height = self.ramp_length_m / self.total_rows

        logger.debug(
            f"Converter ready: {self.ramp_width_m:.2f}m x {self.ramp_length_m:.2f}m, "
            f"{self.total_rows} rows, cell {self.cell_width:.3f}m x {self.cell_height:.3f}m"
        )

    @classmethod
    def from_profile(
        cls, reference_pose: Pose, profile: "AircraftProfile"
    ) -> "RampCoordinateConverter":
        """Create a converter sized to an aircraft profile's ramp."""
        return cls(
            reference_pose,
            profile.ramp_width_m,
            profile.ramp_length_m,
            profile.total_rows,
        )

    @property
    def reference_pose(self) -> Pose:
        return self._reference_pose

    # ------------------------------------------------------------------
    # World -> ramp
    # ------------------------------------------------------------------

    def to_local_pose(self, world_pose: Pose) -> Pose:
        """Full 6-DOF pose relative to the reference: inverse(reference) * world."""
        return self._reference_inverse.compose(world_pose)

    def to_local(self, world_pose: Pose) -> Tuple[float, float, float]:
        """Ramp-local (x, y, z) of a world pose."""
        return self.to_local_pose(world_pose).translation

    def normalize(self, local: Tuple[float, ...]) -> Tuple[float, float]:
        """
        Normalize local coordinates so the ramp footprint maps to [0, 1]^2.

        Args:
            local: (x, y, z) as returned by to_local.

        Returns:
            (nx, nz): nx runs left -> right, nz runs front -> back.
        """
        x, _, z = local
        return x / self.ramp_width_m, -z / self.ramp_length_m

    def to_normalized(self, world_pose: Pose) -> Tuple[float, float]:
        return self.normalize(self.to_local(world_pose))

    def to_slot(self, world_pose: Pose) -> SlotIdentifier:
        """
        Slot containing a world pose.

        Never rejects: poses beyond the ramp clamp to the nearest row and
        always get a side. Use is_on_ramp to filter out-of-footprint poses.
        """
        x, _, z = self.to_local(world_pose)

        side = Side.LEFT if x < self.cell_width else Side.RIGHT
        row = clamp_row(-z / self.cell_height, self.total_rows)

        slot = SlotIdentifier(row=row, side=side)
        logger.debug(f"Local ({x:.3f}, {z:.3f}) -> slot {slot}")
        return slot

    def is_on_ramp(self, world_pose: Pose) -> bool:
        """True if the pose lies inside the modeled ramp footprint (edges inclusive)."""
        nx, nz = self.to_normalized(world_pose)
        return 0.0 <= nx <= 1.0 and 0.0 <= nz <= 1.0

    # ------------------------------------------------------------------
    # Ramp -> world
    # ------------------------------------------------------------------

    def slot_center_local(self, slot: SlotIdentifier) -> Tuple[float, float, float]:
        """Ramp-local center of a slot's cell, on the ramp plane (y = 0)."""
        if slot.side == Side.LEFT:
            local_x = self.cell_width / 2.0
        else:
            local_x = self.cell_width * 1.5
        local_z = -((slot.row - 0.5) * self.cell_height)
        return (local_x, 0.0, local_z)

    def slot_to_world(self, slot: SlotIdentifier) -> Pose:
        """
        World pose at the center of a slot, for visualization anchors.

        The result carries the reference pose's orientation.
        """
        local_pose = Pose.from_translation(*self.slot_center_local(slot))
        return self._reference_pose.compose(local_pose)
