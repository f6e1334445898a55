"""
Ramp session controller.

Glue between the AR host application and the placement core:

1. Build the loading plan (plan file or bundled sample, plus the
   aircraft's weight limits)
2. Establish the ramp reference pose once, from the first placement
3. Convert each placement pose to a slot and evaluate it
4. Keep the grid state and the suggested-slot anchor pose up to date

The host only supplies world poses and reads back PlacementOutcome and
RampGrid state.
"""

import logging
import threading
from typing import List, Optional

from ramp_placement.aircraft.registry import ProfileRegistry, load_registry
from ramp_placement.aircraft.types import AircraftProfile
from ramp_placement.common.types import Pose
from ramp_placement.evaluation.evaluator import PlacementEvaluator
from ramp_placement.geometry.converter import RampCoordinateConverter
from ramp_placement.geometry.slot import SlotIdentifier
from ramp_placement.planning.loading_plan import LoadingPlan
from ramp_placement.planning.parser import parse_file, parse_resource
from ramp_placement.session.config_loader import SessionConfig, get_default_config
from ramp_placement.session.grid import GridCell, RampGrid
from ramp_placement.session.targets import (
    DemoTarget,
    DemoTargetCycle,
    build_demo_targets,
)
from ramp_placement.session.types import PlacementOutcome

logger = logging.getLogger(__name__)


class RampSession:
    """
    One ramp loading session.

    Args:
        config: Session configuration. If None, loads the bundled config.yaml.
        registry: Aircraft registry. If None, loads config.profiles_file or
            the bundled catalogue.
        plan: Pre-built loading plan. If None, reads config.plan_file or the
            bundled sample plan.

    Example:
        >>> session = RampSession()
        >>> outcome = session.handle_placement(Pose.from_translation(0.5, 0.0, -0.5))
        >>> outcome.slot_code
        '1L'
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        registry: Optional[ProfileRegistry] = None,
        plan: Optional[LoadingPlan] = None,
    ):
        self.config = config if config is not None else get_default_config()

        if registry is None:
            registry = load_registry(self.config.profiles_file)
        self.profile: AircraftProfile = registry.get(self.config.aircraft_type)
        logger.info(
            f"Using aircraft: {self.profile.display_name}, "
            f"rows={self.profile.total_rows}"
        )

        self.plan = plan if plan is not None else self._load_plan()
        self.plan.apply_limits(self.profile)

        self.targets: Optional[DemoTargetCycle] = None
        if self.config.use_demo_targets:
            self.targets = DemoTargetCycle(build_demo_targets(self.profile))
            self.targets.register_in(self.plan)

        self.evaluator = PlacementEvaluator(self.plan, self.profile.total_rows)

        self._lock = threading.RLock()
        self._converter: Optional[RampCoordinateConverter] = None
        self._grid: Optional[RampGrid] = None
        self._last_outcome: Optional[PlacementOutcome] = None

    def _load_plan(self) -> LoadingPlan:
        try:
            if self.config.plan_file is not None:
                return parse_file(self.config.plan_file)
            return parse_resource()
        except OSError as e:
            logger.warning(f"Failed to load loading plan, falling back to demo plan: {e}")
            return LoadingPlan.create_demo_plan()

    # ------------------------------------------------------------------
    # Reference pose
    # ------------------------------------------------------------------

    @property
    def grid_dimensions(self):
        """(width, length) of the modeled ramp in meters."""
        if self.config.grid_scale == "tabletop":
            return (
                self.config.tabletop_side_width_m * 2.0,
                self.config.tabletop_row_spacing_m * self.profile.total_rows,
            )
        return self.profile.ramp_width_m, self.profile.ramp_length_m

    def establish_reference(self, reference_pose: Pose) -> bool:
        """
        Set the ramp's top-left corner.

        Only the first call has an effect for the lifetime of the session.

        Returns:
            True if the reference was established by this call.
        """
        if reference_pose is None:
            raise ValueError("reference_pose cannot be None")

        with self._lock:
            if self._converter is not None:
                return False

            width, length = self.grid_dimensions
            self._converter = RampCoordinateConverter(
                reference_pose, width, length, self.profile.total_rows
            )
            self._grid = RampGrid(self._converter)

        logger.info(
            f"Ramp reference established at "
            f"({reference_pose.tx:.3f}, {reference_pose.ty:.3f}, {reference_pose.tz:.3f}) "
            f"grid={width:.2f}m x {length:.2f}m rows={self.profile.total_rows}"
        )
        return True

    @property
    def converter(self) -> Optional[RampCoordinateConverter]:
        with self._lock:
            return self._converter

    @property
    def has_reference(self) -> bool:
        with self._lock:
            return self._converter is not None

    def grid_snapshot(self) -> List[GridCell]:
        """
        Current grid cells in slot order, empty before the reference is set.

        Cells are immutable copies; later placements do not change them.
        """
        with self._lock:
            if self._grid is None:
                return []
            return self._grid.cells()

    def grid_cell(self, slot: SlotIdentifier) -> Optional[GridCell]:
        """Current cell for a slot, or None (unknown slot or no reference yet)."""
        with self._lock:
            if self._grid is None:
                return None
            return self._grid.cell(slot)

    @property
    def last_outcome(self) -> Optional[PlacementOutcome]:
        with self._lock:
            return self._last_outcome

    @property
    def current_target(self) -> Optional[DemoTarget]:
        with self._lock:
            return self.targets.current() if self.targets is not None else None

    # ------------------------------------------------------------------
    # Placement events
    # ------------------------------------------------------------------

    def handle_placement(
        self,
        world_pose: Pose,
        container_id: Optional[str] = None,
        weight_kg: Optional[float] = None,
    ) -> Optional[PlacementOutcome]:
        """
        Evaluate one placement event.

        The first event also establishes the ramp reference at its pose.

        Args:
            world_pose: World pose of the placed container.
            container_id: Container placed. If None, the current demo target.
            weight_kg: Its weight. If None, the demo target's or planned weight.

        Returns:
            PlacementOutcome, or None if the event was ignored (outside the
            ramp with out_of_bounds="ignore", or no container to evaluate).

        Raises:
            ValueError: If no weight is given for a container absent from the plan.
        """
        with self._lock:
            if self._converter is None:
                self.establish_reference(world_pose)
            converter = self._converter

            local = converter.to_local(world_pose)
            normalized = converter.normalize(local)
            on_ramp = converter.is_on_ramp(world_pose)
            if not on_ramp and self.config.out_of_bounds == "ignore":
                logger.debug(
                    f"Tap outside ramp bounds (norm=({normalized[0]:.3f}, "
                    f"{normalized[1]:.3f})); ignoring"
                )
                return None

            target = None
            if container_id is None:
                target = self.current_target
                if target is None:
                    logger.warning("No container given and no demo targets; skipping")
                    return None
                container_id = target.container_id
                if weight_kg is None:
                    weight_kg = target.weight_kg

            if weight_kg is None:
                entry = self.plan.get_entry(container_id)
                if entry is None:
                    raise ValueError(
                        f"weight_kg is required for {container_id}, which is not in the plan"
                    )
                weight_kg = entry.expected_weight_kg

            slot = converter.to_slot(world_pose)
            logger.debug(
                f"RAMP local=({local[0]:.3f}, {local[2]:.3f}), "
                f"norm=({normalized[0]:.3f}, {normalized[1]:.3f}), slot={slot}"
            )

            result = self.evaluator.evaluate(container_id, weight_kg, slot)
            self._grid.record_placement(container_id, slot, result.overall_ok)

            suggested_pose = None
            if result.suggested_slot is not None:
                suggested_pose = converter.slot_to_world(result.suggested_slot)

            if target is not None:
                self.targets.advance()

            outcome = PlacementOutcome(
                result=result,
                local=local,
                normalized=normalized,
                on_ramp=on_ramp,
                suggested_world_pose=suggested_pose,
            )
            self._last_outcome = outcome
            return outcome

    def reset(self) -> None:
        """
        Start over: forget the reference pose, grid and occupancy.

        Demo targets restart from the first slot.
        """
        with self._lock:
            self._converter = None
            self._grid = None
            self._last_outcome = None
            self.evaluator.reset()
            if self.targets is not None:
                self.targets.reset()
        logger.info("Ramp session reset")
