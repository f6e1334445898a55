"""
Placement Simulator.

Replays container placements through a ramp session without an AR device
and prints the verdict for each one.

Usage:
    # Place AKE123 at slot 2R, then AKE456 at ramp-local (1.5, -12.0) meters
    python scripts/simulate_placements.py AKE123@2R AKE456@1.5,-12.0

    # Explicit weight, aircraft and plan file
    python scripts/simulate_placements.py PMC001@3L:5200 --aircraft AIRCRAFT_B --plan plan.txt

    # Ramp rotated 90 degrees about the vertical axis
    python scripts/simulate_placements.py AKE123@2R --reference 1.0,0.0,-2.0 --yaw 90
"""

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Optional, Tuple

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ramp_placement.common.types import Pose  # noqa: E402
from ramp_placement.geometry.slot import SlotIdentifier  # noqa: E402
from ramp_placement.session import RampSession, get_default_config, load_config  # noqa: E402

logger = logging.getLogger(__name__)


def parse_placement(text: str) -> Tuple[str, str, Optional[float]]:
    """Split "ID@TARGET[:WEIGHT]" into its parts."""
    container_id, sep, rest = text.partition("@")
    if not sep or not container_id or not rest:
        raise argparse.ArgumentTypeError(
            f"Invalid placement '{text}' (expected ID@SLOT or ID@X,Z, optional :WEIGHT)"
        )

    target, _, weight_text = rest.partition(":")
    weight = None
    if weight_text:
        try:
            weight = float(weight_text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(f"Invalid weight in '{text}'") from e

    return container_id, target, weight


def parse_vector(text: str) -> Tuple[float, ...]:
    try:
        return tuple(float(v) for v in text.split(","))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid coordinates '{text}'") from e


def target_to_world(session: RampSession, target: str) -> Pose:
    """World pose for a slot code or a ramp-local "x,z" pair."""
    converter = session.converter
    slot = SlotIdentifier.parse(target)
    if slot is not None:
        return converter.slot_to_world(slot)

    try:
        coords = tuple(float(v) for v in target.split(","))
    except ValueError as e:
        raise ValueError(f"Invalid target '{target}'") from e
    if len(coords) != 2:
        raise ValueError(f"Invalid target '{target}'")
    local = Pose.from_translation(coords[0], 0.0, coords[1])
    return converter.reference_pose.compose(local)


def main():
    """Main entry point for the placement simulator."""
    parser = argparse.ArgumentParser(
        description="Replay container placements through a ramp session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "placements",
        nargs="+",
        type=parse_placement,
        help="Placements as ID@SLOT or ID@X,Z (ramp-local meters), optional :WEIGHT",
    )
    parser.add_argument("--config", type=Path, default=None, help="Session config YAML")
    parser.add_argument("--aircraft", type=str, default=None, help="Aircraft type tag")
    parser.add_argument("--plan", type=Path, default=None, help="Loading plan file")
    parser.add_argument(
        "--reference",
        type=parse_vector,
        default=(0.0, 0.0, 0.0),
        help="World position of the ramp's top-left corner (default: 0,0,0)",
    )
    parser.add_argument(
        "--yaw", type=float, default=0.0, help="Ramp heading in degrees (default: 0)"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = load_config(args.config) if args.config else get_default_config()
    updates = {"use_demo_targets": False}
    if args.aircraft:
        updates["aircraft_type"] = args.aircraft
    if args.plan:
        updates["plan_file"] = args.plan
    config = config.model_copy(update=updates)

    if len(args.reference) != 3:
        parser.error("--reference needs x,y,z")

    session = RampSession(config=config)
    reference = Pose.from_axis_angle(
        (0.0, 1.0, 0.0), math.radians(args.yaw), translation=args.reference
    )
    session.establish_reference(reference)

    print("=" * 60)
    print(f"  Aircraft: {session.profile.display_name}")
    print(f"  Slots: {', '.join(cell.label for cell in session.grid_snapshot())}")
    print("=" * 60)

    failures = 0
    for container_id, target, weight in args.placements:
        print()
        try:
            world_pose = target_to_world(session, target)
            logger.debug(f"{container_id} at {target} -> {world_pose}")
            outcome = session.handle_placement(world_pose, container_id, weight)
        except ValueError as e:
            print(f"✗ {container_id}: {e}")
            failures += 1
            continue

        if outcome is None:
            print(f"{container_id}: placement at {target} is outside the ramp, ignored")
            failures += 1
            continue

        print(outcome.result.get_message())
        if not outcome.is_pass():
            failures += 1

    print()
    print("=" * 60)
    print(f"  {len(args.placements) - failures}/{len(args.placements)} placements passed")
    print("=" * 60)
    return 0 if failures == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
