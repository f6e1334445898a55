"""
Ramp session.

Host-facing controller that owns the ramp reference pose, converts
placement poses to slots, evaluates them, and keeps grid state for the
presentation layer.

Example:
    >>> from ramp_placement.session import RampSession
    >>> session = RampSession()
    >>> outcome = session.handle_placement(anchor_pose)
    >>> print(outcome.result.get_message())
"""

from ramp_placement.session.config_loader import (
    SessionConfig,
    get_default_config,
    load_config,
)
from ramp_placement.session.controller import RampSession
from ramp_placement.session.grid import GridCell, RampGrid
from ramp_placement.session.targets import (
    DemoTarget,
    DemoTargetCycle,
    build_demo_targets,
)
from ramp_placement.session.types import PlacementOutcome

__all__ = [
    "DemoTarget",
    "DemoTargetCycle",
    "GridCell",
    "PlacementOutcome",
    "RampGrid",
    "RampSession",
    "SessionConfig",
    "build_demo_targets",
    "get_default_config",
    "load_config",
]
