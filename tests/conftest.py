"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

import math

import pytest

from ramp_placement.aircraft.types import AircraftProfile
from ramp_placement.common.types import Pose
from ramp_placement.geometry.converter import RampCoordinateConverter
from ramp_placement.planning.loading_plan import LoadingPlan


@pytest.fixture
def anchor_pose():
    """Reference pose of the ramp's top-left corner at the world origin."""
    return Pose.identity()


@pytest.fixture
def rotated_anchor_pose():
    """Reference pose turned 90 degrees about +Y and offset from the origin."""
    return Pose.from_axis_angle((0.0, 1.0, 0.0), math.pi / 2.0, translation=(2.0, 0.5, -3.0))


@pytest.fixture
def aircraft_a_profile():
    """8m x 20m ramp, 4 rows, 5000 kg on every slot."""
    limits = {f"{row}{side}": 5000.0 for row in range(1, 5) for side in ("L", "R")}
    return AircraftProfile(
        type_tag="AIRCRAFT_A",
        display_name="Aircraft A",
        ramp_width_m=8.0,
        ramp_length_m=20.0,
        total_rows=4,
        weight_limits_kg=limits,
    )


@pytest.fixture
def converter(anchor_pose, aircraft_a_profile):
    """Converter for Aircraft A anchored at the origin."""
    return RampCoordinateConverter.from_profile(anchor_pose, aircraft_a_profile)


@pytest.fixture
def demo_plan():
    """AKE123 -> 2R (4800 kg), AKE456 -> 1L (3000 kg), 5000 kg limits on 4 rows."""
    return LoadingPlan.create_demo_plan()
