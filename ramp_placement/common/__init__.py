"""
Common types and constants shared across all modules.

Provides the Pose value type used to exchange world-space positions and
orientations with the AR host application.
"""

from ramp_placement.common.constants import UNLIMITED_WEIGHT_KG
from ramp_placement.common.types import Pose

__all__ = ["Pose", "UNLIMITED_WEIGHT_KG"]
