"""
Aircraft profiles.

Static ramp specifications (dimensions, rows, per-slot weight limits)
loaded from a YAML catalogue and selected by aircraft type.
"""

from ramp_placement.aircraft.config_loader import (
    AircraftProfileConfig,
    ProfileCatalogConfig,
    get_default_catalog,
    load_profiles,
)
from ramp_placement.aircraft.registry import ProfileRegistry, load_registry
from ramp_placement.aircraft.types import AircraftProfile

__all__ = [
    "AircraftProfile",
    "AircraftProfileConfig",
    "ProfileCatalogConfig",
    "ProfileRegistry",
    "get_default_catalog",
    "load_profiles",
    "load_registry",
]
