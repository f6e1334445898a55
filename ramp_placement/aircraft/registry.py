"""
Aircraft profile registry.

Looks up AircraftProfile objects by type tag. Unknown tags fall back to
the catalogue's default profile with a warning instead of failing.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ramp_placement.aircraft.config_loader import (
    ProfileCatalogConfig,
    get_default_catalog,
    load_profiles,
    normalize_type_tag,
)
from ramp_placement.aircraft.types import AircraftProfile

logger = logging.getLogger(__name__)


class ProfileRegistry:
    """
    Lookup table of aircraft profiles.

    Args:
        profiles: Profiles keyed by type tag.
        default_tag: Tag returned for unknown aircraft types.

    Example:
        >>> registry = load_registry()
        >>> registry.get("boeing_737").total_rows
        3
        >>> registry.get("UNKNOWN").type_tag
        'AIRCRAFT_A'
    """

    def __init__(self, profiles: Dict[str, AircraftProfile], default_tag: str):
        if not profiles:
            raise ValueError("ProfileRegistry needs at least one profile")

        self._profiles: Dict[str, AircraftProfile] = {
            normalize_type_tag(tag): profile for tag, profile in profiles.items()
        }
        self._default_tag = normalize_type_tag(default_tag)
        if self._default_tag not in self._profiles:
            raise ValueError(f"Default profile '{default_tag}' is not registered")

    @classmethod
    def from_config(cls, config: ProfileCatalogConfig) -> "ProfileRegistry":
        return cls(config.to_profiles(), config.default_profile)

    @property
    def default_tag(self) -> str:
        return self._default_tag

    @property
    def default_profile(self) -> AircraftProfile:
        return self._profiles[self._default_tag]

    def get(self, type_tag: Optional[str]) -> AircraftProfile:
        """
        Profile for an aircraft type.

        Matching ignores case and surrounding whitespace. A missing or
        unknown tag returns the default profile.
        """
        key = normalize_type_tag(type_tag) if type_tag else ""
        profile = self._profiles.get(key)
        if profile is None:
            logger.warning(
                f"Invalid aircraft type: '{type_tag}', using default {self._default_tag}"
            )
            return self.default_profile

        return profile

    def register(self, profile: AircraftProfile) -> None:
        """Add a custom profile, replacing any profile with the same tag."""
        tag = normalize_type_tag(profile.type_tag)
        if tag in self._profiles:
            logger.info(f"Replacing aircraft profile {tag}")
        self._profiles[tag] = profile

    def known_types(self) -> List[str]:
        return list(self._profiles)

    def __contains__(self, type_tag: object) -> bool:
        return isinstance(type_tag, str) and normalize_type_tag(type_tag) in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


def load_registry(config_path: Optional[Path] = None) -> ProfileRegistry:
    """
    Build a registry from a catalogue file.

    Args:
        config_path: Catalogue YAML. If None, uses the bundled profiles.yaml.
    """
    config = load_profiles(config_path) if config_path else get_default_catalog()
    return ProfileRegistry.from_config(config)
