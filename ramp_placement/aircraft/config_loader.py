"""
Configuration loader with Pydantic validation for the Aircraft module.

Loads the aircraft profile catalogue from YAML. New aircraft are added by
editing profiles.yaml (or passing another catalogue file), not by
changing code.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from ramp_placement.aircraft.types import AircraftProfile
from ramp_placement.geometry.slot import SlotIdentifier

logger = logging.getLogger(__name__)

# Default catalogue path (relative to this file)
DEFAULT_PROFILES_PATH = Path(__file__).parent / "profiles.yaml"


class AircraftProfileConfig(BaseModel):
    """One aircraft entry of the catalogue.

    Attributes:
        display_name: Human-readable name (defaults to the catalogue key)
        ramp_width_m: Total ramp width spanning both sides (meters)
        ramp_length_m: Total ramp length spanning all rows (meters)
        total_rows: Number of rows
        row_limits_kg: Weight limit per row, applied to both sides
        slot_limits_kg: Per-slot overrides keyed by slot code
    """

    display_name: Optional[str] = None
    ramp_width_m: float = Field(..., gt=0.0)
    ramp_length_m: float = Field(..., gt=0.0)
    total_rows: int = Field(..., ge=1)
    row_limits_kg: List[float] = Field(default_factory=list)
    slot_limits_kg: Dict[str, float] = Field(default_factory=dict)

    @field_validator("row_limits_kg")
    @classmethod
    def _validate_row_limits(cls, v: List[float]) -> List[float]:
        for i, limit in enumerate(v, start=1):
            if limit < 0:
                raise ValueError(f"row {i} limit cannot be negative, got {limit}")
        return v

    @field_validator("slot_limits_kg")
    @classmethod
    def _validate_slot_limits(cls, v: Dict[str, float]) -> Dict[str, float]:
        normalized = {}
        for code, limit in v.items():
            slot = SlotIdentifier.parse(str(code))
            if slot is None:
                raise ValueError(f"invalid slot code '{code}'")
            if limit < 0:
                raise ValueError(f"limit for {code} cannot be negative, got {limit}")
            normalized[slot.as_code()] = limit
        return normalized

    @model_validator(mode="after")
    def _validate_against_rows(self) -> "AircraftProfileConfig":
        if len(self.row_limits_kg) > self.total_rows:
            raise ValueError(
                f"row_limits_kg has {len(self.row_limits_kg)} entries "
                f"but total_rows is {self.total_rows}"
            )
        for code in self.slot_limits_kg:
            slot = SlotIdentifier.parse(code)
            if slot.row > self.total_rows:
                raise ValueError(
                    f"slot {code} is beyond total_rows ({self.total_rows})"
                )
        return self

    def weight_limits(self) -> Dict[str, float]:
        """Expand row limits and slot overrides into a code -> kg table."""
        limits: Dict[str, float] = {}
        for row, limit in enumerate(self.row_limits_kg, start=1):
            limits[f"{row}L"] = limit
            limits[f"{row}R"] = limit
        limits.update(self.slot_limits_kg)
        return limits

    def to_profile(self, type_tag: str) -> AircraftProfile:
        return AircraftProfile(
            type_tag=type_tag,
            display_name=self.display_name or type_tag,
            ramp_width_m=self.ramp_width_m,
            ramp_length_m=self.ramp_length_m,
            total_rows=self.total_rows,
            weight_limits_kg=self.weight_limits(),
        )


class ProfileCatalogConfig(BaseModel):
    """Complete aircraft catalogue.

    Attributes:
        default_profile: Tag used when an unknown aircraft type is requested
        profiles: Aircraft entries keyed by type tag
    """

    default_profile: str = "AIRCRAFT_A"
    profiles: Dict[str, AircraftProfileConfig]

    @field_validator("profiles")
    @classmethod
    def _normalize_tags(
        cls, v: Dict[str, AircraftProfileConfig]
    ) -> Dict[str, AircraftProfileConfig]:
        if not v:
            raise ValueError("At least one aircraft profile must be defined")
        return {normalize_type_tag(tag): entry for tag, entry in v.items()}

    @model_validator(mode="after")
    def _validate_default(self) -> "ProfileCatalogConfig":
        self.default_profile = normalize_type_tag(self.default_profile)
        if self.default_profile not in self.profiles:
            raise ValueError(
                f"default_profile '{self.default_profile}' is not defined in profiles"
            )
        return self

    def to_profiles(self) -> Dict[str, AircraftProfile]:
        return {tag: entry.to_profile(tag) for tag, entry in self.profiles.items()}


# Used only when the bundled catalogue file is missing
_FALLBACK_CATALOG = {
    "default_profile": "AIRCRAFT_A",
    "profiles": {
        "AIRCRAFT_A": {
            "display_name": "Aircraft A",
            "ramp_width_m": 8.0,
            "ramp_length_m": 20.0,
            "total_rows": 4,
            "row_limits_kg": [5000.0, 5000.0, 5000.0, 5000.0],
        }
    },
}


def normalize_type_tag(type_tag: str) -> str:
    """Canonical registry key: trimmed and upper-case."""
    return type_tag.strip().upper()


def load_profiles(config_path: Path = DEFAULT_PROFILES_PATH) -> ProfileCatalogConfig:
    """
    Load and validate an aircraft catalogue from YAML.

    Args:
        config_path: Path to the catalogue YAML file.

    Returns:
        Validated ProfileCatalogConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If YAML parsing fails.
        pydantic.ValidationError: If the catalogue is invalid.

    Example:
        >>> catalog = load_profiles()
        >>> catalog.profiles["BOEING_737"].total_rows
        3
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Profile catalogue not found: {config_path}")

    logger.debug(f"Loading aircraft profiles from {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    catalog = ProfileCatalogConfig(**(raw or {}))
    logger.info(
        f"Loaded {len(catalog.profiles)} aircraft profiles "
        f"(default: {catalog.default_profile})"
    )
    return catalog


def get_default_catalog() -> ProfileCatalogConfig:
    """Catalogue from the bundled profiles.yaml, or a one-aircraft fallback."""
    if DEFAULT_PROFILES_PATH.exists():
        return load_profiles(DEFAULT_PROFILES_PATH)

    logger.warning(
        f"Bundled catalogue missing at {DEFAULT_PROFILES_PATH}, using fallback"
    )
    return ProfileCatalogConfig(**_FALLBACK_CATALOG)
