"""Configuration loader with Pydantic validation for ramp sessions.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

from ramp_placement.common.constants import (
    TABLETOP_ROW_SPACING_M,
    TABLETOP_SIDE_WIDTH_M,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class SessionConfig(BaseModel):
    """Ramp session configuration.

    Attributes:
        aircraft_type: Aircraft profile tag
        profiles_file: Custom aircraft catalogue (None = bundled)
        plan_file: Loading plan file (None = bundled sample plan)
        out_of_bounds: What to do with taps outside the ramp footprint
        grid_scale: Use profile dimensions or the small tabletop grid
        tabletop_side_width_m: Width of one side in tabletop mode
        tabletop_row_spacing_m: Depth of one row in tabletop mode
        use_demo_targets: Cycle through synthetic containers when none is given
    """

    aircraft_type: str = "AIRCRAFT_A"
    profiles_file: Optional[Path] = None
    plan_file: Optional[Path] = None
    out_of_bounds: Literal["ignore", "clamp"] = "ignore"
    grid_scale: Literal["profile", "tabletop"] = "profile"
    tabletop_side_width_m: float = Field(default=TABLETOP_SIDE_WIDTH_M, gt=0.0)
    tabletop_row_spacing_m: float = Field(default=TABLETOP_ROW_SPACING_M, gt=0.0)
    use_demo_targets: bool = True


def load_config(config_path: Path) -> SessionConfig:
    """Load and validate session configuration from a YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated SessionConfig

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config(Path("ramp_placement/session/config.yaml"))
        >>> config.out_of_bounds
        'ignore'
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    config = SessionConfig(**config_dict)
    logger.debug(f"Loaded session config from {config_path}: {config}")
    return config


def get_default_config() -> SessionConfig:
    """Get default configuration from the bundled config.yaml file."""
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return SessionConfig()
