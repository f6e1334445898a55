"""
Shared constants for ramp placement.

This module contains constants used across multiple modules to ensure
consistency and avoid duplication.
"""

import sys

# ============================================================================
# Weight Limits
# ============================================================================
# Sentinel for slots without a configured limit. Every finite weight
# compares as within this limit.
UNLIMITED_WEIGHT_KG = sys.float_info.max

# ============================================================================
# Plan File Format
# ============================================================================
PLAN_KEY_CONTAINER_ID = "ContainerID"
PLAN_KEY_WEIGHT = "Weight"
PLAN_KEY_POSITION = "Position"
PLAN_SEGMENTS_PER_LINE = 3
PLAN_COMMENT_PREFIX = "#"

# ============================================================================
# Tabletop Demo Grid
# ============================================================================
# Small grid used when demonstrating on a desk instead of a real ramp
TABLETOP_SIDE_WIDTH_M = 0.15
TABLETOP_ROW_SPACING_M = 0.25
