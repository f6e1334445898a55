"""
Loading plan.

Expected container placements and per-slot weight limits, read from
line-oriented plan files:

    ContainerID=AKE123, Weight=4800, Position=2R
"""

from ramp_placement.planning.loading_plan import LoadingPlan
from ramp_placement.planning.parser import (
    parse_file,
    parse_line,
    parse_lines,
    parse_resource,
    parse_stream,
    parse_text,
    sample_plan_content,
)
from ramp_placement.planning.types import PlanEntry

__all__ = [
    "LoadingPlan",
    "PlanEntry",
    "parse_file",
    "parse_line",
    "parse_lines",
    "parse_resource",
    "parse_stream",
    "parse_text",
    "sample_plan_content",
]
