"""Loading plan text parser.

Plan files are UTF-8 text with one entry per line:

    # Comment lines start with '#'
    ContainerID=AKE123, Weight=4800, Position=2R
    ContainerID=AKE456, Weight=3000, Position=1L

Each data line has exactly three comma-separated Key=Value segments, in
any order. Blank lines and comments are ignored. A line that cannot be
parsed is logged and skipped; the rest of the file is still read.

All entry points (stream, text, file, bundled resource) go through
parse_lines.
"""

import io
import logging
import math
from importlib import resources
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from ramp_placement.common.constants import (
    PLAN_COMMENT_PREFIX,
    PLAN_KEY_CONTAINER_ID,
    PLAN_KEY_POSITION,
    PLAN_KEY_WEIGHT,
    PLAN_SEGMENTS_PER_LINE,
)
from ramp_placement.planning.loading_plan import LoadingPlan
from ramp_placement.planning.types import PlanEntry

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_NAME = "sample_loading_plan.txt"


def parse_line(line: str) -> Optional[PlanEntry]:
    """Parse one data line into a PlanEntry.

    Args:
        line: A non-comment line, e.g. "ContainerID=AKE123, Weight=4800, Position=2R"

    Returns:
        PlanEntry, or None if the line is malformed. A missing Weight
        defaults to 0.0; a missing or empty ContainerID/Position is malformed.

    Example:
        >>> parse_line("Position=1L, ContainerID=AKE456, Weight=3000")
        PlanEntry(container_id='AKE456', expected_weight_kg=3000.0, expected_slot_code='1L')
        >>> parse_line("ContainerID=BAD") is None
        True
    """
    parts = line.split(",")
    if len(parts) != PLAN_SEGMENTS_PER_LINE:
        logger.warning(
            f"Invalid line format (expected {PLAN_SEGMENTS_PER_LINE} "
            f"comma-separated parts): {line}"
        )
        return None

    container_id = None
    weight = 0.0
    position = None

    for part in parts:
        key, sep, value = part.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()

        if key == PLAN_KEY_CONTAINER_ID:
            container_id = value or None
        elif key == PLAN_KEY_WEIGHT:
            try:
                weight = float(value)
            except ValueError:
                logger.warning(f"Invalid weight value: {value!r}")
                return None
            if not math.isfinite(weight):
                logger.warning(f"Invalid weight value: {value!r}")
                return None
        elif key == PLAN_KEY_POSITION:
            position = value or None

    if container_id is None or position is None:
        logger.warning(f"Missing required fields in line: {line}")
        return None

    return PlanEntry(
        container_id=container_id,
        expected_weight_kg=weight,
        expected_slot_code=position,
    )


def parse_lines(
    lines: Iterable[Union[str, bytes]], plan: Optional[LoadingPlan] = None
) -> LoadingPlan:
    """Parse plan lines into a LoadingPlan.

    Args:
        lines: Text lines (str, or UTF-8 bytes). Byte lines that are not
            valid UTF-8 are skipped like malformed lines.
        plan: Existing plan to add entries to. A new plan is created if None.

    Returns:
        The populated plan. Later entries for the same container replace
        earlier ones.
    """
    if plan is None:
        plan = LoadingPlan()

    parsed = 0
    skipped = 0
    for line_number, raw_line in enumerate(lines, start=1):
        if isinstance(raw_line, bytes):
            try:
                raw_line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                skipped += 1
                logger.warning(f"Failed to decode line {line_number} as UTF-8: {e}")
                continue
        line = raw_line.strip()
        if line_number == 1:
            line = line.lstrip("\ufeff")

        if not line or line.startswith(PLAN_COMMENT_PREFIX):
            continue

        entry = parse_line(line)
        if entry is None:
            skipped += 1
            logger.warning(f"Failed to parse line {line_number}: {line}")
            continue

        plan.put_entry(entry)
        parsed += 1

    logger.info(f"Parsed loading plan: {parsed} entries, {skipped} lines skipped")
    return plan


def parse_stream(stream: IO) -> LoadingPlan:
    """Parse a loading plan from an open text or binary stream."""
    return parse_lines(stream)


def parse_text(text: str) -> LoadingPlan:
    """Parse a loading plan from a string."""
    return parse_stream(io.StringIO(text))


def parse_file(file_path: Union[str, Path]) -> LoadingPlan:
    """Parse a loading plan file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Loading plan not found: {file_path}")

    logger.debug(f"Reading loading plan from {file_path}")
    # Binary mode so a bad byte only costs its own line
    with open(file_path, "rb") as f:
        return parse_stream(f)


def parse_resource(
    name: str = DEFAULT_RESOURCE_NAME, package: str = "ramp_placement.planning"
) -> LoadingPlan:
    """Parse a plan file bundled as package data.

    Raises:
        FileNotFoundError: If the resource does not exist.
    """
    resource = resources.files(package).joinpath(name)
    if not resource.is_file():
        raise FileNotFoundError(f"Bundled loading plan not found: {package}/{name}")

    with resource.open("rb") as f:
        return parse_stream(f)


def sample_plan_content() -> str:
    """Sample plan text, handy for demos and tests."""
    return (
        "# Sample Loading Plan\n"
        "# Format: ContainerID=X, Weight=Y, Position=Z\n"
        "\n"
        "ContainerID=AKE123, Weight=4800, Position=2R\n"
        "ContainerID=AKE456, Weight=3000, Position=1L\n"
        "ContainerID=AKE789, Weight=3500, Position=3L\n"
        "ContainerID=PMC001, Weight=4200, Position=2L\n"
    )
