"""
Width and depth resolution for excavation estimates.

Converts pipe size and the entered reference depth into the canonical
excavation dimensions every later stage works from.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from trenchcalc.core.estimator.units import to_ft
from trenchcalc.models.excavation import DepthMode, DepthSegment

logger = logging.getLogger(__name__)

# Slope used when a soil's ratio text cannot be read
DEFAULT_SLOPE_RATIO = 1.5

_DEPTH_LABELS = {
    DepthMode.TOTAL: "Total Depth",
    DepthMode.TOP_OF_PIPE: "Depth to Top of Pipe",
    DepthMode.CENTERLINE: "Depth to Centerline",
}


def min_trench_width_in(pipe_od: float) -> float:
    """
    Minimum trench width for a pipe.

    Args:
        pipe_od: Pipe outside diameter in inches

    Returns:
        Trench width in inches
    """
    if pipe_od < 3:
        return 12
    if pipe_od <= 16:
        return pipe_od + 12
    if pipe_od <= 34:
        return pipe_od + 18
    return pipe_od + 24


def resolve_excavation_depth(
    depth_ft: float,
    depth_mode: DepthMode,
    pipe_od_in: float,
    clearance_under_in: float,
) -> float:
    """
    Convert an entered depth to total excavation depth.

    Args:
        depth_ft: Depth as entered
        depth_mode: What the entered depth is measured to
        pipe_od_in: Pipe outside diameter in inches
        clearance_under_in: Excavation below the pipe in inches

    Returns:
        Total excavation depth in feet
    """
    if depth_mode == DepthMode.TOP_OF_PIPE:
        return depth_ft + to_ft(pipe_od_in) + to_ft(clearance_under_in)
    if depth_mode == DepthMode.CENTERLINE:
        return depth_ft + to_ft(pipe_od_in) / 2 + to_ft(clearance_under_in)
    return depth_ft


def depth_input_label(depth_mode: DepthMode) -> str:
    """Label describing what an entered depth is measured to."""
    return _DEPTH_LABELS[DepthMode(depth_mode)]


def parse_slope_ratio(ratio: Optional[str]) -> float:
    """
    Parse an "H:V" slope ratio into horizontal run per unit of depth.

    ``"vertical"`` means no horizontal run. Text that cannot be read falls
    back to 1.5:1.

    Args:
        ratio: Ratio text such as "1.5:1"

    Returns:
        Horizontal over vertical
    """
    if ratio == "vertical":
        return 0.0

    parts = (ratio or "").split(":")
    if len(parts) == 2:
        try:
            horizontal = float(parts[0])
            vertical = float(parts[1])
        except ValueError:
            pass
        else:
            if vertical != 0:
                return horizontal / vertical

    logger.warning(f"Unreadable slope ratio {ratio!r}, using {DEFAULT_SLOPE_RATIO}:1")
    return DEFAULT_SLOPE_RATIO


@dataclass(frozen=True)
class ResolvedSegment:
    """
    A depth segment with its dimensions resolved.

    Attributes:
        length_ft: Segment length, never negative
        width_ft: Bottom width
        depth_ft: Total excavation depth
    """

    length_ft: float
    width_ft: float
    depth_ft: float


def resolve_segment(
    segment: DepthSegment,
    auto_width_ft: float,
    is_trench: bool,
    fallback_depth_ft: float,
    pipe_od_in: float,
    clearance_under_in: float,
) -> ResolvedSegment:
    """
    Resolve one depth segment's length, width and excavation depth.

    A zero depth uses the excavation's entered depth. The width is the auto
    width when a trench segment opts into it, otherwise the segment's own
    width, otherwise the auto width.

    Args:
        segment: Segment as entered
        auto_width_ft: Minimum trench width for the pipe
        is_trench: Whether the excavation is a trench
        fallback_depth_ft: Entered depth of the whole excavation
        pipe_od_in: Pipe outside diameter in inches
        clearance_under_in: Excavation below the pipe in inches

    Returns:
        ResolvedSegment
    """
    raw_depth = segment.depth_ft or fallback_depth_ft
    depth = resolve_excavation_depth(
        raw_depth, segment.depth_mode, pipe_od_in, clearance_under_in
    )

    if is_trench and segment.use_auto_width:
        width = auto_width_ft
    else:
        width = segment.width_ft or auto_width_ft

    return ResolvedSegment(
        length_ft=max(0.0, segment.length_ft or 0.0),
        width_ft=width,
        depth_ft=depth,
    )
