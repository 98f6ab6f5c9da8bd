"""
Volume and footprint geometry for trenches and bell holes.

Computes bank volume, surface (top) area, floor area and perimeter for the
selected topology. Sloped and benched walls are approximated as trapezoids;
the formulas are the accepted estimating approximations and are not exact
solids.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from trenchcalc.core.estimator.dimensions import ResolvedSegment
from trenchcalc.models.excavation import ExcShape
from trenchcalc.models.reference import ShoringType

logger = logging.getLogger(__name__)

# Bench width per side as a fraction of depth
BENCH_WIDTH_RATIO = 0.5

# Footprint area = perimeter x width x factor for irregular bell holes
NONSTANDARD_SHAPE_FACTOR = 0.25


@dataclass(frozen=True)
class ExcavationGeometry:
    """
    Unrounded geometry of an excavation.

    Attributes:
        bank_vol_cf: Undisturbed volume in cubic feet
        surface_area_sf: Area at grade (top of cut)
        floor_area_sf: Area at the bottom of the excavation
        perimeter_ft: Perimeter at grade, used for saw cutting
        effective_length: Length used in the volume computation
        effective_width: Bottom width used in the volume computation
        effective_depth: Excavation depth used in the volume computation
    """

    bank_vol_cf: float
    surface_area_sf: float
    floor_area_sf: float
    perimeter_ft: float
    effective_length: float
    effective_width: float
    effective_depth: float


def top_width_ft(
    bottom_width_ft: float,
    depth_ft: float,
    shoring_type: ShoringType,
    slope_ratio: float,
) -> float:
    """
    Width of the cut at grade for a wall treatment.

    Args:
        bottom_width_ft: Width at the excavation floor
        depth_ft: Excavation depth
        shoring_type: Wall treatment
        slope_ratio: Horizontal run per unit depth for sloped walls

    Returns:
        Top width in feet
    """
    if shoring_type == ShoringType.SLOPED:
        return bottom_width_ft + 2 * depth_ft * slope_ratio
    if shoring_type == ShoringType.BENCHED:
        return bottom_width_ft + 2 * depth_ft * BENCH_WIDTH_RATIO
    return bottom_width_ft


def prism_volume_cf(
    length_ft: float,
    bottom_width_ft: float,
    depth_ft: float,
    shoring_type: ShoringType,
    slope_ratio: float,
) -> float:
    """
    Volume of a straight run with the given wall treatment.

    Rectangular for vertical walls, trapezoidal (average of top and bottom
    width) for sloped and benched walls.
    """
    top = top_width_ft(bottom_width_ft, depth_ft, shoring_type, slope_ratio)
    return length_ft * (bottom_width_ft + top) / 2 * depth_ft


class SegmentAccumulator:
    """
    Running totals over variable-depth segments.

    Effective width and depth are length-weighted averages:
    sum(length * width) / sum(length), likewise for depth.
    """

    def __init__(self, shoring_type: ShoringType, slope_ratio: float) -> None:
        self.shoring_type = shoring_type
        self.slope_ratio = slope_ratio
        self.total_length_ft = 0.0
        self.sum_length_width = 0.0
        self.sum_length_depth = 0.0
        self.bank_vol_cf = 0.0
        self.surface_area_sf = 0.0

    def add(self, segment: ResolvedSegment) -> None:
        """Accumulate one resolved segment."""
        length = segment.length_ft
        self.bank_vol_cf += prism_volume_cf(
            length, segment.width_ft, segment.depth_ft, self.shoring_type, self.slope_ratio
        )
        self.surface_area_sf += length * top_width_ft(
            segment.width_ft, segment.depth_ft, self.shoring_type, self.slope_ratio
        )
        self.total_length_ft += length
        self.sum_length_width += length * segment.width_ft
        self.sum_length_depth += length * segment.depth_ft

    @property
    def floor_area_sf(self) -> float:
        return self.sum_length_width

    def weighted_width(self, fallback: float) -> float:
        if self.total_length_ft > 0:
            return self.sum_length_width / self.total_length_ft
        return fallback

    def weighted_depth(self, fallback: float) -> float:
        if self.total_length_ft > 0:
            return self.sum_length_depth / self.total_length_ft
        return fallback


def segmented_geometry(
    segments: Iterable[ResolvedSegment],
    shoring_type: ShoringType,
    slope_ratio: float,
    fallback_width_ft: float,
    fallback_depth_ft: float,
) -> ExcavationGeometry:
    """
    Geometry of a variable-depth excavation.

    Each segment contributes its own volume and top area. The perimeter uses
    the weighted-average width.

    Args:
        segments: Resolved segments in order
        shoring_type: Wall treatment
        slope_ratio: Horizontal run per unit depth for sloped walls
        fallback_width_ft: Width reported when segments have no length
        fallback_depth_ft: Depth reported when segments have no length

    Returns:
        ExcavationGeometry
    """
    acc = SegmentAccumulator(shoring_type, slope_ratio)
    for segment in segments:
        acc.add(segment)

    length = acc.total_length_ft
    width = acc.weighted_width(fallback_width_ft)
    depth = acc.weighted_depth(fallback_depth_ft)

    return ExcavationGeometry(
        bank_vol_cf=acc.bank_vol_cf,
        surface_area_sf=acc.surface_area_sf,
        floor_area_sf=acc.floor_area_sf,
        perimeter_ft=2 * (length + width),
        effective_length=length,
        effective_width=width,
        effective_depth=depth,
    )


def trench_geometry(
    length_ft: float,
    width_ft: float,
    depth_ft: float,
    shoring_type: ShoringType,
    slope_ratio: float,
) -> ExcavationGeometry:
    """Geometry of a single-depth trench."""
    top = top_width_ft(width_ft, depth_ft, shoring_type, slope_ratio)
    return ExcavationGeometry(
        bank_vol_cf=prism_volume_cf(length_ft, width_ft, depth_ft, shoring_type, slope_ratio),
        surface_area_sf=length_ft * top,
        floor_area_sf=length_ft * width_ft,
        perimeter_ft=2 * (length_ft + width_ft),
        effective_length=length_ft,
        effective_width=width_ft,
        effective_depth=depth_ft,
    )


def bellhole_geometry(
    shape: ExcShape,
    length_ft: float,
    width_ft: float,
    depth_ft: float,
    side_lengths_ft: Iterable[float] = (),
) -> ExcavationGeometry:
    """
    Geometry of a single-depth bell hole.

    Square holes use the length as the side. Non-standard footprints are
    approximated as perimeter x width x 0.25.

    Args:
        shape: Footprint shape
        length_ft: Length (side for square holes)
        width_ft: Width (average width for non-standard holes)
        depth_ft: Excavation depth
        side_lengths_ft: Side lengths of a non-standard footprint

    Returns:
        ExcavationGeometry
    """
    if shape == ExcShape.SQUARE:
        area = length_ft * length_ft
        perimeter = 4 * length_ft
        width_ft = length_ft
    elif shape == ExcShape.RECTANGLE:
        area = length_ft * width_ft
        perimeter = 2 * (length_ft + width_ft)
    else:
        perimeter = sum(side or 0.0 for side in side_lengths_ft)
        area = perimeter * width_ft * NONSTANDARD_SHAPE_FACTOR

    return ExcavationGeometry(
        bank_vol_cf=area * depth_ft,
        surface_area_sf=area,
        floor_area_sf=area,
        perimeter_ft=perimeter,
        effective_length=length_ft,
        effective_width=width_ft,
        effective_depth=depth_ft,
    )
