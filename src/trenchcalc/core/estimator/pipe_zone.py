"""
Pipe-zone and backfill material quantities.

The pipe zone is bedding (0-sack slurry) under the pipe, then shading from
the bottom of the pipe to a fixed cover above it. Everything above the pipe
zone is final backfill. All material volumes are floor area x layer depth.
"""

from dataclasses import dataclass

from trenchcalc.core.estimator.units import cf_to_cy, to_ft
from trenchcalc.models.excavation import EstimatingSettings, SpoilsAction


@dataclass(frozen=True)
class PipeZoneQuantities:
    """
    Unrounded pipe-zone and backfill quantities.

    Attributes:
        bedding_depth_ft: Bedding thickness
        pipe_zone_depth_ft: Bedding + pipe OD + shading cover
        bedding_vol_cy: Bedding volume
        shading_vol_cy: Shading volume (pipe OD + cover)
        pipe_zone_vol_cy: Full pipe-zone volume
        final_backfill_cy: Backfill above the pipe zone, never negative
    """

    bedding_depth_ft: float
    pipe_zone_depth_ft: float
    bedding_vol_cy: float
    shading_vol_cy: float
    pipe_zone_vol_cy: float
    final_backfill_cy: float

    @property
    def total_backfill_cy(self) -> float:
        return self.bedding_vol_cy + self.shading_vol_cy + self.final_backfill_cy


def bedding_depth_ft(pipe_od_in: float, settings: EstimatingSettings) -> float:
    """Bedding thickness: the larger of the minimum and OD x multiplier."""
    return to_ft(
        max(settings.bedding_min_in, pipe_od_in * settings.bedding_depth_multiplier)
    )


def calculate_pipe_zone(
    pipe_od_in: float,
    floor_area_sf: float,
    excavation_depth_ft: float,
    settings: EstimatingSettings,
) -> PipeZoneQuantities:
    """
    Material quantities for the pipe zone and final backfill.

    Args:
        pipe_od_in: Pipe outside diameter
        floor_area_sf: Excavation floor area
        excavation_depth_ft: Effective excavation depth
        settings: Estimating settings

    Returns:
        PipeZoneQuantities; final backfill is 0 when the pipe zone is
        deeper than the excavation
    """
    pipe_od_ft = to_ft(pipe_od_in)
    shading_above_ft = to_ft(settings.shading_above_pipe_in)
    bedding_ft = bedding_depth_ft(pipe_od_in, settings)
    zone_ft = bedding_ft + pipe_od_ft + shading_above_ft

    final_cf = max(0.0, floor_area_sf * (excavation_depth_ft - zone_ft))

    return PipeZoneQuantities(
        bedding_depth_ft=bedding_ft,
        pipe_zone_depth_ft=zone_ft,
        bedding_vol_cy=cf_to_cy(floor_area_sf * bedding_ft),
        shading_vol_cy=cf_to_cy(floor_area_sf * (pipe_od_ft + shading_above_ft)),
        pipe_zone_vol_cy=cf_to_cy(floor_area_sf * zone_ft),
        final_backfill_cy=cf_to_cy(final_cf),
    )


def import_final_backfill_cy(
    final_backfill_cy: float,
    spoils_reuse_cy: float,
    spoils_action: SpoilsAction,
) -> float:
    """
    Final backfill that must be brought in.

    Everything is imported when spoils are offhauled; otherwise only the
    part not covered by reused spoils.
    """
    if spoils_action == SpoilsAction.OFFHAUL:
        return final_backfill_cy
    return max(0.0, final_backfill_cy - spoils_reuse_cy)
