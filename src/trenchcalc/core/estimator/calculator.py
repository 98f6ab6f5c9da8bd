"""
Excavation estimator.

Runs the estimating stages in order on one input record:

1. width/depth resolution
2. bank volume, surface area, floor area and perimeter
3. hand-dig share
4. pipe-zone and backfill quantities
5. spoils and offhaul
6. dig, surface, shoring and compaction time
7. congestion penalty, phase subtotals and crew rollups

Intermediate values stay unrounded; rounding is applied once when the
:class:`CalculationResults` record is built.
"""

import logging
from typing import Optional

from trenchcalc.core.config import settings as app_settings
from trenchcalc.core.estimator import hand_dig, labor
from trenchcalc.core.estimator.dimensions import (
    depth_input_label,
    min_trench_width_in,
    parse_slope_ratio,
    resolve_excavation_depth,
    resolve_segment,
)
from trenchcalc.core.estimator.geometry import (
    ExcavationGeometry,
    bellhole_geometry,
    segmented_geometry,
    trench_geometry,
)
from trenchcalc.core.estimator.pipe_zone import calculate_pipe_zone, import_final_backfill_cy
from trenchcalc.core.estimator.spoils import plan_spoils
from trenchcalc.core.estimator.units import cf_to_cy, round1, round2, to_ft
from trenchcalc.models.excavation import CalculatorInput, EstimatingSettings, ExcType
from trenchcalc.models.reference import (
    ExcavatorProperties,
    ShoringProperties,
    SoilProperties,
    SurfaceProperties,
    TruckProperties,
)
from trenchcalc.models.results import CalculationResults
from trenchcalc.utils.logging import log_performance, log_with_context

logger = logging.getLogger(__name__)


class ExcavationEstimator:
    """
    Estimate quantities and labor hours for one trench or bell hole.

    The estimator holds no state beyond the input it was built with, and
    :meth:`calculate` never raises for numeric input: zero rates give zero
    hours and negative quantities are clamped to zero.
    """

    def __init__(
        self,
        calc_input: CalculatorInput,
        settings: Optional[EstimatingSettings] = None,
    ) -> None:
        """
        Initialize the estimator.

        Args:
            calc_input: Excavation input record
            settings: Estimating settings, replacing ``calc_input.settings``
                when given
        """
        self.input = calc_input
        self.settings = settings if settings is not None else calc_input.settings

        self.soil = SoilProperties.get(calc_input.soil_type)
        self.surface = SurfaceProperties.get(calc_input.surface_type)
        self.excavator = ExcavatorProperties.get(calc_input.excavator_size)
        self.truck = TruckProperties.get(calc_input.truck_size)
        self.shoring = ShoringProperties.get(calc_input.shoring_type)

    @property
    def is_trench(self) -> bool:
        return self.input.exc_type == ExcType.TRENCH

    def auto_width_ft(self) -> float:
        return to_ft(min_trench_width_in(self.input.pipe_od))

    def single_width_ft(self) -> float:
        """Width of a single-depth excavation, auto-sized for trenches that opt in."""
        if self.is_trench and self.input.use_auto_width:
            return self.auto_width_ft()
        return self.input.width_ft

    def excavation_depth_ft(self) -> float:
        return resolve_excavation_depth(
            self.input.depth_ft,
            self.input.depth_mode,
            self.input.pipe_od,
            self.settings.clearance_under_pipe_in,
        )

    def calculate_geometry(self, slope_ratio: float) -> ExcavationGeometry:
        """
        Geometry for the input's topology.

        Variable-depth input (trench or bell hole) is driven by its
        segments; otherwise single-depth trench or bell-hole rules apply.
        """
        calc_input = self.input
        width = self.single_width_ft()
        depth = self.excavation_depth_ft()

        if calc_input.multi_depth and calc_input.depth_segments:
            auto_width = self.auto_width_ft()
            segments = [
                resolve_segment(
                    segment,
                    auto_width_ft=auto_width,
                    is_trench=self.is_trench,
                    fallback_depth_ft=calc_input.depth_ft,
                    pipe_od_in=calc_input.pipe_od,
                    clearance_under_in=self.settings.clearance_under_pipe_in,
                )
                for segment in calc_input.depth_segments
            ]
            return segmented_geometry(
                segments,
                calc_input.shoring_type,
                slope_ratio,
                fallback_width_ft=width,
                fallback_depth_ft=depth,
            )

        if self.is_trench:
            return trench_geometry(
                calc_input.length_ft, width, depth, calc_input.shoring_type, slope_ratio
            )

        return bellhole_geometry(
            calc_input.exc_shape,
            calc_input.length_ft,
            width,
            depth,
            side_lengths_ft=[side.length_ft for side in calc_input.ns_sides],
        )

    def calculate(self) -> CalculationResults:
        """
        Run every estimating stage.

        Returns:
            CalculationResults
        """
        calc_input = self.input
        settings = self.settings

        swell_factor = self.soil.swell_factor
        slope_ratio = parse_slope_ratio(self.soil.slope_ratio)
        exc_depth = self.excavation_depth_ft()

        geometry = self.calculate_geometry(slope_ratio)
        bank_vol_cy = cf_to_cy(geometry.bank_vol_cf)
        loose_vol_cy = bank_vol_cy * swell_factor

        zone = hand_dig.calculate_hand_dig_zone(
            calc_input.pipe_od,
            settings.pipe_clearance_in,
            settings.clearance_under_pipe_in,
            geometry.effective_length,
            geometry.bank_vol_cf,
        )
        active_pct = hand_dig.active_hand_dig_pct(
            zone.calculated_pct,
            calc_input.hand_dig_override,
            calc_input.hand_dig_pct_manual,
        )

        pipe_zone = calculate_pipe_zone(
            calc_input.pipe_od,
            geometry.floor_area_sf,
            geometry.effective_depth,
            settings,
        )

        spoils = plan_spoils(
            calc_input.spoils_action,
            loose_vol_cy,
            pipe_zone.final_backfill_cy,
            swell_factor,
            self.truck,
            settings.truck_round_trip_min,
        )

        machine_rate = labor.machine_dig_rate(self.excavator, settings)
        dig = labor.calculate_dig_time(
            bank_vol_cy,
            active_pct,
            machine_rate,
            settings.hand_dig_rate_cy_per_hr,
            labor.hand_digger_count(settings),
        )
        saw_cut_hrs = labor.saw_cut_hrs(geometry.perimeter_ft, self.surface)
        removal_hrs = labor.surface_removal_hrs(geometry.surface_area_sf, self.surface)

        shoring = labor.plan_shoring(
            calc_input.shoring_type,
            calc_input.exc_type,
            geometry.effective_length,
            geometry.effective_width,
            geometry.effective_depth,
            self.shoring,
            settings,
        )
        compaction = labor.plan_compaction(
            geometry.effective_depth,
            pipe_zone.pipe_zone_depth_ft,
            geometry.surface_area_sf,
            geometry.effective_length * geometry.effective_width,
            settings,
        )
        placement_hrs = labor.backfill_placement_hrs(pipe_zone.total_backfill_cy, settings)

        congestion_factor = labor.congestion_time_factor(
            calc_input.has_congestion, calc_input.congestion_items
        )
        phases = labor.PhaseHours.from_hours(
            saw_cut=saw_cut_hrs,
            surface_removal=removal_hrs,
            dig=dig.total_hrs,
            congestion_factor=congestion_factor,
            offhaul=spoils.offhaul_time_hrs,
            shoring_install=shoring.install_hrs,
            backfill_placement=placement_hrs,
            compaction=compaction.compaction_hrs,
            compaction_test=compaction.test_hrs,
        )
        total_field_hrs = phases.total
        crew = labor.roll_up_crew(
            total_field_hrs,
            spoils.offhaul_time_hrs,
            pipe_zone.bedding_vol_cy,
            settings,
        )

        return CalculationResults(
            bank_vol_cy=round2(bank_vol_cy),
            bank_vol_cf=round1(geometry.bank_vol_cf),
            loose_vol_cy=round2(loose_vol_cy),
            swell_factor=round2(swell_factor),
            load_factor=round2(1 / swell_factor),
            surface_cut_cy=round2(labor.surface_cut_cy(geometry.surface_area_sf, self.surface)),
            surface_area_sf=round1(geometry.surface_area_sf),
            perimeter_ft=round1(geometry.perimeter_ft),
            floor_area_sf=round1(geometry.floor_area_sf),
            depth_input_label=depth_input_label(calc_input.depth_mode),
            depth_input_ft=round2(calc_input.depth_ft),
            computed_exc_depth_ft=round2(exc_depth),
            clearance_under_in=settings.clearance_under_pipe_in,
            bedding_vol_cy=round2(pipe_zone.bedding_vol_cy),
            shading_vol_cy=round2(pipe_zone.shading_vol_cy),
            pipe_zone_vol_cy=round2(pipe_zone.pipe_zone_vol_cy),
            bedding_depth_in=round1(pipe_zone.bedding_depth_ft * 12),
            pipe_zone_depth_ft=round2(pipe_zone.pipe_zone_depth_ft),
            final_backfill_cy=round2(pipe_zone.final_backfill_cy),
            total_backfill_cy=round2(pipe_zone.total_backfill_cy),
            import_bedding_cy=round2(pipe_zone.bedding_vol_cy),
            import_shading_cy=round2(pipe_zone.shading_vol_cy),
            import_final_cy=round2(
                import_final_backfill_cy(
                    pipe_zone.final_backfill_cy, spoils.reuse_cy, calc_input.spoils_action
                )
            ),
            machine_dig_rate_cy_per_hr=round2(machine_rate),
            hand_dig_hrs=round1(dig.hand_dig_hrs),
            machine_dig_hrs=round1(dig.machine_dig_hrs),
            total_exc_hrs=round1(dig.total_hrs * congestion_factor),
            saw_cut_time_hrs=round1(saw_cut_hrs),
            surface_removal_hrs=round1(removal_hrs),
            shoring_install_hrs=round1(shoring.install_hrs),
            total_compaction_hrs=round1(compaction.compaction_hrs),
            compaction_test_hrs=round1(compaction.test_hrs),
            bedding_cure_hrs=settings.zero_sack_cure_hrs,
            offhaul_time_hrs=round1(spoils.offhaul_time_hrs),
            backfill_placement_hrs=round1(placement_hrs),
            exc_phase_hrs=phases.excavation,
            shoring_phase_hrs=phases.shoring,
            backfill_phase_hrs=phases.backfill,
            total_field_hrs=total_field_hrs,
            crew_days=crew.crew_days,
            total_calendar_days=crew.calendar_days,
            total_crew_on_site=crew.total_crew,
            hand_digger_count=crew.hand_diggers,
            total_man_hrs=crew.total_man_hrs,
            adjusted_man_hrs=crew.adjusted_man_hrs,
            truck_driver_hrs=crew.truck_driver_hrs,
            calculated_hand_dig_pct=zone.calculated_pct,
            active_hand_dig_pct=active_pct,
            hand_dig_area_sq_in=round1(zone.area_sq_in),
            spoils_reuse_cy=round2(spoils.reuse_cy),
            spoils_offhaul_cy=round2(spoils.offhaul_cy),
            offhaul_truck_loads=spoils.truck_loads,
            shoring_sf=round1(shoring.wall_area_sf),
            shoring_panels=shoring.panels,
            num_lifts=compaction.lifts,
            congestion_time_factor=round2(congestion_factor),
            congestion_notes=labor.congestion_notes(
                calc_input.has_congestion, calc_input.congestion_items
            ),
            effective_length=round1(geometry.effective_length),
            effective_width=round2(geometry.effective_width),
            effective_depth=round2(geometry.effective_depth),
        )


@log_performance(log_level=logging.DEBUG, threshold_ms=app_settings.slow_estimate_threshold_ms)
def compute(
    calc_input: CalculatorInput,
    settings: Optional[EstimatingSettings] = None,
) -> CalculationResults:
    """
    Estimate one excavation.

    Args:
        calc_input: Excavation input record
        settings: Estimating settings, replacing ``calc_input.settings``
            when given

    Returns:
        CalculationResults

    Example:
        >>> results = compute(CalculatorInput(length_ft=20, depth_ft=5))
        >>> results.effective_width
        1.5
    """
    results = ExcavationEstimator(calc_input, settings).calculate()

    log_with_context(
        logging.DEBUG,
        f"Estimated {calc_input.exc_type.value}: {results.bank_vol_cy} BCY, "
        f"{results.total_field_hrs} field hrs",
        target=logger,
        bank_vol_cy=results.bank_vol_cy,
        total_field_hrs=results.total_field_hrs,
        offhaul_truck_loads=results.offhaul_truck_loads,
    )
    return results
