"""
Result record for excavation estimates.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class CalculationResults:
    """
    Rounded outputs of one excavation estimate.

    Volumes, ratios and depths carry 2 decimals; hours, areas and lengths
    carry 1 decimal. Counts are whole numbers.

    Attributes:
        bank_vol_cy: Undisturbed excavation volume, CY
        bank_vol_cf: Undisturbed excavation volume, CF
        loose_vol_cy: Excavated volume after swell, CY
        swell_factor: Bank to loose multiplier
        load_factor: Loose to bank multiplier
        surface_cut_cy: Surface course removed, CY
        surface_area_sf: Footprint at grade, SF
        perimeter_ft: Saw-cut length, ft
        floor_area_sf: Excavation floor area used for pipe-zone sizing, SF
        depth_input_label: Description of what the entered depth measures
        depth_input_ft: Depth as entered
        computed_exc_depth_ft: Entered depth converted to total depth
        clearance_under_in: Excavation below pipe, inches
        bedding_vol_cy: 0-sack bedding, CY
        shading_vol_cy: Shading sand, CY
        pipe_zone_vol_cy: Bedding through shading, CY
        bedding_depth_in: Bedding thickness, inches
        pipe_zone_depth_ft: Bedding + pipe + shading, ft
        final_backfill_cy: Backfill above the pipe zone, CY
        total_backfill_cy: Bedding + shading + final backfill, CY
        import_bedding_cy: Bedding to import, CY
        import_shading_cy: Shading to import, CY
        import_final_cy: Final backfill to import, CY
        machine_dig_rate_cy_per_hr: Excavator production, CY/hr
        hand_dig_hrs: Hand digging, hours
        machine_dig_hrs: Machine digging, hours
        total_exc_hrs: Digging after congestion penalty, hours
        saw_cut_time_hrs: Saw cutting, hours
        surface_removal_hrs: Surface removal, hours
        shoring_install_hrs: Shoring installation, hours
        total_compaction_hrs: Compaction, hours
        compaction_test_hrs: Density testing, hours
        bedding_cure_hrs: Slurry cure wait, hours
        offhaul_time_hrs: Truck loading and hauling, hours
        backfill_placement_hrs: Backfill placement, hours
        exc_phase_hrs: Excavation phase subtotal, hours
        shoring_phase_hrs: Shoring phase subtotal, hours
        backfill_phase_hrs: Backfill phase subtotal, hours
        total_field_hrs: Sum of phase subtotals, hours
        crew_days: 8-hour crew days
        total_calendar_days: Crew days plus a cure day when bedding is placed
        total_crew_on_site: Crew headcount
        hand_digger_count: Pipelayers + laborers
        total_man_hrs: Field hours x crew
        adjusted_man_hrs: Man-hours with the driver only billed for offhaul
        truck_driver_hrs: Driver hours
        calculated_hand_dig_pct: Hand-dig share from pipe geometry, percent
        active_hand_dig_pct: Hand-dig share in effect, percent
        hand_dig_area_sq_in: Hand-dig cross-section, sq in
        spoils_reuse_cy: Spoils reused as backfill, CY
        spoils_offhaul_cy: Spoils hauled off, loose CY
        offhaul_truck_loads: Truck loads
        shoring_sf: Shored wall area, SF
        shoring_panels: Shoring panels
        num_lifts: Compaction lifts
        congestion_time_factor: Dig time multiplier
        congestion_notes: One note per congestion item
        effective_length: Length used in the geometry, ft
        effective_width: Width used in the geometry, ft
        effective_depth: Depth used in the geometry, ft
    """

    # Volumes
    bank_vol_cy: float
    bank_vol_cf: float
    loose_vol_cy: float
    swell_factor: float
    load_factor: float
    surface_cut_cy: float
    surface_area_sf: float
    perimeter_ft: float
    floor_area_sf: float

    # Depth
    depth_input_label: str
    depth_input_ft: float
    computed_exc_depth_ft: float
    clearance_under_in: float

    # Pipe zone
    bedding_vol_cy: float
    shading_vol_cy: float
    pipe_zone_vol_cy: float
    bedding_depth_in: float
    pipe_zone_depth_ft: float

    # Backfill
    final_backfill_cy: float
    total_backfill_cy: float
    import_bedding_cy: float
    import_shading_cy: float
    import_final_cy: float

    # Time
    machine_dig_rate_cy_per_hr: float
    hand_dig_hrs: float
    machine_dig_hrs: float
    total_exc_hrs: float
    saw_cut_time_hrs: float
    surface_removal_hrs: float
    shoring_install_hrs: float
    total_compaction_hrs: float
    compaction_test_hrs: float
    bedding_cure_hrs: float
    offhaul_time_hrs: float
    backfill_placement_hrs: float

    # Phase subtotals
    exc_phase_hrs: float
    shoring_phase_hrs: float
    backfill_phase_hrs: float
    total_field_hrs: float
    crew_days: int
    total_calendar_days: int

    # Crew
    total_crew_on_site: int
    hand_digger_count: int
    total_man_hrs: float
    adjusted_man_hrs: float
    truck_driver_hrs: float

    # Hand dig
    calculated_hand_dig_pct: float
    active_hand_dig_pct: float
    hand_dig_area_sq_in: float

    # Spoils
    spoils_reuse_cy: float
    spoils_offhaul_cy: float
    offhaul_truck_loads: int

    # Shoring
    shoring_sf: float
    shoring_panels: int

    # Compaction
    num_lifts: int

    # Congestion
    congestion_time_factor: float
    congestion_notes: Tuple[str, ...]

    # Dimensions used
    effective_length: float
    effective_width: float
    effective_depth: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["congestion_notes"] = list(self.congestion_notes)
        return data
