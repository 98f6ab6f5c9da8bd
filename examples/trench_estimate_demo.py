"""
Trench Estimate Demo

Walks through a typical estimating session:
1. Estimate a single-depth trench in a paved street
2. Compare wall treatments for the same trench
3. Estimate a variable-depth run from a form payload
4. Estimate a shored bell hole with utility congestion
"""

from trenchcalc import CalculatorInput, compute
from trenchcalc.core.errors import ValidationError
from trenchcalc.core.logging_config import setup_logging
from trenchcalc.models.excavation import (
    CongestionItem,
    ExcShape,
    ExcType,
    SpoilsAction,
)
from trenchcalc.models.reference import ShoringType, SoilType, SurfaceType


def print_summary(results):
    print(f"  Bank volume: {results.bank_vol_cy:.2f} BCY ({results.bank_vol_cf:.1f} CF)")
    print(f"  Loose volume: {results.loose_vol_cy:.2f} LCY")
    print(f"  Effective size: {results.effective_length:.1f}' x "
          f"{results.effective_width:.2f}' x {results.effective_depth:.2f}'")
    print(f"  Hand dig: {results.active_hand_dig_pct:.0f}% "
          f"({results.hand_dig_hrs:.1f} hrs), machine {results.machine_dig_hrs:.1f} hrs")
    print(f"  Offhaul: {results.spoils_offhaul_cy:.2f} LCY in "
          f"{results.offhaul_truck_loads} loads")
    print(f"  Phases: excavation {results.exc_phase_hrs:.1f} + "
          f"shoring {results.shoring_phase_hrs:.1f} + "
          f"backfill {results.backfill_phase_hrs:.1f} = {results.total_field_hrs:.1f} hrs")
    print(f"  Crew: {results.total_crew_on_site} on site, {results.crew_days} crew days, "
          f"{results.total_calendar_days} calendar days, {results.adjusted_man_hrs:.1f} man-hrs")


def estimate_street_trench():
    """Single-depth trench in asphalt with spoils hauled off."""
    print("\n=== Street Trench ===")

    calc_input = CalculatorInput(
        project_desc="Water main replacement",
        surface_type=SurfaceType.ASPHALT,
        soil_type=SoilType.TYPE_B,
        pipe_od=8,
        length_ft=120,
        depth_ft=4,
        depth_mode="topOfPipe",
        spoils_action=SpoilsAction.OFFHAUL,
    )
    results = compute(calc_input)

    print(f"  {results.depth_input_label}: {results.depth_input_ft:.2f}' -> "
          f"excavation depth {results.computed_exc_depth_ft:.2f}'")
    print(f"  Saw cut: {results.perimeter_ft:.1f} LF, {results.saw_cut_time_hrs:.1f} hrs")
    print_summary(results)

    return calc_input


def compare_wall_treatments(calc_input):
    """Same trench with each wall treatment."""
    print("\n=== Wall Treatments ===")

    for shoring_type in ShoringType:
        results = compute(calc_input.model_copy(update={"shoring_type": shoring_type}))
        print(f"  {shoring_type.value:8s} {results.bank_vol_cy:8.2f} BCY "
              f"{results.shoring_panels:3d} panels {results.total_field_hrs:6.1f} hrs")


def estimate_variable_depth_payload():
    """Variable-depth run posted by the estimating form."""
    print("\n=== Variable-Depth Run ===")

    payload = {
        "projectDesc": "Sewer lateral",
        "pipeOD": 6,
        "multiDepth": True,
        "depthSegments": [
            {"lengthFt": 40, "depthFt": 4, "useAutoWidth": True},
            {"lengthFt": 60, "depthFt": 7, "useAutoWidth": True},
            {"lengthFt": 25, "depthFt": 10, "widthFt": 3},
        ],
        "spoilsAction": "partial",
        "settings": {"crewTruckDriver": 1},
    }

    try:
        calc_input = CalculatorInput.from_payload(payload)
    except ValidationError as e:
        print(f"  Rejected: {e}")
        return

    results = compute(calc_input)
    print_summary(results)
    print(f"  Import final backfill: {results.import_final_cy:.2f} CY")


def estimate_bellhole():
    """Shored bell hole around a tie-in with crossing utilities."""
    print("\n=== Bell Hole ===")

    calc_input = CalculatorInput(
        exc_type=ExcType.BELLHOLE,
        exc_shape=ExcShape.RECTANGLE,
        surface_type=SurfaceType.CONCRETE,
        shoring_type=ShoringType.SHORED,
        pipe_od=12,
        length_ft=10,
        width_ft=8,
        depth_ft=7,
        has_congestion=True,
        congestion_items=(
            CongestionItem(type="Gas", length_ft=8, depth_ft=3),
            CongestionItem(type="Telecom", length_ft=10, depth_ft=2.5),
        ),
    )
    results = compute(calc_input)

    print(f"  Shoring: {results.shoring_sf:.1f} SF, {results.shoring_panels} panels")
    print(f"  Congestion factor: {results.congestion_time_factor:.2f}")
    for note in results.congestion_notes:
        print(f"    - {note}")
    print_summary(results)


def main():
    """Run the complete demo."""
    setup_logging(log_level="INFO")

    print("=" * 70)
    print("TRENCH AND BELL-HOLE ESTIMATING DEMO")
    print("=" * 70)

    street_input = estimate_street_trench()
    compare_wall_treatments(street_input)
    estimate_variable_depth_payload()
    estimate_bellhole()

    print("\n" + "=" * 70)
    print("DEMO COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    main()
