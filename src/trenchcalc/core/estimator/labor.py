"""
Time and labor estimating.

Converts quantities into hours with production rates: digging, surface
cutting, shoring, compaction and backfill placement. Hours are grouped
into three phases (excavation, shoring, backfill) and rolled up into crew
days and man-hours.

Every rate division yields 0 hours when the rate is 0.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from trenchcalc.core.estimator.units import cf_to_cy, round1, to_ft
from trenchcalc.models.excavation import CongestionItem, EstimatingSettings, ExcType
from trenchcalc.models.reference import (
    ExcavatorProperties,
    ShoringProperties,
    ShoringType,
    SurfaceProperties,
)

logger = logging.getLogger(__name__)

# Dig time multiplier added per congestion item
CONGESTION_PENALTY_PER_ITEM = 0.15

HOURS_PER_CREW_DAY = 8


def _per_rate(quantity: float, rate: float) -> float:
    return quantity / rate if rate > 0 else 0.0


# --- Excavation ---


def machine_dig_rate(excavator: ExcavatorProperties, settings: EstimatingSettings) -> float:
    """Excavator production in bank CY/hr: bucket x fill x cycles x efficiency."""
    return (
        excavator.bucket_cy
        * settings.bucket_fill_factor
        * excavator.cycles_per_hr
        * settings.job_efficiency
        / 100
    )


def hand_digger_count(settings: EstimatingSettings) -> int:
    """Pipelayers and laborers both dig by hand."""
    return settings.crew_pipelayers + settings.crew_laborers


def total_crew_on_site(settings: EstimatingSettings) -> int:
    return (
        settings.crew_foreman
        + settings.crew_operators
        + settings.crew_pipelayers
        + settings.crew_laborers
        + settings.crew_truck_driver
    )


@dataclass(frozen=True)
class DigTime:
    """
    Attributes:
        hand_dig_cy: Bank CY dug by hand
        machine_dig_cy: Bank CY dug by machine
        hand_dig_hrs: Hours for the hand crew
        machine_dig_hrs: Hours for the excavator
    """

    hand_dig_cy: float
    machine_dig_cy: float
    hand_dig_hrs: float
    machine_dig_hrs: float

    @property
    def total_hrs(self) -> float:
        return self.hand_dig_hrs + self.machine_dig_hrs


def calculate_dig_time(
    bank_vol_cy: float,
    hand_dig_pct: float,
    machine_rate_cy_per_hr: float,
    hand_rate_cy_per_hr: float,
    hand_diggers: int,
) -> DigTime:
    """
    Split the bank volume between hand and machine digging and time each.

    Args:
        bank_vol_cy: Bank volume
        hand_dig_pct: Share dug by hand, percent
        machine_rate_cy_per_hr: Excavator production
        hand_rate_cy_per_hr: Hand production per person
        hand_diggers: People digging by hand

    Returns:
        DigTime
    """
    hand_fraction = hand_dig_pct / 100
    hand_cy = bank_vol_cy * hand_fraction
    machine_cy = bank_vol_cy * (1 - hand_fraction)

    return DigTime(
        hand_dig_cy=hand_cy,
        machine_dig_cy=machine_cy,
        hand_dig_hrs=_per_rate(hand_cy, hand_rate_cy_per_hr * hand_diggers),
        machine_dig_hrs=_per_rate(machine_cy, machine_rate_cy_per_hr),
    )


# --- Surface ---


def saw_cut_hrs(perimeter_ft: float, surface: SurfaceProperties) -> float:
    """Saw cutting the perimeter at the surface's ft/min rate."""
    return _per_rate(perimeter_ft, surface.saw_cut_ft_per_min) / 60


def surface_removal_hrs(surface_area_sf: float, surface: SurfaceProperties) -> float:
    return _per_rate(surface_area_sf, surface.removal_sf_per_hr)


def surface_cut_cy(surface_area_sf: float, surface: SurfaceProperties) -> float:
    """Volume of the surface course removed."""
    return cf_to_cy(surface_area_sf * to_ft(surface.thickness_in))


# --- Shoring ---


@dataclass(frozen=True)
class ShoringPlan:
    """
    Attributes:
        wall_area_sf: Wall area to shore
        panels: Panels needed to cover the walls
        install_hrs: Installation time
    """

    wall_area_sf: float = 0.0
    panels: int = 0
    install_hrs: float = 0.0


def shoring_wall_area_sf(
    exc_type: ExcType,
    length_ft: float,
    width_ft: float,
    depth_ft: float,
) -> float:
    """
    Wall area to shore.

    Trench ends stay open so only the two long walls are shored; bell holes
    are shored on all four walls.
    """
    wall_area = 2 * length_ft * depth_ft
    if exc_type != ExcType.TRENCH:
        wall_area += 2 * width_ft * depth_ft
    return wall_area


def plan_shoring(
    shoring_type: ShoringType,
    exc_type: ExcType,
    length_ft: float,
    width_ft: float,
    depth_ft: float,
    shoring: ShoringProperties,
    settings: EstimatingSettings,
) -> ShoringPlan:
    """
    Panels and installation time for a shored excavation.

    Sloped, benched and unshored excavations need no panels.
    """
    if shoring_type != ShoringType.SHORED:
        return ShoringPlan()

    wall_area = shoring_wall_area_sf(exc_type, length_ft, width_ft, depth_ft)
    panel_sf = settings.shoring_panel_width_ft * settings.shoring_panel_height_ft
    panels = math.ceil(wall_area / panel_sf) if panel_sf > 0 else 0

    return ShoringPlan(
        wall_area_sf=wall_area,
        panels=panels,
        install_hrs=panels * shoring.install_time_per_panel_min / 60,
    )


# --- Compaction and backfill ---


@dataclass(frozen=True)
class CompactionPlan:
    """
    Attributes:
        lifts: Compaction lifts above the pipe zone
        area_sf: Area compacted per lift
        compaction_hrs: Compaction time for all lifts
        test_hrs: Density testing, one test per lift
    """

    lifts: int
    area_sf: float
    compaction_hrs: float
    test_hrs: float


def plan_compaction(
    excavation_depth_ft: float,
    pipe_zone_depth_ft: float,
    surface_area_sf: float,
    fallback_area_sf: float,
    settings: EstimatingSettings,
) -> CompactionPlan:
    """
    Lifts, compaction and testing time.

    Only the backfill above the full pipe zone is compacted in lifts. The
    compacted area is the surface area, or ``fallback_area_sf`` when the
    surface area is 0.

    Args:
        excavation_depth_ft: Effective excavation depth
        pipe_zone_depth_ft: Bedding + pipe + shading
        surface_area_sf: Area at grade
        fallback_area_sf: Effective length x width
        settings: Estimating settings

    Returns:
        CompactionPlan
    """
    compactable_in = max(0.0, (excavation_depth_ft - pipe_zone_depth_ft) * 12)
    lift_in = settings.compaction_lift_in
    lifts = math.ceil(compactable_in / lift_in) if lift_in > 0 else 0

    area = surface_area_sf or fallback_area_sf
    hrs_per_lift = _per_rate(area, settings.compaction_time_sf_per_hr)

    return CompactionPlan(
        lifts=lifts,
        area_sf=area,
        compaction_hrs=lifts * hrs_per_lift,
        test_hrs=lifts * settings.compaction_test_time_min / 60,
    )


def backfill_placement_hrs(total_backfill_cy: float, settings: EstimatingSettings) -> float:
    """Placement time at the backfill rate derated by job efficiency."""
    rate = settings.backfill_placement_cy_per_hr * settings.job_efficiency / 100
    return _per_rate(total_backfill_cy, rate)


# --- Congestion ---


def congestion_time_factor(has_congestion: bool, items: Tuple[CongestionItem, ...]) -> float:
    """Dig time multiplier: 1 + 0.15 per congestion item."""
    if not has_congestion or not items:
        return 1.0
    return 1.0 + len(items) * CONGESTION_PENALTY_PER_ITEM


def congestion_notes(has_congestion: bool, items: Iterable[CongestionItem]) -> Tuple[str, ...]:
    if not has_congestion:
        return ()
    return tuple(
        f"{item.type}: {item.length_ft:g}' long at {item.depth_ft:g}' deep"
        for item in items
    )


# --- Rollups ---


@dataclass(frozen=True)
class PhaseHours:
    """
    Phase subtotals, each rounded to 0.1 hr.

    The total is the sum of the rounded subtotals so the three phases always
    add up to it exactly.
    """

    excavation: float
    shoring: float
    backfill: float

    @property
    def total(self) -> float:
        return round1(self.excavation + self.shoring + self.backfill)

    @classmethod
    def from_hours(
        cls,
        saw_cut: float,
        surface_removal: float,
        dig: float,
        congestion_factor: float,
        offhaul: float,
        shoring_install: float,
        backfill_placement: float,
        compaction: float,
        compaction_test: float,
    ) -> "PhaseHours":
        return cls(
            excavation=round1(saw_cut + surface_removal + dig * congestion_factor + offhaul),
            shoring=round1(shoring_install),
            backfill=round1(backfill_placement + compaction + compaction_test),
        )


@dataclass(frozen=True)
class CrewRollup:
    """
    Attributes:
        crew_days: 8-hour crew days
        calendar_days: Crew days plus one cure day when bedding is poured
        total_crew: Crew headcount
        hand_diggers: Hand digging headcount
        total_man_hrs: Field hours x crew
        adjusted_man_hrs: Man-hours with drivers only billed for offhaul time
        truck_driver_hrs: Driver hours
    """

    crew_days: int
    calendar_days: int
    total_crew: int
    hand_diggers: int
    total_man_hrs: float
    adjusted_man_hrs: float
    truck_driver_hrs: float


def roll_up_crew(
    total_field_hrs: float,
    offhaul_hrs: float,
    bedding_vol_cy: float,
    settings: EstimatingSettings,
) -> CrewRollup:
    """
    Crew days and man-hours for the field time.

    Truck drivers are only on the clock while hauling; the rest of the crew
    works the full field time.

    Args:
        total_field_hrs: Rounded total of the phase subtotals
        offhaul_hrs: Hauling time
        bedding_vol_cy: Bedding volume, a cure day is added when positive
        settings: Estimating settings

    Returns:
        CrewRollup
    """
    crew = total_crew_on_site(settings)
    drivers = settings.crew_truck_driver
    crew_days = math.ceil(total_field_hrs / HOURS_PER_CREW_DAY)

    return CrewRollup(
        crew_days=crew_days,
        calendar_days=crew_days + (1 if bedding_vol_cy > 0 else 0),
        total_crew=crew,
        hand_diggers=hand_digger_count(settings),
        total_man_hrs=round1(total_field_hrs * crew),
        adjusted_man_hrs=round1(
            (total_field_hrs - offhaul_hrs) * (crew - drivers) + offhaul_hrs * crew
        ),
        truck_driver_hrs=round1(offhaul_hrs * drivers) if drivers > 0 else 0.0,
    )
