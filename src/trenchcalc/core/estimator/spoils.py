"""
Spoils disposition and offhaul logistics.

Reused spoils are measured in bank CY (the final backfill they replace);
they are converted back to loose CY with the swell factor before being
subtracted from the loose volume that would otherwise be hauled.
"""

import logging
import math
from dataclasses import dataclass

from trenchcalc.models.excavation import SpoilsAction
from trenchcalc.models.reference import TruckProperties

logger = logging.getLogger(__name__)

# Share of final backfill covered by native spoils under a partial policy
PARTIAL_REUSE_FRACTION = 0.5


@dataclass(frozen=True)
class SpoilsPlan:
    """
    Attributes:
        reuse_cy: Spoils placed back as final backfill
        offhaul_cy: Loose volume hauled off site, never negative
        truck_loads: Truck loads needed for the offhaul volume
        offhaul_time_hrs: Loading plus round-trip time
    """

    reuse_cy: float
    offhaul_cy: float
    truck_loads: int
    offhaul_time_hrs: float


def truck_loads(offhaul_cy: float, capacity_cy: float) -> int:
    """Whole truck loads for a loose volume; 0 for an empty or zero-capacity truck."""
    if offhaul_cy <= 0 or capacity_cy <= 0:
        return 0
    return math.ceil(offhaul_cy / capacity_cy)


def offhaul_time_hrs(loads: int, load_time_min: float, round_trip_min: float) -> float:
    """Hours to load and haul a number of truck loads."""
    return loads * (load_time_min + round_trip_min) / 60


def plan_spoils(
    action: SpoilsAction,
    loose_vol_cy: float,
    final_backfill_cy: float,
    swell_factor: float,
    truck: TruckProperties,
    truck_round_trip_min: float,
) -> SpoilsPlan:
    """
    Decide how much spoil is reused and hauled.

    Args:
        action: Spoils policy
        loose_vol_cy: Excavated loose volume
        final_backfill_cy: Final backfill requirement, bank CY
        swell_factor: Bank to loose multiplier
        truck: Haul truck
        truck_round_trip_min: Round trip to the dump site

    Returns:
        SpoilsPlan
    """
    if action == SpoilsAction.OFFHAUL:
        reuse = 0.0
        offhaul = loose_vol_cy
    elif action == SpoilsAction.REUSE:
        reuse = final_backfill_cy
        offhaul = max(0.0, loose_vol_cy - final_backfill_cy * swell_factor)
    else:
        reuse = final_backfill_cy * PARTIAL_REUSE_FRACTION
        offhaul = max(0.0, loose_vol_cy - reuse * swell_factor)

    loads = truck_loads(offhaul, truck.capacity_cy)
    hours = offhaul_time_hrs(loads, truck.load_time_min, truck_round_trip_min)

    logger.debug(
        f"Spoils plan {SpoilsAction(action).value}: reuse={reuse:.2f} CY, "
        f"offhaul={offhaul:.2f} LCY, loads={loads}"
    )

    return SpoilsPlan(
        reuse_cy=reuse,
        offhaul_cy=offhaul,
        truck_loads=loads,
        offhaul_time_hrs=hours,
    )
