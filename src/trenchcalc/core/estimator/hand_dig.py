"""
Hand-dig share of an excavation.

The zone around the pipe that must be dug by hand is modelled as a keyhole
cross-section: a semicircle of radius ``OD/2 + pipe clearance`` above the
pipe centerline plus a rectangle of height ``OD/2 + clearance under pipe``
below it, less the pipe itself. The zone runs the full effective length.
"""

import math
from dataclasses import dataclass

from trenchcalc.core.estimator.units import round_half_up


@dataclass(frozen=True)
class HandDigZone:
    """
    Attributes:
        area_sq_in: Hand-dig cross-section area
        volume_cf: Hand-dig volume over the effective length
        calculated_pct: Share of bank volume, whole percent in [0, 100]
    """

    area_sq_in: float
    volume_cf: float
    calculated_pct: float


def keyhole_area_sq_in(
    pipe_od_in: float,
    pipe_clearance_in: float,
    clearance_under_in: float,
) -> float:
    """Keyhole cross-section around the pipe minus the pipe itself, sq in."""
    buffer_r = pipe_od_in / 2 + pipe_clearance_in
    below = pipe_od_in / 2 + clearance_under_in
    keyhole = math.pi * buffer_r * buffer_r / 2 + 2 * buffer_r * below
    pipe = math.pi * (pipe_od_in / 2) ** 2
    return keyhole - pipe


def calculate_hand_dig_zone(
    pipe_od_in: float,
    pipe_clearance_in: float,
    clearance_under_in: float,
    effective_length_ft: float,
    bank_vol_cf: float,
) -> HandDigZone:
    """
    Hand-dig area, volume and share of the bank volume.

    Args:
        pipe_od_in: Pipe outside diameter
        pipe_clearance_in: Buffer around the pipe
        clearance_under_in: Excavation below the pipe
        effective_length_ft: Length the zone runs
        bank_vol_cf: Bank volume of the whole excavation

    Returns:
        HandDigZone, with a 0 share when there is no bank volume
    """
    area = keyhole_area_sq_in(pipe_od_in, pipe_clearance_in, clearance_under_in)
    volume = area / 144 * effective_length_ft

    pct = 0
    if bank_vol_cf > 0:
        pct = min(100, max(0, int(round_half_up(volume / bank_vol_cf * 100))))

    return HandDigZone(area_sq_in=area, volume_cf=volume, calculated_pct=pct)


def active_hand_dig_pct(
    calculated_pct: float,
    override: bool,
    manual_pct: float,
) -> float:
    """Hand-dig share in effect: the manual value when overridden."""
    return manual_pct if override else calculated_pct
