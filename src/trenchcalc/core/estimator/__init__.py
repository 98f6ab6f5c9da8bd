"""
Excavation estimating engine.

This module provides:
- Trench width and excavation depth resolution
- Bank volume, surface area and perimeter by topology and wall treatment
- Hand-dig share of the excavation
- Pipe-zone, backfill and spoils quantities
- Labor hours by phase with crew rollups
"""

from trenchcalc.core.estimator.calculator import ExcavationEstimator, compute
from trenchcalc.core.estimator.dimensions import (
    min_trench_width_in,
    parse_slope_ratio,
    resolve_excavation_depth,
)

__all__ = [
    "ExcavationEstimator",
    "compute",
    "min_trench_width_in",
    "parse_slope_ratio",
    "resolve_excavation_depth",
]
