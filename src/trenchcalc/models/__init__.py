"""
Data models and reference catalogs.
"""

from .excavation import (
    CalculatorInput,
    CongestionItem,
    DepthMode,
    DepthSegment,
    EstimatingSettings,
    ExcShape,
    ExcType,
    NsSide,
    SpoilsAction,
)
from .reference import (
    STANDARD_PIPE_SIZES,
    ExcavatorProperties,
    ExcavatorSize,
    LocationProperties,
    LocationType,
    ShoringProperties,
    ShoringType,
    SoilProperties,
    SoilType,
    SurfaceProperties,
    SurfaceType,
    TruckProperties,
    TruckSize,
)
from .results import CalculationResults

__all__ = [
    "CalculationResults",
    "CalculatorInput",
    "CongestionItem",
    "DepthMode",
    "DepthSegment",
    "EstimatingSettings",
    "ExcShape",
    "ExcType",
    "NsSide",
    "SpoilsAction",
    "STANDARD_PIPE_SIZES",
    "ExcavatorProperties",
    "ExcavatorSize",
    "LocationProperties",
    "LocationType",
    "ShoringProperties",
    "ShoringType",
    "SoilProperties",
    "SoilType",
    "SurfaceProperties",
    "SurfaceType",
    "TruckProperties",
    "TruckSize",
]
