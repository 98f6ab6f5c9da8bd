"""
trenchcalc - quantity and labor estimating for pipeline trenches and bell holes.

This package turns excavation geometry, soil, equipment and crew inputs into
volumes, material quantities and phase labor hours.
"""

__version__ = "0.1.0"

from trenchcalc.core.estimator import ExcavationEstimator, compute
from trenchcalc.models import CalculationResults, CalculatorInput, EstimatingSettings

__all__ = [
    "__version__",
    "CalculationResults",
    "CalculatorInput",
    "EstimatingSettings",
    "ExcavationEstimator",
    "compute",
]
