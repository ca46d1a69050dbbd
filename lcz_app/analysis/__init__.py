"""Impedance analysis of a DUT measured against a series reference resistor"""

from .impedance import DEFAULT_PHASE_EPSILON, analyze, analyze_measurement
from .models import (
    CapacitiveModel,
    ImpedanceResult,
    InductiveModel,
    Measurement,
    PhaseClampAdvisory,
)

__all__ = [
    "analyze",
    "analyze_measurement",
    "DEFAULT_PHASE_EPSILON",
    "Measurement",
    "ImpedanceResult",
    "InductiveModel",
    "CapacitiveModel",
    "PhaseClampAdvisory",
]
