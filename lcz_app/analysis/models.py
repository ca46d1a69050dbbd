"""
Data models for impedance analysis.

A Measurement holds the raw oscilloscope readings; an ImpedanceResult holds
everything derived from one. Both are frozen: a result is produced fresh by
each analysis call and never mutated.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Measurement:
    """Raw readings from the reference resistor / DUT divider."""
    reference_resistance: float   # Ohms
    frequency: float              # Hz
    delta_t: float                # Seconds, negative for capacitors
    v_in: float                   # Volts, amplitude or peak-to-peak
    v_dut: float                  # Volts, same convention as v_in

    @property
    def theta(self) -> float:
        """Phase angle of the zero-crossing delay in radians."""
        return 2 * math.pi * self.frequency * self.delta_t


@dataclass(frozen=True)
class PhaseClampAdvisory:
    """Phase angle came out past +/-pi/2 and was pulled back inside."""
    bound: str          # 'upper' or 'lower'
    raw_phi: float      # Radians, before clamping
    excess: float       # Radians past the bound, signed

    @property
    def message(self) -> str:
        if self.bound == "upper":
            return f"phi > pi/2 by {self.excess:e} rad"
        return f"phi < -pi/2 by {self.excess:e} rad"


@dataclass(frozen=True)
class InductiveModel:
    """Series and parallel equivalent inductance in henries."""
    series_inductance: float
    parallel_inductance: float


@dataclass(frozen=True)
class CapacitiveModel:
    """Series and parallel equivalent capacitance in farads."""
    series_capacitance: float
    parallel_capacitance: float


ReactiveModel = Union[InductiveModel, CapacitiveModel]


@dataclass(frozen=True)
class ImpedanceResult:
    """Derived electrical quantities for one measurement"""
    measurement: Measurement
    theta: float                  # Radians
    phi: float                    # Radians, inside (-pi/2, pi/2)
    impedance: float              # |Z|, Ohms
    series_resistance: float      # Resr, Ohms
    reactance: float              # X, Ohms
    quality_factor: float         # Q = |X| / Resr
    parallel_resistance: float    # Rp, Ohms
    reactive: Optional[ReactiveModel] = None   # None when X == 0
    advisory: Optional[PhaseClampAdvisory] = None

    @property
    def theta_degrees(self) -> float:
        return math.degrees(self.theta)

    @property
    def phi_degrees(self) -> float:
        return math.degrees(self.phi)

    @property
    def is_inductive(self) -> bool:
        return isinstance(self.reactive, InductiveModel)

    @property
    def is_capacitive(self) -> bool:
        return isinstance(self.reactive, CapacitiveModel)

    @property
    def was_clamped(self) -> bool:
        return self.advisory is not None
