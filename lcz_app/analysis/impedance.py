"""
Impedance derivation from oscilloscope measurements.

Test setup: a signal generator drives a reference resistor and the DUT in
series to ground. Vin is measured at the generator output, Vdut across the
DUT, and delta_t between their rising zero crossings:

                          Vin        Vdut
                           |          |
    signal generator out ----- Rref ----- DUT ----- GND

The phasor Vin - Vdut is the drop across Rref and so is in phase with the
current. The DUT phase is the measured phase minus the angle of that drop.
"""

import math
from typing import Optional

from ..errors import InvalidMeasurementError
from ..logging.config import get_analysis_logger, log_phase_clamp
from .models import (
    CapacitiveModel,
    ImpedanceResult,
    InductiveModel,
    Measurement,
    PhaseClampAdvisory,
    ReactiveModel,
)

logger = get_analysis_logger(__name__)

# Offset from +/-pi/2 after clamping; keeps cos(phi) nonzero
DEFAULT_PHASE_EPSILON = 1e-15

HALF_PI = math.pi / 2


def _validate(measurement: Measurement) -> None:
    for field in ("reference_resistance", "frequency", "delta_t", "v_in", "v_dut"):
        value = getattr(measurement, field)
        if not math.isfinite(value):
            raise InvalidMeasurementError(
                f"{field} must be finite, got {value!r}", field=field, value=value
            )

    for field in ("reference_resistance", "frequency"):
        value = getattr(measurement, field)
        if value <= 0:
            raise InvalidMeasurementError(
                f"{field} must be positive, got {value!r}", field=field, value=value
            )

    # 2*pi*f*delta_t can overflow even when both are finite
    if not math.isfinite(measurement.theta):
        raise InvalidMeasurementError(
            f"Phase angle of delta_t={measurement.delta_t!r} at frequency={measurement.frequency!r} is not finite",
            field="delta_t",
            value=measurement.delta_t,
            context={"frequency": measurement.frequency}
        )


def clamp_phase(phi: float, epsilon: float = DEFAULT_PHASE_EPSILON) -> tuple[float, Optional[PhaseClampAdvisory]]:
    """
    Pull a phase angle back inside (-pi/2, pi/2).

    Measurement noise easily produces an impossible angle when Resr is small.

    Returns:
        The usable phase angle and an advisory if clamping occurred
    """
    if phi > HALF_PI:
        return HALF_PI - epsilon, PhaseClampAdvisory(bound="upper", raw_phi=phi, excess=phi - HALF_PI)
    if phi < -HALF_PI:
        return -HALF_PI + epsilon, PhaseClampAdvisory(bound="lower", raw_phi=phi, excess=phi + HALF_PI)
    return phi, None


def _reactive_model(phi: float, reactance: float, quality_factor: float,
                    frequency: float) -> Optional[ReactiveModel]:
    """Series and parallel equivalents of the reactive part."""
    if reactance == 0.0:
        return None

    omega = 2 * math.pi * frequency
    # Q squared underflows to zero for near-lossless readings
    q_squared = quality_factor * quality_factor
    loss_term = math.inf if q_squared == 0.0 else 1 + 1 / q_squared

    if phi > 0.0:
        series_inductance = reactance / omega
        return InductiveModel(
            series_inductance=series_inductance,
            parallel_inductance=series_inductance * loss_term,
        )

    denominator = omega * reactance
    if denominator == 0.0:
        series_capacitance = math.copysign(math.inf, -reactance)
    else:
        series_capacitance = -1 / denominator
    return CapacitiveModel(
        series_capacitance=series_capacitance,
        parallel_capacitance=series_capacitance / loss_term,
    )


def analyze_measurement(measurement: Measurement, *,
                        phase_epsilon: float = DEFAULT_PHASE_EPSILON) -> ImpedanceResult:
    """
    Derive impedance, equivalent circuits and Q from one measurement.

    Args:
        measurement: Raw readings
        phase_epsilon: Distance kept from +/-pi/2 when the phase is clamped

    Returns:
        ImpedanceResult with exactly one of the inductive or capacitive
        models populated, or neither when the reactance is exactly zero

    Raises:
        InvalidMeasurementError: non-finite inputs, non-positive reference
            resistance or frequency, a phase angle that overflows, or a
            divider whose impedance is not finite
    """
    _validate(measurement)

    v_in = measurement.v_in
    v_dut = measurement.v_dut
    theta = measurement.theta

    phi_raw = theta - math.atan2(-v_dut * math.sin(theta), v_in - v_dut * math.cos(theta))
    phi, advisory = clamp_phase(phi_raw, phase_epsilon)
    if advisory is not None:
        log_phase_clamp(logger, advisory.bound, advisory.raw_phi, advisory.excess)

    # Law of cosines on the Vin and Vdut phasors gives |Vin - Vdut|
    drop_squared = v_in * v_in - 2 * v_in * v_dut * math.cos(theta) + v_dut * v_dut
    drop = math.sqrt(max(drop_squared, 0.0))
    if drop == 0.0:
        raise InvalidMeasurementError(
            "No voltage across the reference resistor; impedance is not finite",
            field="v_dut",
            value=v_dut,
            context={"v_in": v_in, "theta": theta}
        )

    impedance = v_dut * measurement.reference_resistance / drop
    if not math.isfinite(impedance):
        raise InvalidMeasurementError(
            f"Impedance is not finite for v_in={v_in!r}, v_dut={v_dut!r}",
            field="v_dut",
            value=v_dut,
            context={"v_in": v_in, "theta": theta}
        )
    series_resistance = impedance * math.cos(phi)
    reactance = impedance * math.sin(phi)
    quality_factor = abs(reactance) / series_resistance if series_resistance != 0.0 else 0.0

    result = ImpedanceResult(
        measurement=measurement,
        theta=theta,
        phi=phi,
        impedance=impedance,
        series_resistance=series_resistance,
        reactance=reactance,
        quality_factor=quality_factor,
        parallel_resistance=series_resistance * (1 + quality_factor * quality_factor),
        reactive=_reactive_model(phi, reactance, quality_factor, measurement.frequency),
        advisory=advisory,
    )

    logger.debug(
        "Impedance analyzed",
        impedance=impedance,
        phi=phi,
        quality_factor=quality_factor,
        kind="inductive" if result.is_inductive else "capacitive" if result.is_capacitive else "resistive",
    )
    return result


def analyze(reference_resistance: float, frequency: float, delta_t: float,
            v_in: float, v_dut: float, *,
            phase_epsilon: float = DEFAULT_PHASE_EPSILON) -> ImpedanceResult:
    """Convenience wrapper building the Measurement from scalars."""
    return analyze_measurement(
        Measurement(
            reference_resistance=reference_resistance,
            frequency=frequency,
            delta_t=delta_t,
            v_in=v_in,
            v_dut=v_dut,
        ),
        phase_epsilon=phase_epsilon,
    )
