"""Plain-text report of inputs and derived quantities."""

import math
import sys
from typing import Optional, TextIO

from ..analysis.models import CapacitiveModel, ImpedanceResult, InductiveModel
from ..notation import format_engineering


def format_quantity(value: float, significant_digits: int = 4, numeric: bool = False) -> str:
    """
    Engineering notation for a quantity followed directly by its unit.

    The formatter only accepts normal nonzero values; zero, subnormal and
    non-finite values fall back to plain "g" formatting.
    """
    if not math.isfinite(value) or abs(value) < sys.float_info.min:
        return f"{value:g} "
    return format_engineering(value, significant_digits, numeric)


def _advisory_lines(result: ImpedanceResult) -> list[str]:
    advisory = result.advisory
    if advisory is None:
        return []
    bound = "pi/2" if advisory.bound == "upper" else "-pi/2"
    return [
        f"  **Warning: {advisory.message}.",
        f"  ** Setting it to {bound}",
    ]


def render_report(result: ImpedanceResult, significant_digits: int = 4,
                  numeric: bool = False) -> list[str]:
    """Render the Inputs/Outputs report as a list of lines."""
    def q(value: float) -> str:
        return format_quantity(value, significant_digits, numeric)

    m = result.measurement
    lines = [
        "Inputs:",
        f"  Rref: {q(m.reference_resistance)}Ohms",
        f"  freq: {q(m.frequency)}Hz",
        f"  delta_t: {q(m.delta_t)}Sec",
        f"  V_in: {q(m.v_in)}V",
        f"  V_dut: {q(m.v_dut)}V",
        "Outputs:",
    ]
    lines.extend(_advisory_lines(result))
    lines.extend([
        f"  theta: {result.theta:f} rad ({result.theta_degrees:f} deg)",
        f"  phi: {result.phi:f} rad ({result.phi_degrees:f} deg)",
        f"  Z: {q(result.impedance)}Ohms",
    ])

    reactive = result.reactive
    if isinstance(reactive, InductiveModel):
        lines.append(f"  Ls: {q(reactive.series_inductance)}H")
        lines.append(f"  Lp: {q(reactive.parallel_inductance)}H")
    elif isinstance(reactive, CapacitiveModel):
        lines.append(f"  Cs: {q(reactive.series_capacitance)}F")
        lines.append(f"  Cp: {q(reactive.parallel_capacitance)}F")

    lines.extend([
        f"  Rs (Resr): {q(result.series_resistance)}Ohms",
        f"  Rp: {q(result.parallel_resistance)}Ohms",
        f"  X: {q(result.reactance)}Ohms",
        f"  Q: {result.quality_factor:f}",
    ])
    return lines


def print_report(result: ImpedanceResult, significant_digits: int = 4,
                 numeric: bool = False, stream: Optional[TextIO] = None) -> None:
    """Print the report to stdout (or the given stream)."""
    output = stream or sys.stdout
    for line in render_report(result, significant_digits, numeric):
        print(line, file=output)
