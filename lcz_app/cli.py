"""
Command line entry point.

    lcz [-r resistor_val] freq delta_t V_in V_dut

Example, a 1 mH inductor at 1 kHz against a 327.8 Ohm reference:

    lcz -r 327.8 1e3 217e-6 8.81 0.17827
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .analysis import analyze
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError, InvalidMeasurementError, UsageError
from .logging.config import configure_logging, get_logger
from .report import print_report

logger = get_logger(__name__)

USAGE = (
    "usage: lcz [-r resistor_val] freq delta_t V_in V_dut\n"
    "  delta_t: time from V_dut to V_in zero crossings\n"
    "           (negative for capacitors, positive for inductors)"
)

POSITIONALS = ("freq", "delta_t", "V_in", "V_dut")


@dataclass(frozen=True)
class CommandLine:
    """Parsed command line values."""
    frequency: float
    delta_t: float
    v_in: float
    v_dut: float
    reference_resistance: Optional[float] = None   # None unless -r was given


def _parse_number(name: str, text: str, argv: Sequence[str]) -> float:
    try:
        return float(text)
    except ValueError:
        raise UsageError(f"{name} is not a number: {text!r}", argv=list(argv)) from None


def parse_args(argv: Sequence[str]) -> CommandLine:
    """
    Parse the arguments following the program name.

    Negative values such as "-217e-6" are positionals, so flags are only
    recognised in the six-argument form.

    Raises:
        UsageError: wrong argument count, unknown flag or a non-number
    """
    args = list(argv)
    reference_resistance = None

    if len(args) == 6:
        if args[0] != "-r":
            raise UsageError(f"unrecognized option {args[0]!r}", argv=argv)
        reference_resistance = _parse_number("resistor_val", args[1], argv)
        args = args[2:]

    if len(args) != len(POSITIONALS):
        raise UsageError(
            f"expected {len(POSITIONALS)} values, got {len(args)}", argv=argv
        )

    frequency, delta_t, v_in, v_dut = (
        _parse_number(name, text, argv) for name, text in zip(POSITIONALS, args)
    )
    return CommandLine(
        frequency=frequency,
        delta_t=delta_t,
        v_in=v_in,
        v_dut=v_dut,
        reference_resistance=reference_resistance,
    )


def load_config(command_line: CommandLine, config_dir: Optional[Path] = None) -> DefaultConfig:
    """Merge defaults, lcz.yaml and the command line, then validate."""
    overrides = {}
    if command_line.reference_resistance is not None:
        overrides["analyzer"] = {"reference_resistance": command_line.reference_resistance}

    loader = ConfigLoader.create(config_dir)
    merged = loader.merge_config(overrides)

    errors = ConfigValidator.validate_config(merged)
    if errors:
        details = "; ".join(f"{e.field}: {e.message} (value: {e.value!r})" for e in errors)
        raise ConfigurationError(f"Invalid configuration: {details}", errors=errors)

    return loader.build_config(merged)


def main(argv: Optional[Sequence[str]] = None, config_dir: Optional[Path] = None) -> int:
    """Run one analysis and print the report. Returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        command_line = parse_args(argv)
        config = load_config(command_line, config_dir)
    except UsageError as e:
        print(f"lcz: {e.message}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1
    except ConfigurationError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    try:
        result = analyze(
            config.analyzer.reference_resistance,
            command_line.frequency,
            command_line.delta_t,
            command_line.v_in,
            command_line.v_dut,
            phase_epsilon=config.analyzer.phase_epsilon,
        )
    except InvalidMeasurementError as e:
        logger.error("Analysis failed", field=e.field, value=e.value, error=e.message)
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    print_report(
        result,
        significant_digits=config.display.significant_digits,
        numeric=config.display.numeric,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
