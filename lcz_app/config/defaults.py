"""Default configuration parameters for the impedance meter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyzerParams:
    """Impedance analysis parameters."""
    reference_resistance: float = 992.3              # Ohms, used when -r is not given
    phase_epsilon: float = 1e-15                     # Offset from +/-pi/2 after clamping


@dataclass(frozen=True)
class DisplayParams:
    """Report formatting parameters."""
    significant_digits: int = 4
    numeric: bool = False                            # Exponents instead of SI prefixes


@dataclass(frozen=True)
class LoggingParams:
    """Diagnostic logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    analyzer: AnalyzerParams
    display: DisplayParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        analyzer=AnalyzerParams(),
        display=DisplayParams(),
        logging=LoggingParams(),
    )
