"""
Error classification for the impedance meter.

Usage errors come from the command line, measurement errors from the
analyzer, notation errors from the engineering formatter and configuration
errors from the YAML/config layer.
"""

from .base import LCZError
from .measurement import InvalidMeasurementError, NotationDomainError
from .host import ConfigurationError, UsageError

__all__ = [
    "LCZError",
    # Host errors
    "UsageError",
    "ConfigurationError",
    # Computation errors
    "InvalidMeasurementError",
    "NotationDomainError",
]
