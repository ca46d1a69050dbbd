"""
Computation error classifications.

These represent contract violations by the caller: inputs outside the domain
of the analyzer or of the engineering formatter. Neither is retried.
"""

from typing import Optional

from .base import LCZError


class InvalidMeasurementError(LCZError):
    """Measurement inputs the impedance analysis cannot work with."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class NotationDomainError(LCZError, ValueError):
    """Value is not a normal, finite, nonzero float (or digits < 1)."""

    def __init__(self, message: str, value: Optional[float] = None,
                 significant_digits: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.significant_digits = significant_digits
