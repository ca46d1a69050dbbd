"""
Host-level error classifications.

Raised while turning the command line and configuration files into the
inputs for an analysis. Both terminate the program with a failure status.
"""

from typing import Any, Optional

from .base import LCZError


class UsageError(LCZError):
    """Wrong argument count, unknown flag or unparsable number."""

    def __init__(self, message: str, argv: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argv = list(argv) if argv is not None else []


class ConfigurationError(LCZError):
    """Configuration file unreadable or failing validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
