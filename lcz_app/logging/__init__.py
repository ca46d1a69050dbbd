"""
Logging configuration and utilities for the impedance meter.
"""
from .config import configure_logging, get_analysis_logger, get_logger, log_phase_clamp

__all__ = ["configure_logging", "get_logger", "get_analysis_logger", "log_phase_clamp"]
