"""
Centralized logging configuration for the impedance meter.

All diagnostics go through structlog. The command line prints its report on
stdout, so log output defaults to stderr to keep the two apart.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Destination stream, stderr when omitted
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_analysis_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the impedance analyzer subsystem.

    Initial values keep the logger lazy so it follows configure_logging().
    """
    return structlog.get_logger(name, subsystem="analyzer")


def log_phase_clamp(
    logger: FilteringBoundLogger,
    bound: str,
    raw_phi: float,
    excess: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a phase clamp with standardized format.

    Args:
        logger: Structlog logger instance
        bound: "upper" or "lower"
        raw_phi: Phase angle before clamping, radians
        excess: Signed distance past +/-pi/2, radians
        context: Additional context data
    """
    bound_logger = logger.bind(
        bound=bound,
        raw_phi=raw_phi,
        excess=excess,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Phase angle clamped")
