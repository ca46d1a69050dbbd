"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MAX_SIGNIFICANT_DIGITS = 15
MAX_PHASE_EPSILON = 1e-3


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_analyzer_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate analyzer parameters."""
        errors = []

        if "reference_resistance" in params:
            value = params["reference_resistance"]
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                errors.append(ValidationError(
                    field="reference_resistance",
                    message="Must be a positive finite number",
                    value=value
                ))

        if "phase_epsilon" in params:
            value = params["phase_epsilon"]
            if not _is_number(value) or value < 0 or value >= MAX_PHASE_EPSILON:
                errors.append(ValidationError(
                    field="phase_epsilon",
                    message=f"Must be a non-negative number below {MAX_PHASE_EPSILON}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display parameters."""
        errors = []

        if "significant_digits" in params:
            value = params["significant_digits"]
            if (not isinstance(value, int) or isinstance(value, bool)
                    or not 1 <= value <= MAX_SIGNIFICANT_DIGITS):
                errors.append(ValidationError(
                    field="significant_digits",
                    message=f"Must be an integer between 1 and {MAX_SIGNIFICANT_DIGITS}",
                    value=value
                ))

        if "numeric" in params:
            value = params["numeric"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="numeric",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "analyzer" in config:
            errors.extend(ConfigValidator.validate_analyzer_params(config["analyzer"]))

        if "display" in config:
            errors.extend(ConfigValidator.validate_display_params(config["display"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
