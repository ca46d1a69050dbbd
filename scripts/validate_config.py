#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lcz_app.config.loader import CONFIG_FILENAME, ConfigLoader
from lcz_app.config.validation import ConfigValidator, ValidationError
from lcz_app.errors import ConfigurationError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    return ConfigValidator.validate_config(loader.merge_config())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    config_file = loader.config_dir / CONFIG_FILENAME

    if config_file.exists():
        print(f"Validating {config_file}...")
    else:
        print(f"{config_file} not found, validating defaults...")

    try:
        errors = validate_config_dir(config_dir)
    except ConfigurationError as e:
        print(f"Error loading configuration: {e.message}")
        sys.exit(1)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        sys.exit(1)

    config = loader.build_config(loader.merge_config())
    print("Configuration is valid")
    print(f"  reference resistance: {config.analyzer.reference_resistance} Ohms")
    print(f"  significant digits: {config.display.significant_digits}")
    print(f"  numeric exponents: {config.display.numeric}")
    sys.exit(0)


if __name__ == "__main__":
    main()
