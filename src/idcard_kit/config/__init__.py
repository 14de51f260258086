"""Configuration module for idcard-kit."""

from idcard_kit.config.region_loader import (
    load_regions_from_yaml,
    load_regions_from_yaml_safe,
    validate_environment,
)

__all__ = [
    "load_regions_from_yaml",
    "load_regions_from_yaml_safe",
    "validate_environment",
]
