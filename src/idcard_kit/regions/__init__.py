"""Province and administrative region tables."""

from idcard_kit.regions.registry import (
    PROVINCES,
    ProvinceTable,
    RegionRegistry,
    get_default_registry,
)

__all__ = [
    "PROVINCES",
    "ProvinceTable",
    "RegionRegistry",
    "get_default_registry",
]
