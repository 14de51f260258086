"""
Read-only region tables.

- ProvinceTable: two-digit province code -> short province name, used by
  the legacy 15-digit validator.
- RegionRegistry: six-digit administrative code -> full region name, used
  for lookups and for drawing random codes in the fake generator.

Both are built once and shared; nothing mutates them after construction.
"""

import random
import threading
from types import MappingProxyType
from typing import Mapping, Optional

from idcard_kit.config.region_loader import load_regions_from_yaml, region_file_path
from idcard_kit.logging.setup import get_logger


logger = get_logger(__name__)


# 71 and 83 both map to 台湾
PROVINCE_NAMES = MappingProxyType({
    "11": "北京", "12": "天津", "13": "河北", "14": "山西", "15": "内蒙古",
    "21": "辽宁", "22": "吉林", "23": "黑龙江",
    "31": "上海", "32": "江苏", "33": "浙江", "34": "安徽", "35": "福建", "36": "江西", "37": "山东",
    "41": "河南", "42": "湖北", "43": "湖南", "44": "广东", "45": "广西", "46": "海南",
    "50": "重庆", "51": "四川", "52": "贵州", "53": "云南", "54": "西藏",
    "61": "陕西", "62": "甘肃", "63": "青海", "64": "宁夏", "65": "新疆",
    "71": "台湾", "81": "香港", "82": "澳门", "83": "台湾", "91": "国外",
})


class ProvinceTable:
    """Two-digit province code to province name."""

    def __init__(self, names: Mapping[str, str] = PROVINCE_NAMES):
        self._names = MappingProxyType(dict(names))

    def lookup(self, code: str) -> Optional[str]:
        return self._names.get(code)

    def contains(self, code: str) -> bool:
        return code in self._names

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._names)


PROVINCES = ProvinceTable()


class RegionRegistry:
    """Six-digit region code to full region name.

    Example:
        >>> registry = RegionRegistry({"511702": "四川省达州市通川区"})
        >>> registry.lookup("511702")
        '四川省达州市通川区'
        >>> registry.random_code_with_prefix("99") is None
        True
    """

    def __init__(self, regions: Mapping[str, str]):
        self._regions = MappingProxyType(dict(regions))
        self._codes = tuple(sorted(self._regions))
        # County-level codes are preferred when drawing random codes
        self._leaf_codes = tuple(c for c in self._codes if not c.endswith("00"))

    @classmethod
    def from_yaml(cls, path) -> "RegionRegistry":
        """Build a registry from a YAML region file."""
        return cls(load_regions_from_yaml(path))

    def lookup(self, code: str) -> Optional[str]:
        return self._regions.get(code)

    def contains(self, code: str) -> bool:
        return code in self._regions

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._regions)

    def random_code(self, rng: Optional[random.Random] = None) -> str:
        """Draw a random region code.

        Raises:
            LookupError: If the registry is empty.
        """
        candidates = self._leaf_codes or self._codes
        if not candidates:
            raise LookupError("Region registry is empty")
        return (rng or random).choice(candidates)

    def random_code_with_prefix(self, prefix: str, rng: Optional[random.Random] = None) -> Optional[str]:
        """Draw a random region code starting with ``prefix``.

        Args:
            prefix: One to six leading digits of the code.
            rng: Random generator to draw from.

        Returns:
            A matching code, or None when the prefix is empty, not numeric,
            longer than six digits, or matches nothing.
        """
        if not prefix or len(prefix) > 6 or not prefix.isascii() or not prefix.isdigit():
            return None

        leaves = [c for c in self._leaf_codes if c.startswith(prefix)]
        candidates = leaves or [c for c in self._codes if c.startswith(prefix)]
        if not candidates:
            return None
        return (rng or random).choice(candidates)


_default_registry: Optional[RegionRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> RegionRegistry:
    """Return the process-wide registry, loading it on first use.

    The table comes from ``IDCARD_KIT_REGION_FILE`` when set, otherwise
    from the bundled data file.
    """
    global _default_registry

    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                path = region_file_path()
                _default_registry = RegionRegistry.from_yaml(path)
                logger.info(
                    "Region registry loaded",
                    extra={"event": "regions_loaded", "path": str(path), "count": len(_default_registry)},
                )

    return _default_registry


def reset_default_registry() -> None:
    """Forget the loaded registry so the next call reloads it."""
    global _default_registry

    with _default_registry_lock:
        _default_registry = None
