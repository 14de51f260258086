"""Pytest fixtures and configuration."""

from datetime import date

import pytest

from idcard_kit.regions.registry import RegionRegistry


# Fixed "today" for generator tests
TODAY = date(2024, 6, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def small_registry():
    """A registry with a handful of codes."""
    return RegionRegistry({
        "110000": "北京市",
        "110101": "北京市东城区",
        "110105": "北京市朝阳区",
        "330000": "浙江省",
        "330100": "浙江省杭州市",
        "330106": "浙江省杭州市西湖区",
    })


@pytest.fixture
def valid_cn18():
    """Valid 18-digit Mainland numbers."""
    return [
        "110101199003077715",  # Beijing, 1990-03-07, male
        "110101199003077758",  # Beijing, 1990-03-07, male
        "11010119900307109X",  # X check symbol
        "230127197908177456",
        "632123198209270518",
        "21021119810503545X",
        "330421197402080974",
        "130133197909136078",
    ]


@pytest.fixture
def invalid_cn18():
    """Invalid 18-digit Mainland numbers."""
    return [
        "110101199003077710",  # checksum
        "110101199902291234",  # Feb 29 on a non-leap year
        "11010119901307771X",  # month 13
        "11010119900307A715",  # letter in the body
    ]
