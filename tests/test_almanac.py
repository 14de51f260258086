"""Tests for constellation, era and zodiac lookups."""

import pytest

from idcard_kit.core.almanac import chinese_era, chinese_zodiac, constellation


class TestConstellation:
    """Tests for constellation()."""

    @pytest.mark.parametrize("month,day,expected", [
        (1, 19, "摩羯座"),
        (1, 20, "水瓶座"),
        (2, 18, "水瓶座"),
        (2, 19, "双鱼座"),
        (3, 21, "白羊座"),
        (6, 21, "双子座"),
        (6, 22, "巨蟹座"),
        (9, 27, "天秤座"),
        (12, 21, "射手座"),
        (12, 22, "摩羯座"),
        (12, 31, "摩羯座"),
    ])
    def test_boundaries(self, month, day, expected):
        assert constellation(month, day) == expected

    @pytest.mark.parametrize("month,day", [(0, 1), (13, 1), (5, 0), (5, 32)])
    def test_out_of_range(self, month, day):
        assert constellation(month, day) is None


class TestChineseCalendar:
    """Tests for chinese_era() and chinese_zodiac()."""

    @pytest.mark.parametrize("year,era,animal", [
        (1982, "壬戌", "狗"),
        (1984, "甲子", "鼠"),
        (2000, "庚辰", "龙"),
        (2024, "甲辰", "龙"),
        (1979, "己未", "羊"),
    ])
    def test_known_years(self, year, era, animal):
        assert chinese_era(year) == era
        assert chinese_zodiac(year) == animal

    def test_cycle_of_sixty(self):
        assert chinese_era(1924) == chinese_era(1984)
        assert chinese_zodiac(1972) == chinese_zodiac(1984)
