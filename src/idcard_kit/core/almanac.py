"""Calendar lookups derived from a birth date: constellation, era and zodiac."""

from typing import Optional


CHINESE_ZODIAC = ("猪", "鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗")

CELESTIAL_STEMS = ("癸", "甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬")

TERRESTRIAL_BRANCHES = ("亥", "子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌")

# (month, first day of the sign starting in that month, sign)
_CONSTELLATION_STARTS = (
    (1, 20, "水瓶座"),
    (2, 19, "双鱼座"),
    (3, 21, "白羊座"),
    (4, 20, "金牛座"),
    (5, 21, "双子座"),
    (6, 22, "巨蟹座"),
    (7, 23, "狮子座"),
    (8, 23, "处女座"),
    (9, 23, "天秤座"),
    (10, 24, "天蝎座"),
    (11, 23, "射手座"),
    (12, 22, "摩羯座"),
)


def constellation(month: int, day: int) -> Optional[str]:
    """Western zodiac sign for a month and day, or None if out of range."""
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    _, start, sign = _CONSTELLATION_STARTS[month - 1]
    if day >= start:
        return sign
    # Before the cutoff the previous month's sign still applies
    return _CONSTELLATION_STARTS[month - 2][2]


def chinese_era(year: int) -> str:
    """Sexagenary (stem-branch) name of a year, e.g. 1982 -> 壬戌."""
    return CELESTIAL_STEMS[(year - 3) % 10] + TERRESTRIAL_BRANCHES[(year - 3) % 12]


def chinese_zodiac(year: int) -> str:
    """Chinese zodiac animal of a year, e.g. 1982 -> 狗."""
    return CHINESE_ZODIAC[(year - 3) % 12]
