"""Tests for Identity."""

import json
from datetime import date

import pytest

from idcard_kit.core.fields import Gender
from idcard_kit.core.identity import Identity
from idcard_kit.regions.registry import RegionRegistry


class TestIdentityConstruction:
    """Tests for normalization and validity."""

    def test_upgrades_legacy_number(self):
        identity = Identity("632123820927051")
        assert identity.is_valid is True
        assert identity.number == "632123198209270518"
        assert len(identity) == 18

    def test_valid_18_digit_is_unchanged(self, valid_cn18):
        for number in valid_cn18:
            identity = Identity(number)
            assert identity.is_valid is True
            assert identity.number == number

    def test_trims_and_uppercases(self):
        identity = Identity("  21021119810503545x ")
        assert identity.number == "21021119810503545X"
        assert identity.is_valid is True

    def test_invalid_numbers(self, invalid_cn18):
        for number in invalid_cn18:
            assert Identity(number).is_valid is False

    def test_legacy_with_unknown_province_is_invalid(self):
        identity = Identity("991702800222130")
        assert identity.is_valid is False
        assert identity.number == "991702800222130"

    def test_wrong_length(self):
        identity = Identity("12345")
        assert identity.is_valid is False
        assert identity.number == "12345"
        assert identity.is_empty is False

    def test_empty(self):
        identity = Identity("")
        assert identity.is_valid is False
        assert identity.is_empty is True
        assert len(identity) == 0

    def test_immutable(self):
        identity = Identity("632123198209270518")
        with pytest.raises(AttributeError):
            identity.number = "110101199003077715"


class TestIdentityEquality:
    """Tests for comparison."""

    def test_legacy_equals_upgraded(self):
        assert Identity("632123820927051") == Identity("632123198209270518")

    def test_case_insensitive_check_symbol(self):
        assert Identity("21021119810503545X") == Identity("21021119810503545x")

    def test_different_numbers(self):
        assert Identity("330421197402080974") != Identity("130133197909136078")

    def test_hashable(self):
        assert len({Identity("632123820927051"), Identity("632123198209270518")}) == 1


class TestIdentityFields:
    """Tests for decoded fields."""

    @pytest.fixture
    def identity(self):
        return Identity("632123820927051")

    def test_birth_fields(self, identity):
        assert identity.birth_date == "1982-09-27"
        assert identity.year == 1982
        assert identity.month == 9
        assert identity.day == 27
        assert identity.region_code == "632123"

    def test_gender(self, identity):
        assert identity.gender == Gender.MALE
        assert Identity("511702800222130").gender == Gender.FEMALE

    def test_province_and_region(self, identity):
        assert identity.province == "青海"
        assert identity.region == "青海省海东地区乐都县"
        assert Identity("511702800222130").region == "四川省达州市通川区"

    def test_unknown_region_code_still_valid(self):
        """Registry membership does not affect 18-digit validity."""
        identity = Identity("110101199003077715", registry=RegionRegistry({}))
        assert identity.is_valid is True
        assert identity.region is None
        assert identity.province == "北京"

    def test_almanac(self, identity):
        assert identity.constellation == "天秤座"
        assert identity.chinese_era == "壬戌"
        assert identity.chinese_zodiac == "狗"

    def test_age(self, identity):
        assert identity.age(date(2024, 1, 1)) == 42
        assert identity.age_in(1982) == 0
        assert identity.age_in(1981) is None
        assert identity.age() == date.today().year - 1982

    def test_invalid_identity_has_no_fields(self):
        identity = Identity("110101199003077710")
        assert identity.birth_date is None
        assert identity.year is None
        assert identity.month is None
        assert identity.day is None
        assert identity.gender is None
        assert identity.province is None
        assert identity.region is None
        assert identity.constellation is None
        assert identity.chinese_era is None
        assert identity.chinese_zodiac is None
        assert identity.age() is None
        assert identity.age_in(2024) is None


class TestIdentitySerialization:
    """Tests for dict and JSON output."""

    def test_to_dict(self):
        data = Identity("511702800222130").to_dict(today=date(2024, 6, 15))
        assert data["number"] == "511702198002221308"
        assert data["valid"] is True
        assert data["birth_date"] == "1980-02-22"
        assert data["age"] == 44
        assert data["gender"] == "female"
        assert data["province"] == "四川"
        assert data["constellation"] == "双鱼座"

    def test_to_json(self):
        text = Identity("632123820927051").to_json(pretty=True)
        assert "\n" in text
        data = json.loads(text)
        assert data["region"] == "青海省海东地区乐都县"
        assert data["chinese_zodiac"] == "狗"

    def test_invalid_to_json(self):
        data = json.loads(Identity("bogus").to_json())
        assert data == {
            "number": "BOGUS",
            "valid": False,
            "length": 5,
            "birth_date": None,
            "year": None,
            "month": None,
            "day": None,
            "age": None,
            "gender": None,
            "province": None,
            "region": None,
            "constellation": None,
            "chinese_era": None,
            "chinese_zodiac": None,
        }
