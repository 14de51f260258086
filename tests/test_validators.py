"""Tests for the jurisdiction validators and dispatch."""

import random

import pytest

from idcard_kit.core.checksum import CHECK_SYMBOLS, cn_check_symbol
from idcard_kit.core.errors import ValidationFailure
from idcard_kit.core.fields import Gender
from idcard_kit.core.identity import Identity
from idcard_kit.regions.registry import RegionRegistry
from idcard_kit.validators import (
    HongKongValidator,
    Jurisdiction,
    MacauValidator,
    MainlandLegacyValidator,
    MainlandValidator,
    TaiwanValidator,
    build_validators,
    check,
    detect_jurisdiction,
    taiwan_gender,
    taiwan_region,
    validate,
)


class TestDetectJurisdiction:
    """Tests for shape detection."""

    @pytest.mark.parametrize("number,expected", [
        ("511702800222130", Jurisdiction.CN15),
        ("230127197908177456", Jurisdiction.CN18),
        ("21021119810503545x", Jurisdiction.CN18),
        ("G123456(A)", Jurisdiction.HK),
        ("AB987654(3)", Jurisdiction.HK),
        ("G123456A", Jurisdiction.HK),
        ("1123456(A)", Jurisdiction.MO),
        ("5215299A", Jurisdiction.MO),
        ("A123456789", Jurisdiction.TW),
        ("a123456789", Jurisdiction.TW),
    ])
    def test_detect(self, number, expected):
        assert detect_jurisdiction(number) == expected

    @pytest.mark.parametrize("number", ["", "12345", "G123456(a)", "hello world", None, 12345])
    def test_unrecognized(self, number):
        assert detect_jurisdiction(number) is None


class TestMainlandValidator:
    """Tests for 18-digit Mainland numbers."""

    def test_valid(self, valid_cn18):
        validator = MainlandValidator()
        for number in valid_cn18:
            assert validator.validate(number) is True

    def test_spec_examples(self):
        assert validate("230127197908177456") is True

    def test_lowercase_x(self):
        assert validate("11010119900307109X") is True
        assert validate("11010119900307109x") is True

    @pytest.mark.parametrize("number,failure", [
        ("110101199003077710", ValidationFailure.CHECKSUM_MISMATCH),
        ("110101199902291234", ValidationFailure.INVALID_CALENDAR_DATE),
        ("11010119901307771X", ValidationFailure.INVALID_CALENDAR_DATE),
        ("11010119900307A715", ValidationFailure.NON_DIGIT_CHARACTER),
        ("abcdefghijklmnopqr", ValidationFailure.INVALID_CALENDAR_DATE),
    ])
    def test_failures(self, number, failure):
        result = check(number)
        assert result.valid is False
        assert result.jurisdiction == Jurisdiction.CN18
        assert result.failure == failure
        assert result.identity is None

    def test_length_failures(self):
        validator = MainlandValidator()
        assert validator.check("1101011990030777").failure == ValidationFailure.TOO_SHORT
        assert validator.check("1101011990030777155").failure == ValidationFailure.TOO_LONG

    def test_result_carries_identity(self):
        result = check("632123198209270518")
        assert result.valid is True
        assert bool(result) is True
        assert result.identity == Identity("632123198209270518")
        assert result.identity.gender == Gender.MALE

    def test_registry_not_required(self):
        validators = build_validators(registry=RegionRegistry({}))
        result = check("110101199003077715", validators=validators)
        assert result.valid is True
        assert result.identity.region is None

    def test_exactly_one_check_symbol_accepted(self):
        """For any 17-digit body with a real date, exactly one symbol validates."""
        rng = random.Random(1234)
        for _ in range(200):
            region = f"{rng.randint(100000, 999999)}"
            birth = f"{rng.randint(1900, 2020)}{rng.randint(1, 12):02d}{rng.randint(1, 28):02d}"
            body = region + birth + f"{rng.randint(0, 999):03d}"
            accepted = [s for s in CHECK_SYMBOLS.values() if validate(body + s)]
            assert accepted == [cn_check_symbol(body)]


class TestMainlandLegacyValidator:
    """Tests for 15-digit Mainland numbers."""

    def test_valid(self):
        assert validate("511702800222130") is True
        assert validate("632123820927051") is True
        assert MainlandLegacyValidator().validate("310112850409522") is True

    def test_result_identity_is_upgraded(self):
        result = check("632123820927051")
        assert result.jurisdiction == Jurisdiction.CN15
        assert result.identity.number == "632123198209270518"

    @pytest.mark.parametrize("number,failure", [
        ("991702800222130", ValidationFailure.UNKNOWN_REGION_CODE),
        ("511702800230130", ValidationFailure.INVALID_CALENDAR_DATE),
        ("511702990229130", ValidationFailure.INVALID_CALENDAR_DATE),
        ("51170280022213X", ValidationFailure.NON_DIGIT_CHARACTER),
    ])
    def test_failures(self, number, failure):
        result = check(number)
        assert result.jurisdiction == Jurisdiction.CN15
        assert result.failure == failure


class TestHongKongValidator:
    """Tests for Hong Kong numbers."""

    @pytest.mark.parametrize("number", [
        "G123456(A)",
        "G123456A",
        "L555555(0)",
        "AB987654(3)",
        "C123456(9)",
        " G123456(A) ",
    ])
    def test_valid(self, number):
        assert validate(number) is True
        assert HongKongValidator().validate(number) is True

    def test_lowercase_rejected(self):
        assert validate("G123456(a)") is False
        assert HongKongValidator().validate("G123456(a)") is False
        assert HongKongValidator().validate("g123456(A)") is False

    def test_checksum_mismatch(self):
        result = check("AY987654(A)")
        assert result.jurisdiction == Jurisdiction.HK
        assert result.failure == ValidationFailure.CHECKSUM_MISMATCH

    def test_letters_outside_legacy_table(self):
        """Every prefix letter carries a value, not only A, B, C, R, U, Z, X, W, O, N."""
        assert validate("L555555(0)") is True
        assert validate("G123456(A)") is True

    def test_no_identity(self):
        assert check("G123456(A)").identity is None


class TestMacauValidator:
    """Tests for Macau numbers."""

    @pytest.mark.parametrize("number,expected", [
        ("1123456(A)", True),
        ("7431243(3)", True),
        ("5631279(0)", True),
        ("5215299A", True),
        ("1123456(a)", True),
        ("2000148(3)", False),
    ])
    def test_validate(self, number, expected):
        assert MacauValidator().validate(number) is expected

    def test_dispatch(self):
        assert validate("1123456(A)") is True
        assert validate("2000148(3)") is False

    def test_length(self):
        assert MacauValidator().check("112345(A)").failure == ValidationFailure.TOO_SHORT
        assert MacauValidator().check("11234567(A)").failure == ValidationFailure.TOO_LONG


class TestTaiwanValidator:
    """Tests for Taiwan numbers."""

    @pytest.mark.parametrize("number", ["A123456789", "B142610160", "Q155304682", "A225376624", "a123456789"])
    def test_valid(self, number):
        assert validate(number) is True

    def test_checksum_mismatch(self):
        result = check("Q155304680")
        assert result.jurisdiction == Jurisdiction.TW
        assert result.failure == ValidationFailure.CHECKSUM_MISMATCH

    def test_gender_marker(self):
        assert TaiwanValidator().check("A323456789").failure == ValidationFailure.UNRECOGNIZED_FORMAT

    def test_short(self):
        assert check("A12345678").failure == ValidationFailure.TOO_SHORT

    def test_gender(self):
        assert taiwan_gender("Q155304682") == Gender.MALE
        assert taiwan_gender("A225376624") == Gender.FEMALE
        assert taiwan_gender("Q155304680") is None

    def test_region(self):
        assert taiwan_region("B142610160") == "台中市"
        assert taiwan_region("0142610160") is None
        assert taiwan_region("Q155304680") is None


class TestDispatch:
    """Tests for top-level validation."""

    @pytest.mark.parametrize("value", [None, 42, b"230127197908177456", [], ""])
    def test_total_on_any_input(self, value):
        assert validate(value) is False

    def test_unrecognized_reasons(self):
        assert check("").failure == ValidationFailure.TOO_SHORT
        assert check("1" * 25).failure == ValidationFailure.TOO_LONG
        assert check("12345").failure == ValidationFailure.UNRECOGNIZED_FORMAT
        assert check("12345").jurisdiction is None

    def test_explicit_jurisdiction(self):
        assert validate("230127197908177456", Jurisdiction.TW) is False
        assert validate("A123456789", Jurisdiction.TW) is True
        assert check("A123456789", "TW").valid is True

    def test_revalidation_is_idempotent(self, valid_cn18):
        for number in valid_cn18:
            identity = check(number).identity
            assert check(identity.number).identity == identity

    def test_report(self):
        report = check("Q155304680").to_report()
        assert report.valid is False
        assert report.jurisdiction == "TW"
        assert report.failure == "checksum_mismatch"
