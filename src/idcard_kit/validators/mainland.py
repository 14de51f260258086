"""
Mainland China Resident Identity Card validators.

CN18: RRRRRRYYYYMMDDSSSC with an ISO 7064 MOD 11-2 check symbol.
CN15: RRRRRRYYMMDDSSS, legacy form without century or check symbol; the
century is always 19 and the province code must be known.
"""

from typing import Optional

from idcard_kit.core.checksum import cn_check_symbol, is_ascii_digits
from idcard_kit.core.errors import MalformedInputError, ValidationFailure
from idcard_kit.core.fields import BIRTH_DATE, CHECK, CN18_LENGTH, parse_birth_date
from idcard_kit.core.identity import Identity
from idcard_kit.core.upgrade import CN15_LENGTH, legacy_birth_date_text, upgrade
from idcard_kit.regions.registry import PROVINCES, ProvinceTable, RegionRegistry
from idcard_kit.validators.base import IdNumberValidator, Jurisdiction, length_failure


def cn18_failure(number: str) -> Optional[ValidationFailure]:
    """First failure of a trimmed, uppercased 18-character number."""
    failure = length_failure(len(number), CN18_LENGTH)
    if failure:
        return failure

    try:
        parse_birth_date(number[BIRTH_DATE])
    except MalformedInputError as e:
        return e.reason

    first17 = number[:CHECK]
    if not is_ascii_digits(first17):
        return ValidationFailure.NON_DIGIT_CHARACTER

    if cn_check_symbol(first17) != number[CHECK].upper():
        return ValidationFailure.CHECKSUM_MISMATCH
    return None


def cn15_failure(number: str, provinces: ProvinceTable = PROVINCES) -> Optional[ValidationFailure]:
    """First failure of a trimmed 15-character legacy number."""
    failure = length_failure(len(number), CN15_LENGTH)
    if failure:
        return failure

    if not is_ascii_digits(number):
        return ValidationFailure.NON_DIGIT_CHARACTER

    if not provinces.contains(number[0:2]):
        return ValidationFailure.UNKNOWN_REGION_CODE

    try:
        parse_birth_date(legacy_birth_date_text(number))
    except MalformedInputError as e:
        return e.reason
    return None


def normalize_mainland(number: str, provinces: ProvinceTable = PROVINCES) -> tuple[str, bool]:
    """Canonical form and validity of a Mainland number.

    Valid 15-digit numbers are upgraded; anything else is returned trimmed
    and uppercased.
    """
    if not isinstance(number, str):
        return "", False

    number = number.strip().upper()
    if len(number) == CN15_LENGTH:
        if cn15_failure(number, provinces) is None:
            return upgrade(number), True
        return number, False
    if len(number) == CN18_LENGTH:
        return number, cn18_failure(number) is None
    return number, False


class _MainlandValidator(IdNumberValidator):
    def __init__(
        self,
        *,
        registry: Optional[RegionRegistry] = None,
        provinces: ProvinceTable = PROVINCES,
    ):
        self.registry = registry
        self.provinces = provinces

    def _identity(self, number: str) -> Identity:
        return Identity(number, registry=self.registry, provinces=self.provinces)


class MainlandValidator(_MainlandValidator):
    """18-digit Mainland China ID numbers.

    Example:
        >>> MainlandValidator().validate("230127197908177456")
        True
    """

    jurisdiction = Jurisdiction.CN18

    def _failure(self, number: str) -> Optional[ValidationFailure]:
        return cn18_failure(number.strip().upper())


class MainlandLegacyValidator(_MainlandValidator):
    """15-digit Mainland China ID numbers.

    Example:
        >>> MainlandLegacyValidator().validate("511702800222130")
        True
    """

    jurisdiction = Jurisdiction.CN15

    def _failure(self, number: str) -> Optional[ValidationFailure]:
        return cn15_failure(number.strip().upper(), self.provinces)
