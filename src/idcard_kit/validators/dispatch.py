"""
Jurisdiction detection and dispatch.

``check`` and ``validate`` accept any value and never raise: the input is
matched by shape to one jurisdiction and handed to its validator.
"""

from typing import Optional

from idcard_kit.core.errors import ValidationFailure
from idcard_kit.core.fields import Gender
from idcard_kit.regions.registry import PROVINCES, ProvinceTable, RegionRegistry
from idcard_kit.validators.base import IdNumberValidator, Jurisdiction, ValidationResult
from idcard_kit.validators.hong_kong import HK_PATTERN, HongKongValidator
from idcard_kit.validators.macau import MO_LENGTH, MacauValidator, strip_macau
from idcard_kit.validators.mainland import MainlandLegacyValidator, MainlandValidator
from idcard_kit.validators.taiwan import TaiwanValidator


MAX_LENGTH = 18


def detect_jurisdiction(number: object) -> Optional[Jurisdiction]:
    """Guess the jurisdiction of a number from its shape.

    The Hong Kong pattern is tried on the input before it is uppercased.

    Example:
        >>> detect_jurisdiction("G123456(A)")
        <Jurisdiction.HK: 'HK'>
        >>> detect_jurisdiction("A123456789")
        <Jurisdiction.TW: 'TW'>
    """
    if not isinstance(number, str):
        return None

    trimmed = number.strip()
    if HK_PATTERN.match(trimmed):
        return Jurisdiction.HK

    upper = trimmed.upper()
    if len(upper) == 15:
        return Jurisdiction.CN15
    if len(upper) == 18:
        return Jurisdiction.CN18

    stripped = strip_macau(upper)
    if len(stripped) == MO_LENGTH and stripped[0].isdigit():
        return Jurisdiction.MO
    if len(stripped) in (9, 10) and "A" <= stripped[0] <= "Z":
        return Jurisdiction.TW
    return None


def build_validators(
    registry: Optional[RegionRegistry] = None,
    provinces: ProvinceTable = PROVINCES,
) -> dict[Jurisdiction, IdNumberValidator]:
    """One validator per jurisdiction sharing the given tables."""
    return {
        Jurisdiction.CN15: MainlandLegacyValidator(registry=registry, provinces=provinces),
        Jurisdiction.CN18: MainlandValidator(registry=registry, provinces=provinces),
        Jurisdiction.HK: HongKongValidator(),
        Jurisdiction.MO: MacauValidator(),
        Jurisdiction.TW: TaiwanValidator(),
    }


_VALIDATORS = build_validators()


def _unrecognized(number: object) -> ValidationResult:
    if not isinstance(number, str):
        return ValidationResult(repr(number), None, ValidationFailure.UNRECOGNIZED_FORMAT)

    length = len(number.strip())
    if length == 0:
        failure = ValidationFailure.TOO_SHORT
    elif length > MAX_LENGTH:
        failure = ValidationFailure.TOO_LONG
    else:
        failure = ValidationFailure.UNRECOGNIZED_FORMAT
    return ValidationResult(number, None, failure)


def check(
    number: object,
    jurisdiction: Optional[Jurisdiction] = None,
    *,
    validators: Optional[dict[Jurisdiction, IdNumberValidator]] = None,
) -> ValidationResult:
    """Validate a number of any supported jurisdiction.

    Args:
        number: The number to check; any value is accepted.
        jurisdiction: Skip detection and check against this format.
        validators: Validators to use instead of the defaults, e.g. from
            ``build_validators`` with a custom region registry.

    Returns:
        The detailed validation result. Mainland numbers carry the decoded
        ``Identity`` when valid.
    """
    validators = validators or _VALIDATORS
    jurisdiction = jurisdiction or detect_jurisdiction(number)
    if jurisdiction is None:
        return _unrecognized(number)
    return validators[Jurisdiction(jurisdiction)].check(number)


def validate(number: object, jurisdiction: Optional[Jurisdiction] = None) -> bool:
    """Return True if ``number`` is a valid ID number.

    Example:
        >>> validate("511702800222130")
        True
        >>> validate("G123456(a)")
        False
    """
    return check(number, jurisdiction).valid


def taiwan_gender(number: str) -> Optional[Gender]:
    """Gender of a valid Taiwan number."""
    return _VALIDATORS[Jurisdiction.TW].gender(number)


def taiwan_region(number: str) -> Optional[str]:
    """Place of first registration of a valid Taiwan number."""
    return _VALIDATORS[Jurisdiction.TW].region(number)
