"""
Field decomposition for 18-digit Mainland China ID numbers.

Layout: RRRRRRYYYYMMDDSSSC
    [0:6)   region code
    [6:14)  birth date (YYYYMMDD)
    [14:17) sequence, the parity of the last digit encodes gender
    [17]    check symbol
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from idcard_kit.core.checksum import to_digits
from idcard_kit.core.errors import MalformedInputError, ValidationFailure


REGION = slice(0, 6)
BIRTH_DATE = slice(6, 14)
SEQUENCE = slice(14, 17)
CHECK = 17

CN18_LENGTH = 18


class Gender(str, Enum):
    """Gender encoded in an ID number."""

    MALE = "male"
    FEMALE = "female"


def gender_from_digit(digit: int) -> Gender:
    """Odd digits are male, even digits female."""
    return Gender.MALE if digit % 2 == 1 else Gender.FEMALE


@dataclass(frozen=True)
class IdentityFields:
    """Semantic fields of an 18-digit number."""

    region_code: str
    birth_date: date
    sequence: str
    check_symbol: str

    @property
    def gender(self) -> Gender:
        return gender_from_digit(int(self.sequence[-1]))


def parse_birth_date(text: str) -> date:
    """Parse an 8-character ``YYYYMMDD`` string into a calendar date.

    Args:
        text: The date substring.

    Returns:
        The parsed date.

    Raises:
        MalformedInputError: If the text is not eight ASCII digits or does
            not name a real Gregorian date (e.g. Feb 29 on a non-leap year).
    """
    if len(text) != 8:
        raise MalformedInputError(
            f"Birth date must be 8 digits, got {len(text)}",
            ValidationFailure.INVALID_CALENDAR_DATE,
        )
    try:
        digits = to_digits(text)
    except MalformedInputError as e:
        raise MalformedInputError(str(e), ValidationFailure.INVALID_CALENDAR_DATE) from e

    year = digits[0] * 1000 + digits[1] * 100 + digits[2] * 10 + digits[3]
    month = digits[4] * 10 + digits[5]
    day = digits[6] * 10 + digits[7]
    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedInputError(
            f"Invalid calendar date {text}: {e}",
            ValidationFailure.INVALID_CALENDAR_DATE,
        ) from e


def decompose(number: str) -> IdentityFields:
    """Split an 18-character number into its fields.

    Only the layout and the embedded date are checked here; the checksum
    is verified by the validator.

    Raises:
        MalformedInputError: On wrong length or an invalid birth date.
    """
    if len(number) != CN18_LENGTH:
        reason = ValidationFailure.TOO_SHORT if len(number) < CN18_LENGTH else ValidationFailure.TOO_LONG
        raise MalformedInputError(f"Expected {CN18_LENGTH} characters, got {len(number)}", reason)

    return IdentityFields(
        region_code=number[REGION],
        birth_date=parse_birth_date(number[BIRTH_DATE]),
        sequence=number[SEQUENCE],
        check_symbol=number[CHECK],
    )


def age_in_year(birth_year: int, year: int) -> Optional[int]:
    """Age reached in ``year``, or None when ``year`` precedes the birth year."""
    if year < birth_year:
        return None
    return year - birth_year
