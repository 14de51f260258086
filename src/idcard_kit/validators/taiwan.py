"""
Taiwan National Identification Card validator.

Format: one letter (place of first registration), a gender digit (1 male,
2 female), seven serial digits and a check digit, e.g. ``A123456789``.

Checksum: the letter maps to a two-digit code 10-35 whose tens digit is
weighted 1 and units digit 9; digits 2-9 are weighted 8..1; the check digit
is ``(10 - sum % 10) % 10``.
"""

import re
from typing import Optional

from idcard_kit.core.checksum import to_digits, weighted_sum
from idcard_kit.core.errors import ValidationFailure
from idcard_kit.core.fields import Gender
from idcard_kit.validators.base import IdNumberValidator, Jurisdiction, length_failure


# letter -> (code, place of registration)
PREFIX_LETTERS = {
    "A": (10, "台北市"),
    "B": (11, "台中市"),
    "C": (12, "基隆市"),
    "D": (13, "台南市"),
    "E": (14, "高雄市"),
    "F": (15, "新北市"),
    "G": (16, "宜兰县"),
    "H": (17, "桃园市"),
    "J": (18, "新竹县"),
    "K": (19, "苗栗县"),
    "L": (20, "台中县"),  # obsolete
    "M": (21, "南投县"),
    "N": (22, "彰化县"),
    "P": (23, "云林县"),
    "Q": (24, "嘉义县"),
    "R": (25, "台南县"),  # obsolete
    "S": (26, "高雄县"),  # obsolete
    "T": (27, "屏东县"),
    "U": (28, "花莲县"),
    "V": (29, "台东县"),
    "X": (30, "澎湖县"),
    "Y": (31, "阳明山管理局"),  # obsolete
    "W": (32, "金门县"),
    "Z": (33, "连江县"),
    "I": (34, "嘉义市"),
    "O": (35, "新竹市"),
}

TW_PATTERN = re.compile(r"^[A-Z][0-9]{9}$")
TW_LENGTH = 10

SERIAL_WEIGHTS = (8, 7, 6, 5, 4, 3, 2, 1)
GENDER_MARKERS = {"1": Gender.MALE, "2": Gender.FEMALE}

_PARENTHESES = re.compile(r"[()]")


def strip_taiwan(number: str) -> str:
    return _PARENTHESES.sub("", number).strip().upper()


def tw_check_digit(first9: str) -> int:
    """Check digit for the letter and the following eight digits."""
    code, _ = PREFIX_LETTERS[first9[0]]
    total = code // 10 + (code % 10) * 9
    total += weighted_sum(to_digits(first9[1:9]), SERIAL_WEIGHTS)
    return (10 - total % 10) % 10


class TaiwanValidator(IdNumberValidator):
    """Taiwan National Identification Card numbers."""

    jurisdiction = Jurisdiction.TW

    def _failure(self, number: str) -> Optional[ValidationFailure]:
        number = strip_taiwan(number)
        failure = length_failure(len(number), TW_LENGTH)
        if failure:
            return failure
        if not TW_PATTERN.match(number):
            return ValidationFailure.NON_DIGIT_CHARACTER
        if number[1] not in GENDER_MARKERS or number[0] not in PREFIX_LETTERS:
            return ValidationFailure.UNRECOGNIZED_FORMAT
        if tw_check_digit(number[:9]) != int(number[9]):
            return ValidationFailure.CHECKSUM_MISMATCH
        return None

    def gender(self, number: str) -> Optional[Gender]:
        """Gender of a valid number, None otherwise."""
        if not self.validate(number):
            return None
        return GENDER_MARKERS[strip_taiwan(number)[1]]

    def region(self, number: str) -> Optional[str]:
        """Place of first registration of a valid number, None otherwise."""
        if not self.validate(number):
            return None
        return PREFIX_LETTERS[strip_taiwan(number)[0]][1]
