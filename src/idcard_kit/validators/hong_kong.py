"""
Hong Kong Identity Card validator.

Format: one or two letters, six digits and a check character (digit or A),
optionally in parentheses, e.g. ``G123456(A)`` or ``AB987654(3)``.

Checksum: letters are worth A=10 ... Z=35. A two-letter prefix is weighted
9 and 8; a single letter is weighted 8 and a fixed 522 stands in for the
missing first letter. The six digits are weighted 7..2 and the check
character (A=10) is added as-is. The total must be divisible by 11.
"""

import re
from typing import Optional

from idcard_kit.core.checksum import to_digits, weighted_sum
from idcard_kit.core.errors import ValidationFailure
from idcard_kit.validators.base import IdNumberValidator, Jurisdiction


# Matched against the input before any case folding
HK_PATTERN = re.compile(r"^[A-Z]{1,2}[0-9]{6}\(?[0-9A]\)?$")

_PARENTHESES = re.compile(r"[()]")

DIGIT_WEIGHTS = (7, 6, 5, 4, 3, 2)
SINGLE_LETTER_BASE = 522


def letter_value(letter: str) -> int:
    """Numeric value of a prefix letter (A=10 ... Z=35)."""
    return ord(letter) - 55


def hk_checksum_total(significant: str) -> int:
    """Weighted total of a parenthesis-free 8 or 9 character number."""
    if len(significant) == 9:
        total = letter_value(significant[0]) * 9 + letter_value(significant[1]) * 8
    else:
        total = SINGLE_LETTER_BASE + letter_value(significant[0]) * 8

    total += weighted_sum(to_digits(significant[-7:-1]), DIGIT_WEIGHTS)

    end = significant[-1]
    total += 10 if end == "A" else int(end)
    return total


class HongKongValidator(IdNumberValidator):
    """Hong Kong Identity Card numbers.

    Lowercase letters are rejected: ``G123456(a)`` is not a valid number.
    """

    jurisdiction = Jurisdiction.HK

    def _failure(self, number: str) -> Optional[ValidationFailure]:
        number = number.strip()
        if not HK_PATTERN.match(number):
            return ValidationFailure.UNRECOGNIZED_FORMAT

        significant = _PARENTHESES.sub("", number)
        if hk_checksum_total(significant) % 11 != 0:
            return ValidationFailure.CHECKSUM_MISMATCH
        return None
