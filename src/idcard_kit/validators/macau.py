"""
Macau Resident Identity Card validator.

Format: 1, 5 or 7 followed by six digits and a trailing symbol, which may
be wrapped in parentheses, e.g. ``1123456(A)``. The check symbol algorithm
is not published, so only the structure is verified.
"""

import re
from typing import Optional

from idcard_kit.core.errors import ValidationFailure
from idcard_kit.validators.base import IdNumberValidator, Jurisdiction, length_failure


MO_PATTERN = re.compile(r"^[157][0-9]{6}[0-9A-Z]$")
MO_LENGTH = 8

_PARENTHESES = re.compile(r"[()]")


def strip_macau(number: str) -> str:
    return _PARENTHESES.sub("", number).strip().upper()


class MacauValidator(IdNumberValidator):
    """Macau Resident Identity Card numbers (structural check only)."""

    jurisdiction = Jurisdiction.MO

    def _failure(self, number: str) -> Optional[ValidationFailure]:
        number = strip_macau(number)
        failure = length_failure(len(number), MO_LENGTH)
        if failure:
            return failure
        if not MO_PATTERN.match(number):
            return ValidationFailure.UNRECOGNIZED_FORMAT
        return None
