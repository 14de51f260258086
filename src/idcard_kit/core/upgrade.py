"""
Upgrade legacy 15-digit Mainland China ID numbers to the 18-digit form.

The 15-digit form stores a two-digit birth year and has no check symbol.
Upgrading inserts the "19" century prefix and appends a freshly computed
check symbol. Registry membership is not checked here.
"""

from idcard_kit.core.checksum import cn_check_symbol, is_ascii_digits
from idcard_kit.core.errors import MalformedInputError, UpgradeError
from idcard_kit.core.fields import parse_birth_date


CN15_LENGTH = 15
LEGACY_CENTURY = "19"


def legacy_birth_date_text(number: str) -> str:
    """Return the 8-digit birth date embedded in a 15-digit number."""
    return LEGACY_CENTURY + number[6:12]


def upgrade(number: str) -> str:
    """Convert a 15-digit ID number to 18 digits.

    Args:
        number: The legacy number; surrounding whitespace is ignored.

    Returns:
        The 18-digit number.

    Raises:
        UpgradeError: If the input is not 15 ASCII digits or its embedded
            birth date is not a real date.

    Example:
        >>> upgrade("632123820927051")
        '632123198209270518'
    """
    number = number.strip().upper()
    if len(number) != CN15_LENGTH:
        raise UpgradeError(f"Expected {CN15_LENGTH} digits, got {len(number)}")
    if not is_ascii_digits(number):
        raise UpgradeError("Legacy ID number must contain digits only")

    try:
        parse_birth_date(legacy_birth_date_text(number))
    except MalformedInputError as e:
        raise UpgradeError(f"Upgrade failed: {e}") from e

    first17 = number[:6] + LEGACY_CENTURY + number[6:]
    return first17 + cn_check_symbol(first17)
