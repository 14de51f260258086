"""
Checksum engine for Mainland China ID numbers.

Implements the ISO 7064:1983 MOD 11-2 scheme used by GB 11643-1999:
each of the first 17 digits is multiplied by a positional weight, the sum
is reduced modulo 11 and mapped through a fixed symbol table.
"""

from typing import Sequence

from idcard_kit.core.errors import InvalidCharacterError, LengthMismatchError


# Weights for the 17 significant digits
CN_WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)

# sum % 11 -> check symbol
CHECK_SYMBOLS = {
    0: "1", 1: "0", 2: "X", 3: "9", 4: "8",
    5: "7", 6: "6", 7: "5", 8: "4", 9: "3", 10: "2",
}

_ASCII_DIGITS = frozenset("0123456789")


def is_ascii_digits(text: str) -> bool:
    """Return True if ``text`` is non-empty and made of ASCII digits only."""
    return bool(text) and all(ch in _ASCII_DIGITS for ch in text)


def to_digits(text: str) -> list[int]:
    """Convert a numeric string into its digit values.

    Args:
        text: String of ASCII digits.

    Returns:
        Digit values in input order.

    Raises:
        InvalidCharacterError: If any character is not an ASCII digit.

    Example:
        >>> to_digits("0907")
        [0, 9, 0, 7]
    """
    digits = []
    for position, ch in enumerate(text):
        if ch not in _ASCII_DIGITS:
            raise InvalidCharacterError(f"Non-digit character {ch!r} at position {position}")
        digits.append(ord(ch) - 48)
    return digits


def weighted_sum(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Compute the positional weighted sum of ``digits``.

    Raises:
        LengthMismatchError: If the sequences differ in length.
    """
    if len(digits) != len(weights):
        raise LengthMismatchError(
            f"Expected {len(weights)} digits, got {len(digits)}"
        )
    return sum(d * w for d, w in zip(digits, weights))


def check_symbol(total: int) -> str:
    """Map a weighted sum to its check symbol."""
    return CHECK_SYMBOLS[total % 11]


def cn_check_symbol(first17: str) -> str:
    """Compute the check symbol for the first 17 digits of a CN number.

    Args:
        first17: The 17 significant digits.

    Returns:
        The check symbol ("0"-"9" or "X").

    Raises:
        InvalidCharacterError: If ``first17`` contains a non-digit.
        LengthMismatchError: If ``first17`` is not 17 characters long.

    Example:
        >>> cn_check_symbol("11010119900307771")
        '5'
    """
    return check_symbol(weighted_sum(to_digits(first17), CN_WEIGHTS))
