"""
Error types for ID number handling.

Validation itself never raises: failures are reported through
``ValidationResult.failure``. The exceptions below are raised by the
engine primitives, the upgrade transform and the fake generator.
"""

from enum import Enum


class ValidationFailure(str, Enum):
    """Reason an ID number was rejected."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    NON_DIGIT_CHARACTER = "non_digit_character"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"
    UNKNOWN_REGION_CODE = "unknown_region_code"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    UNRECOGNIZED_FORMAT = "unrecognized_format"


class IdCardError(ValueError):
    """Base class for all idcard-kit errors."""


class MalformedInputError(IdCardError):
    """Input does not have the shape of an ID number.

    Attributes:
        reason: The validation failure that describes the problem.
    """

    def __init__(self, message: str, reason: ValidationFailure = ValidationFailure.UNRECOGNIZED_FORMAT):
        super().__init__(message)
        self.reason = reason


class InvalidCharacterError(MalformedInputError):
    """A character other than an ASCII digit was found."""

    def __init__(self, message: str):
        super().__init__(message, ValidationFailure.NON_DIGIT_CHARACTER)


class LengthMismatchError(IdCardError):
    """Digit and weight sequences differ in length."""


class UpgradeError(IdCardError):
    """A 15-digit number could not be upgraded to 18 digits."""


class GenerationConstraintError(IdCardError):
    """Fake generation options are inconsistent or unsatisfiable."""
