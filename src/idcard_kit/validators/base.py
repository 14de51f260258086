"""
Shared validator interface.

Each jurisdiction is one member of the closed ``Jurisdiction`` enum and one
``IdNumberValidator`` subclass. Validators are stateless apart from the
read-only tables they are given, and ``check`` never raises.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional

from idcard_kit.core.errors import ValidationFailure
from idcard_kit.logging.setup import get_logger
from idcard_kit.models import ValidationReport

if TYPE_CHECKING:
    from idcard_kit.core.identity import Identity


logger = get_logger(__name__)


class Jurisdiction(str, Enum):
    """ID number formats understood by the validators."""

    CN15 = "CN15"
    CN18 = "CN18"
    HK = "HK"
    MO = "MO"
    TW = "TW"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one number.

    Attributes:
        number: The input as given.
        jurisdiction: The format the number was checked against, if any.
        failure: Why validation failed, None on success.
        identity: Decoded identity, only for valid Mainland China numbers.
    """

    number: str
    jurisdiction: Optional[Jurisdiction]
    failure: Optional[ValidationFailure] = None
    identity: Optional["Identity"] = None

    @property
    def valid(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.valid

    def to_report(self) -> ValidationReport:
        return ValidationReport(
            number=self.number,
            valid=self.valid,
            jurisdiction=self.jurisdiction.value if self.jurisdiction else None,
            failure=self.failure.value if self.failure else None,
        )


def mask(number: str, visible: int = 4) -> str:
    """Hide all but the last ``visible`` characters of a number for logging."""
    if len(number) <= visible:
        return "*" * len(number)
    return "*" * (len(number) - visible) + number[-visible:]


class IdNumberValidator(ABC):
    """Validation capability shared by all jurisdictions."""

    jurisdiction: ClassVar[Jurisdiction]

    @abstractmethod
    def _failure(self, number: str) -> Optional[ValidationFailure]:
        """Return the first failure for ``number``, or None if valid."""

    def _identity(self, number: str) -> Optional["Identity"]:
        return None

    def check(self, number: object) -> ValidationResult:
        """Validate ``number`` and return the detailed result."""
        if not isinstance(number, str):
            return ValidationResult(repr(number), self.jurisdiction, ValidationFailure.UNRECOGNIZED_FORMAT)

        failure = self._failure(number)
        if failure is not None:
            logger.debug(
                "ID number rejected",
                extra={
                    "event": "validation_failed",
                    "jurisdiction": self.jurisdiction.value,
                    "reason": failure.value,
                    "masked": mask(number.strip()),
                },
            )
            return ValidationResult(number, self.jurisdiction, failure)

        return ValidationResult(number, self.jurisdiction, None, self._identity(number))

    def validate(self, number: object) -> bool:
        return self.check(number).valid


def length_failure(actual: int, expected: int) -> Optional[ValidationFailure]:
    """TOO_SHORT / TOO_LONG for a fixed expected length, None if it matches."""
    if actual < expected:
        return ValidationFailure.TOO_SHORT
    if actual > expected:
        return ValidationFailure.TOO_LONG
    return None
