"""
Chinese ID Card (Resident Identity Card) Recognizer

Recognizes 18-digit and legacy 15-digit Mainland China ID numbers in free
text and confirms each match with the Mainland validators.
Format: RRRRRRYYYYMMDDSSSC (6 region + 8 birthdate + 3 sequence + 1 checksum)
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from idcard_kit.validators.base import Jurisdiction
from idcard_kit.validators.dispatch import validate
from idcard_kit.validators.mainland import MainlandLegacyValidator, MainlandValidator


_DATE_TAIL = r"(?:0[1-9]|1[0-2])(?:0[1-9]|[12]\d|3[01])"


class MainlandIdCardRecognizer(PatternRecognizer):
    """Recognizer for Mainland China Resident Identity Card numbers.

    Supports:
    - 18-digit format with ISO 7064:1983 MOD 11-2 checksum
    - 15-digit legacy format with province and birth date validation

    Example:
        >>> recognizer = MainlandIdCardRecognizer()
        >>> results = recognizer.analyze("身份证号：110101199003077715", entities=["ZH_ID_CARD"])
    """

    ENTITY = "ZH_ID_CARD"

    PATTERNS = [
        Pattern(
            name="zh_id_card_18",
            regex=r"(?<![0-9A-Za-z])[1-9]\d{5}(?:18|19|20)\d{2}" + _DATE_TAIL + r"\d{3}[\dXx](?![0-9A-Za-z])",
            score=0.7,
        ),
        Pattern(
            name="zh_id_card_15",
            regex=r"(?<![0-9A-Za-z])[1-9]\d{5}\d{2}" + _DATE_TAIL + r"\d{3}(?![0-9A-Za-z])",
            score=0.5,
        ),
    ]

    CONTEXT = [
        "身份证",
        "身份证号",
        "身份证号码",
        "证件号",
        "证件号码",
        "ID",
        "id",
        "identity",
        "居民身份证",
        "公民身份号码",
    ]

    def __init__(
        self,
        supported_language: str = "zh",
        context: Optional[list[str]] = None,
    ) -> None:
        """Initialize the recognizer.

        Args:
            supported_language: Language code (default: zh).
            context: Additional context words.
        """
        super().__init__(
            supported_entity=self.ENTITY,
            patterns=self.PATTERNS,
            context=list(self.CONTEXT) + (context or []),
            supported_language=supported_language,
        )
        self._validators = {
            18: MainlandValidator(),
            15: MainlandLegacyValidator(),
        }

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """Validate a match with the Mainland validators.

        Args:
            pattern_text: The matched ID card number.

        Returns:
            True if valid, False otherwise.
        """
        validator = self._validators.get(len(pattern_text))
        if validator is None:
            return False
        return validator.validate(pattern_text)


def validate_chinese_id_card(id_number: str) -> bool:
    """Standalone validation function for Mainland China ID numbers.

    Example:
        >>> validate_chinese_id_card("110101199003077715")
        True
    """
    jurisdiction = Jurisdiction.CN15 if len(id_number.strip()) == 15 else Jurisdiction.CN18
    return validate(id_number, jurisdiction)
