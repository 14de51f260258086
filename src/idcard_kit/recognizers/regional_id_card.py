"""
Hong Kong, Macau and Taiwan ID Card Recognizers

Hong Kong and Taiwan matches are confirmed by checksum. Macau numbers have
no public checksum, so a well-formed match is left at its pattern score.
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from idcard_kit.validators.hong_kong import HongKongValidator
from idcard_kit.validators.macau import MacauValidator
from idcard_kit.validators.taiwan import TaiwanValidator


class HongKongIdCardRecognizer(PatternRecognizer):
    """Recognizer for Hong Kong Identity Card numbers, e.g. G123456(A)."""

    ENTITY = "HK_ID_CARD"

    PATTERNS = [
        Pattern(
            name="hk_id_card",
            regex=r"(?<![0-9A-Za-z])[A-Z]{1,2}\d{6}(?:\([0-9A]\)|[0-9A])(?![0-9A-Za-z])",
            score=0.5,
        ),
    ]

    CONTEXT = ["香港身份证", "身份证", "HKID", "identity card", "身份證"]

    def __init__(self, supported_language: str = "zh", context: Optional[list[str]] = None) -> None:
        super().__init__(
            supported_entity=self.ENTITY,
            patterns=self.PATTERNS,
            context=list(self.CONTEXT) + (context or []),
            supported_language=supported_language,
        )
        self._validator = HongKongValidator()

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        return self._validator.validate(pattern_text)


class TaiwanIdCardRecognizer(PatternRecognizer):
    """Recognizer for Taiwan National Identification Card numbers, e.g. A123456789."""

    ENTITY = "TW_ID_CARD"

    PATTERNS = [
        Pattern(
            name="tw_id_card",
            regex=r"(?<![0-9A-Za-z])[A-Z][12]\d{8}(?![0-9A-Za-z])",
            score=0.5,
        ),
    ]

    CONTEXT = ["台湾身份证", "身份證", "身分證", "统一编号", "統一編號"]

    def __init__(self, supported_language: str = "zh", context: Optional[list[str]] = None) -> None:
        super().__init__(
            supported_entity=self.ENTITY,
            patterns=self.PATTERNS,
            context=list(self.CONTEXT) + (context or []),
            supported_language=supported_language,
        )
        self._validator = TaiwanValidator()

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        return self._validator.validate(pattern_text)


class MacauIdCardRecognizer(PatternRecognizer):
    """Recognizer for Macau Resident Identity Card numbers, e.g. 1123456(A)."""

    ENTITY = "MO_ID_CARD"

    PATTERNS = [
        Pattern(
            name="mo_id_card",
            regex=r"(?<![0-9A-Za-z])[157]\d{6}\([0-9A-Z]\)",
            score=0.4,
        ),
    ]

    CONTEXT = ["澳门身份证", "澳門身份證", "BIR", "居民身份證"]

    def __init__(self, supported_language: str = "zh", context: Optional[list[str]] = None) -> None:
        super().__init__(
            supported_entity=self.ENTITY,
            patterns=self.PATTERNS,
            context=list(self.CONTEXT) + (context or []),
            supported_language=supported_language,
        )
        self._validator = MacauValidator()

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """None (uncertain) for well-formed numbers, False otherwise."""
        if not self._validator.validate(pattern_text):
            return False
        return None
