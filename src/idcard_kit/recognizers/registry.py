"""
ID Card Recognizer Registry

Bundles the ID card recognizers for use with a Presidio AnalyzerEngine, and
offers a direct text scan that needs no NLP engine.
"""

from presidio_analyzer import RecognizerRegistry, RecognizerResult

from idcard_kit.logging.setup import get_logger
from idcard_kit.recognizers.regional_id_card import (
    HongKongIdCardRecognizer,
    MacauIdCardRecognizer,
    TaiwanIdCardRecognizer,
)
from idcard_kit.recognizers.zh_id_card import MainlandIdCardRecognizer


logger = get_logger(__name__)


def create_id_card_recognizers(language: str = "zh") -> list:
    """Create one recognizer per jurisdiction."""
    return [
        MainlandIdCardRecognizer(supported_language=language),
        HongKongIdCardRecognizer(supported_language=language),
        TaiwanIdCardRecognizer(supported_language=language),
        MacauIdCardRecognizer(supported_language=language),
    ]


def create_id_card_registry(language: str = "zh") -> RecognizerRegistry:
    """Create a RecognizerRegistry holding the ID card recognizers.

    Example:
        >>> from presidio_analyzer import AnalyzerEngine
        >>> registry = create_id_card_registry()
        >>> # AnalyzerEngine(registry=registry, nlp_engine=...)
    """
    registry = RecognizerRegistry()
    for recognizer in create_id_card_recognizers(language):
        registry.add_recognizer(recognizer)
    return registry


def get_supported_entities() -> list[str]:
    """Entity types reported by the ID card recognizers."""
    return [
        MainlandIdCardRecognizer.ENTITY,
        HongKongIdCardRecognizer.ENTITY,
        TaiwanIdCardRecognizer.ENTITY,
        MacauIdCardRecognizer.ENTITY,
    ]


def find_id_numbers(text: str, language: str = "zh") -> list[RecognizerResult]:
    """Find ID numbers in free text.

    Args:
        text: Text to scan.
        language: Language code of the recognizers.

    Returns:
        Results ordered by position in the text.
    """
    results: list[RecognizerResult] = []
    for recognizer in create_id_card_recognizers(language):
        results.extend(recognizer.analyze(text, entities=recognizer.supported_entities))

    results.sort(key=lambda r: (r.start, r.end))
    logger.debug("Text scanned", extra={"event": "text_scanned", "matches": len(results)})
    return results
