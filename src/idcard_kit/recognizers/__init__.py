"""Presidio recognizers for ID card numbers."""

from idcard_kit.recognizers.zh_id_card import MainlandIdCardRecognizer, validate_chinese_id_card
from idcard_kit.recognizers.regional_id_card import (
    HongKongIdCardRecognizer,
    MacauIdCardRecognizer,
    TaiwanIdCardRecognizer,
)
from idcard_kit.recognizers.registry import (
    create_id_card_recognizers,
    create_id_card_registry,
    find_id_numbers,
    get_supported_entities,
)

__all__ = [
    "MainlandIdCardRecognizer",
    "HongKongIdCardRecognizer",
    "MacauIdCardRecognizer",
    "TaiwanIdCardRecognizer",
    "create_id_card_recognizers",
    "create_id_card_registry",
    "find_id_numbers",
    "get_supported_entities",
    "validate_chinese_id_card",
]
