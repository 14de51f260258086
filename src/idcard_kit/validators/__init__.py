"""ID number validators for Mainland China, Hong Kong, Macau and Taiwan."""

from idcard_kit.validators.base import IdNumberValidator, Jurisdiction, ValidationResult
from idcard_kit.validators.hong_kong import HongKongValidator
from idcard_kit.validators.macau import MacauValidator
from idcard_kit.validators.mainland import MainlandLegacyValidator, MainlandValidator
from idcard_kit.validators.taiwan import TaiwanValidator
from idcard_kit.validators.dispatch import (
    build_validators,
    check,
    detect_jurisdiction,
    taiwan_gender,
    taiwan_region,
    validate,
)

__all__ = [
    "IdNumberValidator",
    "Jurisdiction",
    "ValidationResult",
    "HongKongValidator",
    "MacauValidator",
    "MainlandLegacyValidator",
    "MainlandValidator",
    "TaiwanValidator",
    "build_validators",
    "check",
    "detect_jurisdiction",
    "taiwan_gender",
    "taiwan_region",
    "validate",
]
