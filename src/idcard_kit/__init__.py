"""
idcard-kit: ID numbers for Mainland China, Hong Kong, Macau and Taiwan

Validates, decodes and upgrades identity card numbers and generates
synthetic ones for tests and fixtures.
"""

__version__ = "1.0.0"

from idcard_kit.core.errors import (
    GenerationConstraintError,
    IdCardError,
    MalformedInputError,
    UpgradeError,
    ValidationFailure,
)
from idcard_kit.core.fields import Gender
from idcard_kit.core.identity import Identity
from idcard_kit.core.upgrade import upgrade
from idcard_kit.synthetic.fake import FakeGenerator, FakeOptions, new_fake, random_fake
from idcard_kit.validators import Jurisdiction, ValidationResult, check, detect_jurisdiction, validate

__all__ = [
    "GenerationConstraintError",
    "IdCardError",
    "MalformedInputError",
    "UpgradeError",
    "ValidationFailure",
    "Gender",
    "Identity",
    "upgrade",
    "FakeGenerator",
    "FakeOptions",
    "new_fake",
    "random_fake",
    "Jurisdiction",
    "ValidationResult",
    "check",
    "detect_jurisdiction",
    "validate",
]
