"""
Pydantic models for serialized ID number data.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class IdentitySummary(BaseModel):
    """Decoded view of a Mainland China ID number."""

    number: str = Field(..., description="Canonical 18-digit number (or the raw input when invalid)")
    valid: bool = Field(..., description="Whether the number passed validation")
    length: int = Field(..., description="Length of the canonical number")
    birth_date: Optional[str] = Field(None, description="Birth date as YYYY-MM-DD")
    year: Optional[int] = Field(None, description="Birth year")
    month: Optional[int] = Field(None, description="Birth month")
    day: Optional[int] = Field(None, description="Birth day")
    age: Optional[int] = Field(None, description="Age in the current year")
    gender: Optional[Literal["male", "female"]] = Field(None, description="Gender from sequence parity")
    province: Optional[str] = Field(None, description="Province name")
    region: Optional[str] = Field(None, description="Full administrative region name")
    constellation: Optional[str] = Field(None, description="Western zodiac sign")
    chinese_era: Optional[str] = Field(None, description="Sexagenary year name")
    chinese_zodiac: Optional[str] = Field(None, description="Chinese zodiac animal")


class ValidationReport(BaseModel):
    """Verdict for a single number of any jurisdiction."""

    number: str = Field(..., description="The input as given")
    valid: bool = Field(..., description="Whether the number passed validation")
    jurisdiction: Optional[str] = Field(None, description="Detected jurisdiction (CN15, CN18, HK, MO, TW)")
    failure: Optional[str] = Field(None, description="Failure reason when invalid")
