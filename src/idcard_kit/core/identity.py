"""
Decoded Mainland China identity.

An Identity holds the canonical, uppercased number and its validity. A
valid 15-digit number is stored upgraded to 18 digits. All other fields
are derived from slices of the number on access and are None when the
number is invalid.
"""

from datetime import date
from typing import Any, Optional

from idcard_kit.core import almanac
from idcard_kit.core.fields import (
    BIRTH_DATE,
    REGION,
    Gender,
    age_in_year,
    gender_from_digit,
)
from idcard_kit.models import IdentitySummary
from idcard_kit.regions.registry import PROVINCES, ProvinceTable, RegionRegistry, get_default_registry


class Identity:
    """Mainland China ID number with lazily decoded fields.

    Example:
        >>> identity = Identity("632123820927051")
        >>> identity.number
        '632123198209270518'
        >>> identity.birth_date
        '1982-09-27'
        >>> identity.gender
        <Gender.MALE: 'male'>
    """

    __slots__ = ("_number", "_valid", "_registry", "_provinces")

    def __init__(
        self,
        number: str,
        *,
        registry: Optional[RegionRegistry] = None,
        provinces: ProvinceTable = PROVINCES,
    ):
        # Deferred: the mainland validators construct Identity objects
        from idcard_kit.validators.mainland import normalize_mainland

        canonical, valid = normalize_mainland(number, provinces)
        object.__setattr__(self, "_number", canonical)
        object.__setattr__(self, "_valid", valid)
        object.__setattr__(self, "_registry", registry)
        object.__setattr__(self, "_provinces", provinces)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Identity is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self._number == other._number and self._valid == other._valid

    def __hash__(self) -> int:
        return hash((self._number, self._valid))

    def __len__(self) -> int:
        return len(self._number)

    def __repr__(self) -> str:
        return f"Identity(number={self._number!r}, valid={self._valid})"

    @property
    def number(self) -> str:
        return self._number

    @property
    def is_valid(self) -> bool:
        return self._valid

    @property
    def is_empty(self) -> bool:
        return not self._number

    @property
    def region_code(self) -> Optional[str]:
        if not self._valid:
            return None
        return self._number[REGION]

    @property
    def birth_date(self) -> Optional[str]:
        """Birth date formatted as YYYY-MM-DD."""
        if not self._valid:
            return None
        birth = self._number[BIRTH_DATE]
        return f"{birth[0:4]}-{birth[4:6]}-{birth[6:8]}"

    @property
    def year(self) -> Optional[int]:
        if not self._valid:
            return None
        return int(self._number[6:10])

    @property
    def month(self) -> Optional[int]:
        if not self._valid:
            return None
        return int(self._number[10:12])

    @property
    def day(self) -> Optional[int]:
        if not self._valid:
            return None
        return int(self._number[12:14])

    @property
    def gender(self) -> Optional[Gender]:
        if not self._valid:
            return None
        return gender_from_digit(int(self._number[16]))

    @property
    def province(self) -> Optional[str]:
        if not self._valid:
            return None
        return self._provinces.lookup(self._number[0:2])

    @property
    def region(self) -> Optional[str]:
        """Full administrative region name, None for unknown codes."""
        if not self._valid:
            return None
        registry = self._registry if self._registry is not None else get_default_registry()
        return registry.lookup(self._number[REGION])

    @property
    def constellation(self) -> Optional[str]:
        if not self._valid:
            return None
        return almanac.constellation(self.month, self.day)

    @property
    def chinese_era(self) -> Optional[str]:
        if not self._valid:
            return None
        return almanac.chinese_era(self.year)

    @property
    def chinese_zodiac(self) -> Optional[str]:
        if not self._valid:
            return None
        return almanac.chinese_zodiac(self.year)

    def age_in(self, year: int) -> Optional[int]:
        """Age reached in ``year``; None if invalid or born after ``year``."""
        if not self._valid:
            return None
        return age_in_year(self.year, year)

    def age(self, today: Optional[date] = None) -> Optional[int]:
        """Age in the current (or given) calendar year."""
        today = today or date.today()
        return self.age_in(today.year)

    def summary(self, today: Optional[date] = None) -> IdentitySummary:
        gender = self.gender
        return IdentitySummary(
            number=self._number,
            valid=self._valid,
            length=len(self._number),
            birth_date=self.birth_date,
            year=self.year,
            month=self.month,
            day=self.day,
            age=self.age(today),
            gender=gender.value if gender else None,
            province=self.province,
            region=self.region,
            constellation=self.constellation,
            chinese_era=self.chinese_era,
            chinese_zodiac=self.chinese_zodiac,
        )

    def to_dict(self, today: Optional[date] = None) -> dict[str, Any]:
        return self.summary(today).model_dump()

    def to_json(self, pretty: bool = False, today: Optional[date] = None) -> str:
        """Serialize the decoded fields to JSON.

        Args:
            pretty: Indent the output for reading.
            today: Reference date for the age field.
        """
        return self.summary(today).model_dump_json(indent=2 if pretty else None)
