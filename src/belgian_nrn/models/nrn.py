"""Structured NRN / BIS number models.

A ``ParsedNumber`` is the single structured form every derivation operates on.
Layout of the 11 digits (https://nl.wikipedia.org/wiki/Rijksregisternummer):

    YY MM DD SSS CC
    |  |  |  |   +-- mod-97 checksum
    |  |  |  +------ serial (odd = male, even = female)
    +--+--+--------- partial birth date, month offset by 20/40 for BIS numbers
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from belgian_nrn.core.types import BirthDateParts


class MonthBand(StrEnum):
    UNKNOWN = "UNKNOWN"  # 00
    STANDARD = "STANDARD"  # 01-12
    BIS_GENDER_UNKNOWN = "BIS_GENDER_UNKNOWN"  # 20-32
    BIS_GENDER_KNOWN = "BIS_GENDER_KNOWN"  # 40-52

    @property
    def is_bis(self) -> bool:
        return self in (MonthBand.BIS_GENDER_UNKNOWN, MonthBand.BIS_GENDER_KNOWN)

    @property
    def month_offset(self) -> int:
        """Amount added to the true month when the number was issued."""
        if self is MonthBand.BIS_GENDER_UNKNOWN:
            return 20
        if self is MonthBand.BIS_GENDER_KNOWN:
            return 40
        return 0


class BiologicalSex(StrEnum):
    FEMALE = "F"
    MALE = "M"


class ParsedNumber(BaseModel):
    """Immutable structured form of an NRN or BIS number.

    Field contents are not range-checked here; derivation functions validate
    what they consume.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    birth_date_parts: BirthDateParts = Field(
        validation_alias=AliasChoices("birth_date_parts", "birthDate", "birth_date"),
    )
    serial: str = Field(min_length=1)
    checksum: str = Field(min_length=1)

    @property
    def yy(self) -> str:
        return self.birth_date_parts[0]

    @property
    def mm(self) -> str:
        return self.birth_date_parts[1]

    @property
    def dd(self) -> str:
        return self.birth_date_parts[2]

    @property
    def body(self) -> str:
        """The nine digits the checksum is computed over."""
        return f"{''.join(self.birth_date_parts)}{self.serial}"

    @property
    def digits(self) -> str:
        """Canonical 11-digit form."""
        return f"{self.body}{self.checksum}"


class NrnDetails(BaseModel):
    """Every derivation for a single number, as produced by ``describe()``."""

    model_config = {"frozen": True}

    normalized: str
    formatted: str
    is_valid: bool
    is_bis_number: bool
    month_band: MonthBand
    birth_year: Optional[int] = None  # None when the checksum fails
    birth_month: int = 0
    birth_day: int = 0
    birth_date: Optional[datetime] = None
    sex: BiologicalSex
    is_gender_known: bool
    is_birth_date_known: bool
    age: Optional[int] = None
