"""Display formatting and generation of valid numbers."""

from __future__ import annotations

from datetime import date
from typing import Optional

from belgian_nrn.codec.checksum import compute_checksum
from belgian_nrn.codec.parser import parse
from belgian_nrn.core.types import NrnInput
from belgian_nrn.models.nrn import BiologicalSex, MonthBand


def format_nrn(nrn: NrnInput) -> str:
    """Format as printed on identity documents: ``YY.MM.DD-SSS.CC``."""
    parsed = parse(nrn)
    return f"{parsed.yy}.{parsed.mm}.{parsed.dd}-{parsed.serial}.{parsed.checksum}"


def generate_nrn(
    birth_date: date,
    sex: Optional[BiologicalSex] = None,
    serial: Optional[int] = None,
    bis: bool = False,
    gender_known: bool = True,
) -> str:
    """
    Generate a valid NRN or BIS number, mainly for test fixtures.

    Args:
        birth_date: Date of birth, year 1900-2099
        sex: Adjusts the serial's parity (odd = male, even = female)
        serial: Serial number 1-998, defaults to the lowest one for ``sex``
        bis: Produce a BIS number (month offset by 20 or 40)
        gender_known: For BIS numbers, whether the sex was known at issuance

    Returns:
        The 11-digit canonical string
    """
    if not 1900 <= birth_date.year <= 2099:
        raise ValueError("birth_date year must be between 1900 and 2099")

    if serial is None:
        serial = 2 if sex is BiologicalSex.FEMALE else 1
    if not 1 <= serial <= 998:
        raise ValueError("serial must be between 1 and 998")

    if sex is BiologicalSex.MALE and serial % 2 == 0:
        serial = serial + 1 if serial < 997 else serial - 1
    elif sex is BiologicalSex.FEMALE and serial % 2 == 1:
        serial = serial + 1

    band = MonthBand.STANDARD
    if bis:
        band = MonthBand.BIS_GENDER_KNOWN if gender_known else MonthBand.BIS_GENDER_UNKNOWN

    body = f"{birth_date:%y}{birth_date.month + band.month_offset:02d}{birth_date:%d}{serial:03d}"
    century = 2000 if birth_date.year >= 2000 else 1900
    return f"{body}{compute_checksum(body, century)}"
