"""One-shot summary of every derivation for a number."""

from __future__ import annotations

from typing import Optional

import structlog

from belgian_nrn.codec.checksum import get_birth_year
from belgian_nrn.codec.dates import get_age, get_birth_date
from belgian_nrn.codec.formatting import format_nrn
from belgian_nrn.codec.month_band import get_birth_day, get_birth_month, month_band_of
from belgian_nrn.codec.parser import parse
from belgian_nrn.codec.predicates import get_biological_sex, is_gender_known
from belgian_nrn.core.exceptions import InvalidBirthDateError, InvalidChecksumError
from belgian_nrn.core.types import ComparisonDate, NrnInput
from belgian_nrn.models.nrn import NrnDetails

log = structlog.get_logger("belgian_nrn.codec.details")


def describe(nrn: NrnInput, comparison_date: Optional[ComparisonDate] = None) -> NrnDetails:
    """Collect all facts about a number.

    Checksum and calendar problems leave the affected fields empty instead of
    raising; malformed input (type, length, month band) still raises.
    """
    parsed = parse(nrn)
    band = month_band_of(parsed.mm)
    month = get_birth_month(parsed)
    day = get_birth_day(parsed)
    birth_date_known = month > 0 and day > 0

    try:
        birth_year: Optional[int] = get_birth_year(parsed)
    except InvalidChecksumError:
        birth_year = None

    birth_date = None
    age = None
    if birth_year is not None and birth_date_known:
        try:
            birth_date = get_birth_date(parsed)
        except InvalidBirthDateError as exc:
            log.debug("birth_date_not_in_calendar", error=str(exc))
        else:
            age = get_age(parsed, comparison_date)

    return NrnDetails(
        normalized=parsed.digits,
        formatted=format_nrn(parsed),
        is_valid=birth_year is not None,
        is_bis_number=band.is_bis,
        month_band=band,
        birth_year=birth_year,
        birth_month=month,
        birth_day=day,
        birth_date=birth_date,
        sex=get_biological_sex(parsed),
        is_gender_known=is_gender_known(parsed),
        is_birth_date_known=birth_date_known,
        age=age,
    )
