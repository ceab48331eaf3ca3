"""Birth date, age and adulthood.

Birth dates are anchored at local midnight in the configured civil time zone
(Europe/Brussels by default) so that comparisons do not drift by a day with
the caller's own zone.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from belgian_nrn.codec.checksum import get_birth_year
from belgian_nrn.codec.month_band import get_birth_day, get_birth_month
from belgian_nrn.core.config import get_settings
from belgian_nrn.core.exceptions import InvalidBirthDateError, UnknownBirthDateError
from belgian_nrn.core.types import ComparisonDate, NrnInput


def civil_timezone() -> ZoneInfo:
    return ZoneInfo(get_settings().timezone)


def get_birth_date(nrn: NrnInput) -> datetime:
    """Return the birth date as an aware datetime at local midnight.

    Raises:
        InvalidChecksumError: the century cannot be resolved.
        UnknownBirthDateError: birth month or day is 00.
        InvalidBirthDateError: the digits do not form a calendar date.
    """
    year = get_birth_year(nrn)
    month = get_birth_month(nrn)  # Eg. 8 from '860814', BIS offset removed
    day = get_birth_day(nrn)  # Eg. 14 from '860814'
    if month < 1 or day < 1:
        raise UnknownBirthDateError()
    try:
        return datetime(year, month, day, tzinfo=civil_timezone())
    except ValueError as exc:
        raise InvalidBirthDateError(year, month, day) from exc


def _civil_date(moment: ComparisonDate) -> date:
    """Calendar date of ``moment`` in the civil zone; naive values are taken as civil time."""
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            moment = moment.astimezone(civil_timezone())
        return moment.date()
    return moment


def age_on(birth_date: ComparisonDate, comparison: ComparisonDate) -> int:
    """Whole years between ``birth_date`` and ``comparison``.

    One year is subtracted when the birthday has not yet come round in the
    comparison year. Negative when ``comparison`` precedes the birth date.
    """
    born = _civil_date(birth_date)
    on = _civil_date(comparison)
    years = on.year - born.year
    if (on.month, on.day) < (born.month, born.day):
        years -= 1
    return years


def get_age(nrn: NrnInput, comparison_date: Optional[ComparisonDate] = None) -> int:
    """Age in whole years, at ``comparison_date`` or now."""
    if comparison_date is None:
        comparison_date = datetime.now(tz=civil_timezone())
    return age_on(get_birth_date(nrn), comparison_date)


def is_legal_adult(nrn: NrnInput, comparison_date: Optional[ComparisonDate] = None) -> bool:
    return get_age(nrn, comparison_date) >= get_settings().legal_adult_age
