"""Derived predicates over a parsed number."""

from __future__ import annotations

import structlog

from belgian_nrn.codec.checksum import get_birth_year
from belgian_nrn.codec.month_band import get_birth_day, get_birth_month, get_month_band
from belgian_nrn.codec.normalizer import normalize
from belgian_nrn.codec.parser import parse
from belgian_nrn.core.exceptions import NotABisNumberError, NrnError
from belgian_nrn.core.types import NrnInput
from belgian_nrn.models.nrn import BiologicalSex, MonthBand

log = structlog.get_logger("belgian_nrn.codec.predicates")


def get_biological_sex(nrn: NrnInput) -> BiologicalSex:
    """Odd serials are male, even serials female."""
    serial = int(parse(nrn).serial)
    return BiologicalSex.MALE if serial % 2 == 1 else BiologicalSex.FEMALE


def is_biological_female(nrn: NrnInput) -> bool:
    return int(parse(nrn).serial) % 2 == 0


def is_biological_male(nrn: NrnInput) -> bool:
    return int(parse(nrn).serial) % 2 == 1


def is_bis_number(nrn: NrnInput) -> bool:
    return get_month_band(nrn).is_bis


def is_nrn_number(nrn: NrnInput) -> bool:
    return not is_bis_number(nrn)


def is_gender_known(nrn: NrnInput) -> bool:
    """False only for BIS numbers issued while the holder's sex was unknown."""
    return get_month_band(nrn) is not MonthBand.BIS_GENDER_UNKNOWN


def is_bis_gender_known(nrn: NrnInput) -> bool:
    """Like ``is_gender_known`` but only defined for BIS numbers.

    Raises:
        NotABisNumberError: the number is a standard NRN.
    """
    band = get_month_band(nrn)
    if not band.is_bis:
        raise NotABisNumberError()
    return band is MonthBand.BIS_GENDER_KNOWN


def is_birth_date_known(nrn: NrnInput) -> bool:
    return get_birth_month(nrn) > 0 and get_birth_day(nrn) > 0


def is_bis_birth_date_known(nrn: NrnInput) -> bool:
    """Like ``is_birth_date_known`` but only defined for BIS numbers.

    Raises:
        NotABisNumberError: the number is a standard NRN.
    """
    if not is_bis_number(nrn):
        raise NotABisNumberError()
    return is_birth_date_known(nrn)


def is_equal(nrn1: NrnInput, nrn2: NrnInput) -> bool:
    """Compare two numbers regardless of spaces, dots or dashes."""
    return normalize(nrn1) == normalize(nrn2)


def is_valid_nrn_number(nrn: NrnInput) -> bool:
    """True when the checksum resolves a birth year. Never raises."""
    try:
        get_birth_year(nrn)
    except (NrnError, ValueError) as exc:
        log.debug("invalid_nrn", error=type(exc).__name__)
        return False
    return True
