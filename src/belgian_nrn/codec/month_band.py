"""BIS-aware month/day resolver.

BIS numbers store the birth month offset by 20 (sex unknown when the number
was issued) or 40 (sex known). A stored month of 00, 20 or 40 means the birth
month itself is unknown; a day of 00 means the birth day is unknown.
"""

from __future__ import annotations

from belgian_nrn.codec.parser import parse
from belgian_nrn.core.exceptions import InvalidMonthBandError, NotABisNumberError
from belgian_nrn.core.types import NrnInput
from belgian_nrn.models.nrn import MonthBand

# Stored-month ranges, inclusive. Anything else (13-19, 33-39, 53-99) is malformed.
_BANDS: tuple[tuple[int, int, MonthBand], ...] = (
    (0, 0, MonthBand.UNKNOWN),
    (1, 12, MonthBand.STANDARD),
    (20, 32, MonthBand.BIS_GENDER_UNKNOWN),
    (40, 52, MonthBand.BIS_GENDER_KNOWN),
)


def _stored_month(mm: str) -> int:
    if not (len(mm) == 2 and mm.isascii() and mm.isdigit()):
        raise InvalidMonthBandError(mm)
    return int(mm)


def month_band_of(mm: str) -> MonthBand:
    """Look up the band a stored two-digit month belongs to."""
    stored = _stored_month(mm)
    for low, high, band in _BANDS:
        if low <= stored <= high:
            return band
    raise InvalidMonthBandError(mm)


def get_month_band(nrn: NrnInput) -> MonthBand:
    return month_band_of(parse(nrn).mm)


def get_birth_month(nrn: NrnInput) -> int:
    """True birth month, 0 when unknown."""
    parsed = parse(nrn)
    band = month_band_of(parsed.mm)
    return int(parsed.mm) - band.month_offset


def get_bis_birth_month(nrn: NrnInput) -> int:
    """True birth month of a BIS number.

    Raises:
        NotABisNumberError: the number is a standard NRN.
    """
    if not get_month_band(nrn).is_bis:
        raise NotABisNumberError()
    return get_birth_month(nrn)


def get_birth_day(nrn: NrnInput) -> int:
    """Birth day of the month, 0 when unknown."""
    return int(parse(nrn).dd)
