"""Parse and validate Belgian National Registry (NRN) and BIS numbers."""

from __future__ import annotations

from belgian_nrn.codec.checksum import compute_checksum, expected_checksums, get_birth_year
from belgian_nrn.codec.dates import age_on, get_age, get_birth_date, is_legal_adult
from belgian_nrn.codec.details import describe
from belgian_nrn.codec.formatting import format_nrn, generate_nrn
from belgian_nrn.codec.month_band import (
    get_bis_birth_month,
    get_birth_day,
    get_birth_month,
    get_month_band,
)
from belgian_nrn.codec.normalizer import normalize
from belgian_nrn.codec.parser import parse
from belgian_nrn.codec.predicates import (
    get_biological_sex,
    is_biological_female,
    is_biological_male,
    is_birth_date_known,
    is_bis_birth_date_known,
    is_bis_gender_known,
    is_bis_number,
    is_equal,
    is_gender_known,
    is_nrn_number,
    is_valid_nrn_number,
)
from belgian_nrn.core.exceptions import (
    InvalidBirthDateError,
    InvalidChecksumError,
    InvalidInputTypeError,
    InvalidLengthError,
    InvalidMonthBandError,
    NotABisNumberError,
    NrnError,
    UnknownBirthDateError,
)
from belgian_nrn.models.nrn import BiologicalSex, MonthBand, NrnDetails, ParsedNumber

__all__ = [
    "BiologicalSex",
    "InvalidBirthDateError",
    "InvalidChecksumError",
    "InvalidInputTypeError",
    "InvalidLengthError",
    "InvalidMonthBandError",
    "MonthBand",
    "NotABisNumberError",
    "NrnDetails",
    "NrnError",
    "ParsedNumber",
    "UnknownBirthDateError",
    "age_on",
    "compute_checksum",
    "describe",
    "expected_checksums",
    "format_nrn",
    "generate_nrn",
    "get_age",
    "get_biological_sex",
    "get_birth_date",
    "get_birth_day",
    "get_birth_month",
    "get_birth_year",
    "get_bis_birth_month",
    "get_month_band",
    "is_biological_female",
    "is_biological_male",
    "is_birth_date_known",
    "is_bis_birth_date_known",
    "is_bis_gender_known",
    "is_bis_number",
    "is_equal",
    "is_gender_known",
    "is_legal_adult",
    "is_nrn_number",
    "is_valid_nrn_number",
    "normalize",
    "parse",
]
