"""Split the canonical digit string into a ParsedNumber."""

from __future__ import annotations

from belgian_nrn.codec.normalizer import classify, normalize
from belgian_nrn.core.exceptions import InvalidLengthError
from belgian_nrn.core.types import NrnInput
from belgian_nrn.models.nrn import ParsedNumber

LENGTH_VALID_NRN = 11  # Eg. 86081441359


def parse(nrn: NrnInput) -> ParsedNumber:
    """Parse text or pass a structured record through unchanged.

    Raises:
        InvalidInputTypeError: input is neither text nor a record.
        InvalidLengthError: text does not hold exactly 11 digits.
    """
    source = classify(nrn, "parse")
    if isinstance(source, ParsedNumber):
        return source

    digits = normalize(source)
    if len(digits) != LENGTH_VALID_NRN:
        raise InvalidLengthError(digits, LENGTH_VALID_NRN)

    return ParsedNumber(
        birth_date_parts=(digits[0:2], digits[2:4], digits[4:6]),  # ('86', '08', '14')
        serial=digits[6:9],
        checksum=digits[9:11],
    )
