"""Checksum / birth-year resolver.

The checksum is ``97 - (N mod 97)`` over the nine leading digits. People born
from 2000 onwards have a "2" prepended to N, which is what resolves the century
of the two-digit year.
"""

from __future__ import annotations

from typing import Literal

import structlog

from belgian_nrn.codec.parser import parse
from belgian_nrn.core.exceptions import InvalidChecksumError
from belgian_nrn.core.types import NrnInput

log = structlog.get_logger("belgian_nrn.codec.checksum")

Century = Literal[1900, 2000]


def mod97(digits: str) -> str:
    """``97 - (int(digits) mod 97)`` as a zero-padded 2-digit string."""
    return f"{97 - int(digits) % 97:02d}"


def compute_checksum(body: str, century: Century = 1900) -> str:
    """Checksum for a nine-digit body, assuming a birth year in ``century``."""
    if century == 2000:
        return mod97(f"2{body}")
    return mod97(body)


def expected_checksums(nrn: NrnInput) -> tuple[str, str]:
    """Return the (1900s, 2000s) checksum candidates for a number."""
    parsed = parse(nrn)
    return compute_checksum(parsed.body, 1900), compute_checksum(parsed.body, 2000)


def get_birth_year(nrn: NrnInput) -> int:
    """Resolve the four-digit birth year from the checksum.

    Raises:
        InvalidChecksumError: checksum matches neither century.
    """
    parsed = parse(nrn)
    checksum19, checksum20 = expected_checksums(parsed)
    partial_year = int(parsed.yy)  # Eg. 86 from '860814'

    if parsed.checksum == checksum19:
        return 1900 + partial_year
    if parsed.checksum == checksum20:
        return 2000 + partial_year

    log.debug(
        "checksum_mismatch",
        checksum=parsed.checksum,
        expected_19=checksum19,
        expected_20=checksum20,
    )
    raise InvalidChecksumError(parsed.checksum, checksum19, checksum20)
