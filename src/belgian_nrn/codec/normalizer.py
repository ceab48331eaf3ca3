"""Reduce any accepted input to the canonical digit string."""

from __future__ import annotations

import re
from typing import Any, Union

from pydantic import ValidationError

from belgian_nrn.core.exceptions import InvalidInputTypeError
from belgian_nrn.core.types import DigitString, NrnInput
from belgian_nrn.models.nrn import ParsedNumber

_NON_DIGITS = re.compile(r"[^0-9]+")


def classify(nrn: Any, action: str = "parse") -> Union[str, ParsedNumber]:
    """Resolve an input to either raw text or a structured record.

    Mappings and objects carrying ``birth_date_parts`` (or ``birthDate``),
    ``serial`` and ``checksum`` are accepted as records after a presence check.
    """
    if isinstance(nrn, (str, ParsedNumber)):
        return nrn
    try:
        return ParsedNumber.model_validate(nrn, from_attributes=True)
    except ValidationError as exc:
        raise InvalidInputTypeError(action, nrn) from exc


def normalize(nrn: NrnInput) -> DigitString:
    """Strip everything but decimal digits, or concatenate a record's fields.

    The result may be of any length; ``parse`` enforces the 11 digits.
    """
    source = classify(nrn, "normalize")
    if isinstance(source, str):
        return _NON_DIGITS.sub("", source)
    return source.digits
