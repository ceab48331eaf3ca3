"""Type aliases used across belgian_nrn."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from belgian_nrn.models.nrn import ParsedNumber

DigitString = str
BirthDateParts = tuple[str, str, str]
NrnInput = Union[str, "ParsedNumber", Mapping[str, Any]]
ComparisonDate = Union[date, datetime]
