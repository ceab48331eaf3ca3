"""belgian_nrn exception hierarchy."""

from __future__ import annotations


class NrnError(Exception):
    """Base exception for all belgian_nrn errors."""


class InvalidInputTypeError(NrnError, TypeError):
    """Input is neither text nor a record carrying the three NRN fields."""

    def __init__(self, action: str, value: object) -> None:
        self.action = action
        self.value_type = type(value).__name__
        super().__init__(f"Could not {action} nrn of invalid type {self.value_type!r}")


class InvalidLengthError(NrnError, ValueError):
    """Normalized text is not exactly 11 digits."""

    def __init__(self, normalized: str, expected: int) -> None:
        self.length = len(normalized)
        self.expected = expected
        super().__init__(
            f"Could not parse nrn of invalid length {self.length}, expected {expected} digits"
        )


class InvalidChecksumError(NrnError, ValueError):
    """Checksum matches neither the 1900s nor the 2000s birth year."""

    def __init__(self, checksum: str, expected_19: str, expected_20: str) -> None:
        self.checksum = checksum
        self.expected_19 = expected_19
        self.expected_20 = expected_20
        super().__init__(
            f'Could not calculate birth date with invalid checksum of "{checksum}", '
            f'expected "{expected_19}" for 1900 or "{expected_20}" for 2000'
        )


class InvalidMonthBandError(NrnError, ValueError):
    """Stored month falls outside every NRN/BIS month band."""

    def __init__(self, stored_month: str) -> None:
        self.stored_month = stored_month
        super().__init__(f"Month field {stored_month!r} is not a valid NRN or BIS month")


class UnknownBirthDateError(NrnError):
    """Birth month or day is the 'unknown' sentinel (00)."""

    def __init__(self) -> None:
        super().__init__("Birth date is unknown")


class InvalidBirthDateError(NrnError, ValueError):
    """Year, month and day do not form a calendar date."""

    def __init__(self, year: int, month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Birth date {year:04d}-{month:02d}-{day:02d} does not exist")


class NotABisNumberError(NrnError):
    """A BIS-only operation was called on a standard NRN."""

    def __init__(self) -> None:
        super().__init__("This is not a BIS number")
