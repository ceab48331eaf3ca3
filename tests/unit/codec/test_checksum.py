"""Unit tests for the mod-97 checksum and birth-year resolution."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from belgian_nrn import (
    InvalidChecksumError,
    compute_checksum,
    expected_checksums,
    get_birth_year,
)
from belgian_nrn.codec.checksum import mod97


class TestMod97:
    def test_zero_pads(self):
        assert mod97("96") == "01"

    def test_multiple_of_97_yields_97(self):
        assert mod97("194") == "97"

    def test_century_prefix(self):
        assert compute_checksum("860814000", 1900) == "84"
        assert compute_checksum("860814000", 2000) == "16"
        assert compute_checksum("010814000", 2000) == "74"


class TestGetBirthYear:
    @pytest.mark.parametrize(
        ("raw", "year"),
        [
            ("860814 000 84", 1986),
            ("860813 000 17", 1986),
            ("810212 896 71", 1981),
            ("814212 896 60", 1981),
            ("812212 896 17", 1981),
            ("010814 000 74", 2001),
            ("100815 000 39", 2010),
        ],
    )
    def test_resolves_century(self, raw, year):
        assert get_birth_year(raw) == year

    def test_accepts_record(self):
        record = {"birthDate": ["86", "08", "14"], "serial": "000", "checksum": "84"}
        assert get_birth_year(record) == 1986

    def test_expected_checksums(self):
        assert expected_checksums("860814 000 11") == ("84", "16")

    def test_invalid_checksum_reports_supplied_and_expected(self):
        with pytest.raises(InvalidChecksumError) as exc_info:
            get_birth_year("860814 000 11")
        err = exc_info.value
        assert (err.checksum, err.expected_19, err.expected_20) == ("11", "84", "16")
        assert str(err) == (
            'Could not calculate birth date with invalid checksum of "11", '
            'expected "84" for 1900 or "16" for 2000'
        )

    def test_invalid_checksum_is_logged_without_the_number(self):
        with capture_logs() as logs:
            with pytest.raises(InvalidChecksumError):
                get_birth_year("860814 000 11")
        assert logs == [
            {
                "event": "checksum_mismatch",
                "log_level": "debug",
                "checksum": "11",
                "expected_19": "84",
                "expected_20": "16",
            }
        ]
