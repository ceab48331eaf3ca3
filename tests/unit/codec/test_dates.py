"""Unit tests for birth date, age and adulthood."""

from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import freezegun
import pytest

from belgian_nrn import (
    InvalidBirthDateError,
    InvalidChecksumError,
    UnknownBirthDateError,
    age_on,
    compute_checksum,
    get_age,
    get_birth_date,
    is_legal_adult,
)

BRUSSELS = ZoneInfo("Europe/Brussels")
COMPARISON = datetime(2018, 8, 14, 5, 30, tzinfo=timezone.utc)


class TestGetBirthDate:
    def test_1900s(self):
        assert get_birth_date("860814 000 84") == datetime(1986, 8, 14, tzinfo=BRUSSELS)

    def test_2000s(self):
        assert get_birth_date("010814 000 74") == datetime(2001, 8, 14, tzinfo=BRUSSELS)

    def test_nrn(self):
        assert get_birth_date("810212 896 71") == datetime(1981, 2, 12, tzinfo=BRUSSELS)

    @pytest.mark.parametrize("raw", ["814212 896 60", "812212 896 17"])
    def test_bis_number(self, raw):
        assert get_birth_date(raw) == datetime(1981, 2, 12, tzinfo=BRUSSELS)

    def test_anchored_at_brussels_midnight(self):
        birth_date = get_birth_date("860814 000 84")
        assert birth_date.utcoffset().total_seconds() == 2 * 3600
        assert birth_date.astimezone(timezone.utc) == datetime(1986, 8, 13, 22, tzinfo=timezone.utc)

    def test_unknown_birth_date(self):
        with pytest.raises(UnknownBirthDateError, match="Birth date is unknown"):
            get_birth_date("810000 896 29")

    def test_invalid_checksum(self):
        with pytest.raises(InvalidChecksumError):
            get_birth_date("860814 000 11")

    def test_not_a_calendar_date(self):
        record = {
            "birthDate": ["81", "02", "30"],
            "serial": "896",
            "checksum": compute_checksum("810230896", 1900),
        }
        with pytest.raises(InvalidBirthDateError) as exc_info:
            get_birth_date(record)
        assert (exc_info.value.month, exc_info.value.day) == (2, 30)

    def test_configured_timezone(self, monkeypatch):
        monkeypatch.setenv("BELGIAN_NRN_TIMEZONE", "UTC")
        assert get_birth_date("860814 000 84") == datetime(1986, 8, 14, tzinfo=ZoneInfo("UTC"))


class TestAgeOn:
    def test_birthday_passed(self):
        assert age_on(date(1986, 8, 13), date(2018, 8, 14)) == 32

    def test_on_birthday(self):
        assert age_on(date(1986, 8, 14), date(2018, 8, 14)) == 32

    def test_birthday_ahead(self):
        assert age_on(date(1986, 8, 15), date(2018, 8, 14)) == 31

    def test_aware_comparison_uses_brussels_calendar(self):
        # 23:30 UTC on the 13th is already the 14th in Brussels.
        late = datetime(2018, 8, 13, 23, 30, tzinfo=timezone.utc)
        assert age_on(datetime(1986, 8, 14, tzinfo=BRUSSELS), late) == 32

    def test_leap_day_birthday(self):
        assert age_on(date(2000, 2, 29), date(2018, 2, 28)) == 17
        assert age_on(date(2000, 2, 29), date(2018, 3, 1)) == 18


class TestGetAge:
    @pytest.mark.parametrize(
        ("raw", "age"),
        [("860813 000 17", 32), ("860814 000 84", 32), ("860815 000 54", 31)],
    )
    def test_explicit_comparison_date(self, raw, age):
        assert get_age(raw, comparison_date=COMPARISON) == age

    @freezegun.freeze_time("2018-08-14T05:30:00Z")
    def test_defaults_to_now(self):
        assert get_age("860813 000 17") == 32
        assert get_age("860815 000 54") == 31


class TestIsLegalAdult:
    @freezegun.freeze_time("2018-08-14T05:30:00Z")
    def test_minor(self):
        assert is_legal_adult("100815 000 39") is False

    @freezegun.freeze_time("2018-08-14T05:30:00Z")
    def test_adult(self):
        assert is_legal_adult("860814 000 84") is True
        assert is_legal_adult("860813 000 17") is True

    def test_explicit_comparison_date(self):
        assert is_legal_adult("010814 000 74", comparison_date=date(2019, 8, 13)) is False
        assert is_legal_adult("010814 000 74", comparison_date=date(2019, 8, 14)) is True

    def test_configured_threshold(self, monkeypatch):
        monkeypatch.setenv("BELGIAN_NRN_LEGAL_ADULT_AGE", "21")
        assert is_legal_adult("010814 000 74", comparison_date=date(2019, 8, 14)) is False
