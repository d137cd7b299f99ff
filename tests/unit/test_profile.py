"""Unit tests for athlete profile resolution."""

from datetime import date, datetime

import pytest

from erg_effort.profile import age_from_birth_date, estimate_max_hr, resolve_profile
from erg_effort.settings import Settings


class TestAgeFromBirthDate:
    """Test age derivation."""

    def test_day_before_birthday(self):
        """Test that the year is not complete until the birthday."""
        assert age_from_birth_date(date(1990, 6, 15), today=date(2024, 6, 14)) == 33

    def test_on_birthday(self):
        """Test that the birthday completes the year."""
        assert age_from_birth_date(date(1990, 6, 15), today=date(2024, 6, 15)) == 34

    def test_accepts_datetime(self):
        """Test that timestamps are reduced to dates."""
        birth = datetime(1990, 6, 15, 23, 59)

        assert age_from_birth_date(birth, today=date(2024, 6, 15)) == 34


class TestResolveProfile:
    """Test falling back to the configured defaults."""

    def test_all_defaults(self):
        """Test an athlete with nothing recorded."""
        profile = resolve_profile(Settings())

        assert profile.age == 30
        assert profile.weight_kg == 75.0
        assert profile.height_cm == 175.0
        assert profile.max_hr == 190
        assert profile.resting_hr == 50

    def test_explicit_values_kept(self):
        """Test that recorded values are used as-is."""
        profile = resolve_profile(
            Settings(),
            age=45,
            weight_kg=90,
            height_cm=190,
            max_hr=178,
            resting_hr=44,
        )

        assert (profile.age, profile.weight_kg, profile.max_hr) == (45, 90, 178)
        assert profile.resting_hr == 44

    def test_zero_values_fall_back(self):
        """Test that zeros count as missing."""
        profile = resolve_profile(Settings(), weight_kg=0, max_hr=0, resting_hr=0)

        assert profile.weight_kg == 75.0
        assert profile.max_hr == 190
        assert profile.resting_hr == 50

    def test_age_from_birth_date(self):
        """Test deriving age when only a birth date is stored."""
        profile = resolve_profile(
            Settings(), birth_date=date(1980, 1, 1), today=date(2024, 6, 1)
        )

        assert profile.age == 44

    def test_explicit_age_wins_over_birth_date(self):
        """Test the precedence of an explicit age."""
        profile = resolve_profile(
            Settings(), age=25, birth_date=date(1980, 1, 1), today=date(2024, 6, 1)
        )

        assert profile.age == 25

    def test_max_hr_estimated_from_age(self):
        """Test the optional 220 - age estimate."""
        settings = Settings(estimate_max_hr_from_age=True)

        profile = resolve_profile(settings, age=40)

        assert profile.max_hr == 180

    def test_custom_defaults(self):
        """Test that the defaults come from settings."""
        settings = Settings(default_max_hr=200, default_resting_hr=40)

        profile = resolve_profile(settings)

        assert profile.max_hr == 200
        assert profile.hr_reserve == 160


@pytest.mark.parametrize("age,expected", [(20, 200), (40, 180), (65, 155)])
def test_estimate_max_hr(age, expected):
    """Test the 220 - age rule."""
    assert estimate_max_hr(age) == expected
