"""Unit tests for the four effort score components."""

import pytest

from erg_effort.metrics import (
    CardiacLoadCalculator,
    EconomyCalculator,
    PacingCalculator,
    WorkOutputCalculator,
    age_factor,
    body_weight_factor,
    is_negative_split,
)
from erg_effort.models import AthleteProfile, WorkoutRecord


class TestCardiacLoad:
    """Test the cardiac load component (0-40)."""

    def test_hr_path(self, default_profile: AthleteProfile, hr_2k: WorkoutRecord):
        """Test Karvonen intensity at 150 bpm (HRR 140, 71.4%)."""
        score = CardiacLoadCalculator().calculate(default_profile, hr_2k)

        assert score == pytest.approx((100 / 140) ** 1.5 * 40)
        assert score == pytest.approx(24.15, abs=0.01)

    def test_power_fallback_without_hr(
        self, default_profile: AthleteProfile, steady_2k: WorkoutRecord
    ):
        """Test the power-based estimate when no HR was recorded."""
        score = CardiacLoadCalculator().calculate(default_profile, steady_2k)

        # Power intensity capped at 1.3, duration log10(8) * 0.6
        expected = 1.3**1.2 * (0.6 * 0.9030899869919435) * 28
        assert score == pytest.approx(expected)
        assert score == pytest.approx(20.79, abs=0.01)

    def test_zero_without_hr_or_power(self, default_profile: AthleteProfile):
        """Test that a workout with neither HR nor power scores zero."""
        workout = WorkoutRecord(total_distance_metres=0, total_time_seconds=0)

        assert CardiacLoadCalculator().calculate(default_profile, workout) == 0.0

    def test_hr_below_resting_is_zero(self, default_profile: AthleteProfile):
        """Test that HR under resting HR gives no strain."""
        workout = WorkoutRecord(
            total_distance_metres=2000, total_time_seconds=420, avg_heart_rate=45
        )

        assert CardiacLoadCalculator().calculate(default_profile, workout) == 0.0

    def test_capped_at_forty_for_older_athlete(self):
        """Test that the age bonus never pushes the score over 40."""
        profile = AthleteProfile(
            age=50, weight_kg=75, height_cm=175, max_hr=190, resting_hr=50
        )
        workout = WorkoutRecord(
            total_distance_metres=2000, total_time_seconds=420, avg_heart_rate=190
        )

        assert CardiacLoadCalculator().calculate(profile, workout) == 40.0

    def test_zero_hr_reserve_does_not_raise(self):
        """Test a degenerate profile with max HR equal to resting HR."""
        profile = AthleteProfile(
            age=30, weight_kg=75, height_cm=175, max_hr=60, resting_hr=60
        )
        workout = WorkoutRecord(
            total_distance_metres=2000, total_time_seconds=420, avg_heart_rate=150
        )

        assert CardiacLoadCalculator().calculate(profile, workout) == 0.0

    @pytest.mark.parametrize(
        "age,expected", [(30, 1.0), (40, 1.05), (20, 0.95), (90, 1.3), (100, 1.3)]
    )
    def test_age_factor(self, age, expected):
        """Test +0.5% per year over 30, capped at +30%."""
        assert age_factor(age) == pytest.approx(expected)


class TestWorkOutput:
    """Test the work output component (0-35)."""

    def test_reference_piece(
        self, default_profile: AthleteProfile, steady_2k: WorkoutRecord
    ):
        """Test relative power ~2.016 over log10(8) minutes of credit."""
        score = WorkOutputCalculator().calculate(default_profile, steady_2k)

        assert score == pytest.approx(27.30, abs=0.01)

    def test_heavier_athlete_scores_lower(self, steady_2k: WorkoutRecord):
        """Test that expectations scale up with body mass."""
        light = AthleteProfile(
            age=30, weight_kg=60, height_cm=170, max_hr=190, resting_hr=50
        )
        heavy = AthleteProfile(
            age=30, weight_kg=100, height_cm=190, max_hr=190, resting_hr=50
        )
        calculator = WorkOutputCalculator()

        assert calculator.calculate(light, steady_2k) > calculator.calculate(
            heavy, steady_2k
        )

    def test_clamped_at_thirty_five(self, default_profile: AthleteProfile):
        """Test that very long hard sessions hit the cap."""
        workout = WorkoutRecord(total_distance_metres=42195, total_time_seconds=8400)

        assert WorkOutputCalculator().calculate(default_profile, workout) == 35.0

    def test_body_weight_factor(self):
        """Test the sub-linear weight scaling."""
        assert body_weight_factor(75) == pytest.approx(1.0)
        assert body_weight_factor(150) == pytest.approx(2**0.222)


class TestPacing:
    """Test the pacing component (0-15)."""

    def test_single_piece_default(
        self, default_profile: AthleteProfile, steady_2k: WorkoutRecord
    ):
        """Test the neutral score without splits."""
        assert PacingCalculator().calculate(default_profile, steady_2k) == 10.0

    def test_single_interval_default(
        self, default_profile: AthleteProfile, intervals_from_times
    ):
        """Test that one interval is treated like a single piece."""
        workout = WorkoutRecord(
            total_distance_metres=500,
            total_time_seconds=105,
            intervals=intervals_from_times([105]),
        )

        assert PacingCalculator().calculate(default_profile, workout) == 10.0

    def test_even_splits(self, default_profile: AthleteProfile, intervals_from_times):
        """Test that perfectly even splits score full consistency."""
        workout = WorkoutRecord(
            total_distance_metres=2000,
            total_time_seconds=480,
            intervals=intervals_from_times([120, 120, 120, 120]),
        )

        assert PacingCalculator().calculate(default_profile, workout) == pytest.approx(
            12.0
        )

    def test_negative_split_bonus_is_exactly_three(
        self, default_profile: AthleteProfile, intervals_from_times
    ):
        """Test two workouts differing only in split order."""
        negative = WorkoutRecord(
            total_distance_metres=2000,
            total_time_seconds=476,
            intervals=intervals_from_times([120, 120, 118, 118]),
        )
        positive = WorkoutRecord(
            total_distance_metres=2000,
            total_time_seconds=476,
            intervals=intervals_from_times([118, 118, 120, 120]),
        )
        calculator = PacingCalculator()

        difference = calculator.calculate(
            default_profile, negative
        ) - calculator.calculate(default_profile, positive)

        assert difference == pytest.approx(3.0)

    def test_erratic_splits_floor_at_zero(
        self, default_profile: AthleteProfile, intervals_from_times
    ):
        """Test that a large coefficient of variation removes all credit."""
        workout = WorkoutRecord(
            total_distance_metres=2000,
            total_time_seconds=600,
            intervals=intervals_from_times([200, 100, 200, 100]),
        )

        assert PacingCalculator().calculate(default_profile, workout) == 0.0

    def test_is_negative_split_odd_length(self):
        """Test that the middle interval belongs to the second half."""
        assert is_negative_split([120, 110, 110])
        assert not is_negative_split([110, 120, 120])
        assert not is_negative_split([120])


class TestEconomy:
    """Test the economy component (0-10)."""

    def test_default_without_stroke_rate(
        self, default_profile: AthleteProfile, steady_2k: WorkoutRecord
    ):
        """Test the neutral score without a stroke rate."""
        assert EconomyCalculator().calculate(default_profile, steady_2k) == 5.0

    def test_default_without_power(self, default_profile: AthleteProfile):
        """Test the neutral score when no power could be derived."""
        workout = WorkoutRecord(
            total_distance_metres=0, total_time_seconds=0, avg_stroke_rate=24
        )

        assert EconomyCalculator().calculate(default_profile, workout) == 5.0

    @pytest.mark.parametrize(
        "stroke_rate,expected",
        [
            (30, 6.0),  # ~10.1 W/stroke
            (40, 8.0),  # ~7.6 W/stroke
            (60, 10.0),  # ~5.0 W/stroke
        ],
    )
    def test_watts_per_stroke_bands(
        self, default_profile: AthleteProfile, stroke_rate, expected
    ):
        """Test that fewer watts per stroke score higher."""
        workout = WorkoutRecord(
            total_distance_metres=2000,
            total_time_seconds=420,
            avg_stroke_rate=stroke_rate,
        )

        assert EconomyCalculator().calculate(default_profile, workout) == expected

    def test_zero_stroke_rate_treated_as_missing(
        self, default_profile: AthleteProfile
    ):
        """Test that a zero stroke rate from the monitor means no sensor."""
        workout = WorkoutRecord(
            total_distance_metres=2000, total_time_seconds=420, avg_stroke_rate=0
        )

        assert workout.avg_stroke_rate is None
        assert EconomyCalculator().calculate(default_profile, workout) == 5.0
