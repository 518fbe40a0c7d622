"""Tests for week classification and weekly target progression."""

import pytest

from metrics.week import (
    classify_week,
    get_thresholds,
    load_multiplier,
    next_weekly_target,
    round_to_step,
)


class TestClassifyWeek:
    def test_deep_negative_tsb_is_tired(self):
        result = classify_week(60, 90, 0)
        assert result == {"state": "Tired", "tsb": -30}

    def test_normal(self):
        assert classify_week(100, 90, 0.2)["state"] == "Normal"

    def test_recovered(self):
        assert classify_week(40, 42, -0.6)["state"] == "Recovered"

    def test_recovered_needs_non_negative_form(self):
        # ramp is low but tsb -12 is below -5
        assert classify_week(60, 72, -0.6)["state"] == "Tired"

    def test_high_ramp_is_tired(self):
        assert classify_week(100, 95, 1.0)["state"] == "Tired"

    def test_tsb_threshold_scales_with_ctl(self):
        assert classify_week(45, 53, 0)["state"] == "Tired"   # -8 at ctl < 50
        assert classify_week(60, 69, 0)["state"] == "Normal"  # -9 above -10
        assert classify_week(60, 70, 0)["state"] == "Tired"   # -10 at ctl < 80
        assert classify_week(85, 99, 0)["state"] == "Normal"  # -14 above -15

    def test_ratio_threshold(self):
        # tsb -7.5 is above the critical value, but ATL exceeds 1.4 x CTL
        assert classify_week(17.5, 25, 0)["state"] == "Tired"

    def test_zero_ctl_has_no_ratio_signal(self):
        assert classify_week(0, 0, 0)["state"] == "Normal"

    def test_pure(self):
        assert classify_week(72.3, 80.1, 0.4) == classify_week(72.3, 80.1, 0.4)


def test_thresholds_tiers():
    assert get_thresholds(10) == (-8, 1.4)
    assert get_thresholds(50) == (-10, 1.3)
    assert get_thresholds(80) == (-15, 1.2)


@pytest.mark.parametrize(
    "state,ramp,expected",
    [
        ("Tired", 0.0, 0.8),
        ("Recovered", 0.2, 1.12),
        ("Normal", 0.2, 1.08),
        ("Recovered", 0.7, 1.08),
        ("Normal", 0.7, 1.05),
        ("Normal", 1.5, 1.02),
        ("Normal", 2.0, 0.9),
        ("Normal", -3.0, 1.08),
    ],
)
def test_load_multiplier(state, ramp, expected):
    assert load_multiplier(state, ramp) == expected


class TestNextWeeklyTarget:
    def test_rounds_to_five(self):
        assert next_weekly_target(400, 1.08) == 430

    def test_decrease(self):
        assert next_weekly_target(1050, 0.8) == 840

    def test_clamped_to_quarter(self):
        assert next_weekly_target(400, 0.5) == 300
        assert next_weekly_target(400, 1.5) == 500

    def test_rounding_steps_back_inside(self):
        # 102 * 1.25 = 127.5 would round to 130
        assert next_weekly_target(102, 1.25) == 125

    def test_never_negative(self):
        assert next_weekly_target(-20, 1.1) == 0

    def test_round_to_step(self):
        assert round_to_step(432) == 430
        assert round_to_step(432.5) == 435


class TestSmallWeeklyTargets:
    def test_positive_target_never_drops_to_zero(self):
        assert next_weekly_target(3, 1.08) == 5
        assert next_weekly_target(3, 0.8) == 5

    def test_five_stays_five(self):
        assert next_weekly_target(5, 1.12) == 5
        assert next_weekly_target(5, 0.8) == 5

    def test_steps_inside_band_when_possible(self):
        # 7 * 0.8 = 5.6, band [5.25, 8.75]
        assert next_weekly_target(7, 0.8) == 5
