"""Configuration constants for target computation."""

from dataclasses import dataclass

# Daily target (TSB-scaled fraction of CTL)
# Formula: target = ctl * (DAILY_BASE + DAILY_TSB_GAIN * clamp(tsb, -TSB_CLAMP, TSB_CLAMP))
DAILY_BASE = 1.0        # 100% of CTL
DAILY_TSB_GAIN = 0.05   # +5% per TSB point
TSB_CLAMP = 20
DAILY_MAX_FACTOR = 1.5  # never more than 1.5 x CTL

# Load model time constants (days)
# Formula: ctl += (load - ctl) / CTL_TIME_CONSTANT
CTL_TIME_CONSTANT = 42
ATL_TIME_CONSTANT = 7

# Week classification thresholds by CTL tier: (ctl_upper_bound, tsb_critical, atl_ctl_ratio)
# Fatigue detection is relative to training volume.
CLASSIFY_TIERS = [
    (50, -8, 1.4),
    (80, -10, 1.3),
    (None, -15, 1.2),
]
RECOVERED_RAMP_MAX = -0.5
RECOVERED_TSB_MIN = -5
TIRED_RAMP_MIN = 1.0

# Week states
STATE_RECOVERED = "Recovered"
STATE_TIRED = "Tired"
STATE_NORMAL = "Normal"

# Training phases
PHASE_BASE = "Grundlage"
PHASE_INTENSITY = "Intensiv"
PHASE_BUILD = "Aufbau"
PHASE_RECOVERY = "Erholung"

# Phase thresholds
DECOUPLING_BASE_MIN = 5       # decoupling (%) above this -> base phase
PDC_INTENSITY_MAX = 0.9       # pdc below this -> intensity phase
QUALIFYING_DAY_TYPE = "GA1"   # units counted for markers

# Weekly progression bounds
WEEKLY_MAX_CHANGE = 0.25
WEEKLY_ROUNDING = 5

# Monday..Sunday, German two-letter abbreviations as used in the plan text
WEEKDAY_ABBREVIATIONS = ["mo", "di", "mi", "do", "fr", "sa", "so"]
WEEKDAY_NAMES = ["montag", "dienstag", "mittwoch", "donnerstag", "freitag", "samstag", "sonntag"]
WEEKDAY_TOKENS = {
    **{abbrev: i for i, abbrev in enumerate(WEEKDAY_ABBREVIATIONS)},
    **{name: i for i, name in enumerate(WEEKDAY_NAMES)},
}


@dataclass(frozen=True)
class PlanningDefaults:
    """Fallback values used when the athlete's data doesn't provide them.

    Attributes:
        weekly_target_days: Weekly target defaults to daily target x this
        missing_decoupling: Decoupling marker when none is available
        missing_pdc: PDC marker when none is available
        horizon_weeks: Number of weeks to project
        fallback_training_days: Day vector used when no day is selected
    """

    weekly_target_days: int = 7
    missing_decoupling: float = 999
    missing_pdc: float = 0
    horizon_weeks: int = 6
    fallback_training_days: tuple = (True, False, True, False, True, False, True)


DEFAULT_PLANNING = PlanningDefaults()
