"""Weekly state classification and target progression."""

import math

from metrics.config import (
    CLASSIFY_TIERS,
    RECOVERED_RAMP_MAX,
    RECOVERED_TSB_MIN,
    STATE_NORMAL,
    STATE_RECOVERED,
    STATE_TIRED,
    TIRED_RAMP_MIN,
    WEEKLY_MAX_CHANGE,
    WEEKLY_ROUNDING,
)


def get_thresholds(ctl: float) -> tuple[float, float]:
    """Get fatigue thresholds for a CTL level.

    Returns:
        Tuple of (tsb_critical, atl_ctl_ratio_threshold)
    """
    for upper, tsb_critical, ratio in CLASSIFY_TIERS:
        if upper is None or ctl < upper:
            return tsb_critical, ratio
    # CLASSIFY_TIERS always ends with an open tier
    raise ValueError(f"No threshold tier for ctl={ctl}")


def classify_week(ctl: float, atl: float, ramp_rate: float) -> dict:
    """Classify the training state of a week.

    Decision order (first match wins):
    1. Recovered: ramp rate <= -0.5 and TSB >= -5
    2. Tired: ramp rate >= 1, TSB at or below the critical value,
       or ATL/CTL at or above the ratio threshold
    3. Normal

    Args:
        ctl: Chronic training load
        atl: Acute training load
        ramp_rate: Week-over-week CTL change

    Returns:
        Dict with state and tsb
    """
    tsb = ctl - atl
    tsb_critical, ratio_threshold = get_thresholds(ctl)
    ratio = atl / ctl if ctl > 0 else 0.0

    if ramp_rate <= RECOVERED_RAMP_MAX and tsb >= RECOVERED_TSB_MIN:
        state = STATE_RECOVERED
    elif ramp_rate >= TIRED_RAMP_MIN or tsb <= tsb_critical or ratio >= ratio_threshold:
        state = STATE_TIRED
    else:
        state = STATE_NORMAL

    return {"state": state, "tsb": tsb}


def load_multiplier(state: str, ramp_rate: float) -> float:
    """Pick next week's load multiplier from state and ramp rate."""
    if state == STATE_TIRED:
        return 0.8
    if ramp_rate < 0.5:
        return 1.12 if state == STATE_RECOVERED else 1.08
    if ramp_rate < 1:
        return 1.08 if state == STATE_RECOVERED else 1.05
    if ramp_rate <= 1.5:
        return 1.02
    return 0.9


def round_to_step(value: float, step: int = WEEKLY_ROUNDING) -> int:
    """Round half up to the nearest multiple of step."""
    return int(math.floor(value / step + 0.5)) * step


def next_weekly_target(previous: float, multiplier: float) -> int:
    """Compute next week's target from the previous one.

    The change is limited to ±25% and the result is a multiple of 5.
    If rounding pushes the value out of the band, it steps back inside.
    Below about 20 no multiple of 5 may fit the band; the multiple of 5
    nearest to the bounded value is used then, and a positive target never
    drops below 5.

    Args:
        previous: Previous weekly target
        multiplier: Load multiplier from load_multiplier()

    Returns:
        New weekly target (non-negative multiple of 5)
    """
    previous = max(0.0, previous)
    low = previous * (1 - WEEKLY_MAX_CHANGE)
    high = previous * (1 + WEEKLY_MAX_CHANGE)

    raw = max(low, min(high, previous * multiplier))
    target = round_to_step(raw)

    if target > high and target - WEEKLY_ROUNDING >= low:
        target -= WEEKLY_ROUNDING
    elif target < low and target + WEEKLY_ROUNDING <= high:
        target += WEEKLY_ROUNDING

    if previous > 0:
        return max(WEEKLY_ROUNDING, target)
    return max(0, target)
