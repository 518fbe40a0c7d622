"""Daily training target calculation."""

import math

from metrics.config import DAILY_BASE, DAILY_MAX_FACTOR, DAILY_TSB_GAIN, TSB_CLAMP


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() uses banker's rounding; targets use 0.5 -> 1.
    """
    return int(math.floor(value + 0.5))


def compute_daily_target(ctl: float, atl: float) -> int:
    """Compute the recommended daily training load.

    Scales CTL by the current form:
    target = ctl × (1 + 0.05 × TSB), with TSB clamped to ±20

    Args:
        ctl: Chronic training load (fitness)
        atl: Acute training load (fatigue)

    Returns:
        Target TSS for today, within [0, 1.5 × CTL]
    """
    tsb = ctl - atl
    tsb_clamped = max(-TSB_CLAMP, min(TSB_CLAMP, tsb))

    tss = ctl * (DAILY_BASE + DAILY_TSB_GAIN * tsb_clamped)

    max_tss = ctl * DAILY_MAX_FACTOR
    tss = max(0.0, min(max_tss, tss))

    target = round_half_up(tss)
    # Rounding up must not leave the band
    if target > max_tss:
        target = int(math.floor(max_tss))
    return max(0, target)
