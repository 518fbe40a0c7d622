"""Training load model (ATL, CTL, TSB)."""

from metrics.config import ATL_TIME_CONSTANT, CTL_TIME_CONSTANT


def compute_ema(previous_value: float, new_value: float, time_constant: int) -> float:
    """Compute one step of an exponential moving average.

    Formula: EMA = previous + (new - previous) / time_constant

    Args:
        previous_value: Previous EMA value
        new_value: New data point (daily load)
        time_constant: Time constant in days (e.g., 7 for ATL)

    Returns:
        New EMA value
    """
    return previous_value + (new_value - previous_value) / time_constant


def step_day(ctl: float, atl: float, load: float) -> tuple[float, float]:
    """Advance CTL and ATL by one day with the given load.

    Returns:
        Tuple of (ctl, atl)
    """
    return (
        compute_ema(ctl, load, CTL_TIME_CONSTANT),
        compute_ema(atl, load, ATL_TIME_CONSTANT),
    )


def simulate_days(ctl: float, atl: float, loads: list[float]) -> tuple[float, float]:
    """Apply a sequence of daily loads chronologically."""
    for load in loads:
        ctl, atl = step_day(ctl, atl, load)
    return ctl, atl
