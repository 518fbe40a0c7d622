"""Training target computation."""

from metrics.config import (
    ATL_TIME_CONSTANT,
    CTL_TIME_CONSTANT,
    DEFAULT_PLANNING,
    PlanningDefaults,
)
from metrics.calendar import get_week_start, parse_training_days
from metrics.targets import compute_daily_target
from metrics.week import classify_week, load_multiplier, next_weekly_target
from metrics.markers import compute_markers, recommend_phase
from metrics.simulation import (
    SimulationInput,
    WeekProjection,
    project_weeks,
    simulate_future_weeks,
)

__all__ = [
    "ATL_TIME_CONSTANT",
    "CTL_TIME_CONSTANT",
    "DEFAULT_PLANNING",
    "PlanningDefaults",
    "get_week_start",
    "parse_training_days",
    "compute_daily_target",
    "classify_week",
    "load_multiplier",
    "next_weekly_target",
    "compute_markers",
    "recommend_phase",
    "SimulationInput",
    "WeekProjection",
    "project_weeks",
    "simulate_future_weeks",
]
