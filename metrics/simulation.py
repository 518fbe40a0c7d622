"""Multi-week projection of weekly training targets."""

from dataclasses import asdict, dataclass, field
from datetime import date, timedelta
from typing import Awaitable, Callable, Iterator

from loguru import logger

from metrics.calendar import get_week_start, iso
from metrics.config import DEFAULT_PLANNING, PlanningDefaults
from metrics.markers import compute_markers, recommend_phase
from metrics.training_load import simulate_days
from metrics.week import classify_week, load_multiplier, next_weekly_target


@dataclass
class WeekProjection:
    """One projected week. Written back to the week's Monday."""

    week_offset: int
    monday: str
    weekly_target: int
    state: str
    phase: str
    ctl: float
    atl: float
    ramp_rate: float
    written: bool = False
    error: str | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["ctl"] = round(self.ctl, 1)
        data["atl"] = round(self.atl, 1)
        data["ramp_rate"] = round(self.ramp_rate, 2)
        return data


@dataclass
class SimulationInput:
    """Starting point of a projection.

    Attributes:
        ctl: Current chronic training load
        atl: Current acute training load
        start_state: Current week state from classify_week(). Informational
            only: logged at the start of a run, projected states come from
            the simulated weeks
        weekly_target: Current week's target TSS
        monday: Monday of the current week (anchor)
        training_days: Monday..Sunday selection vector
        units: Previous week's wellness records, used for markers
    """

    ctl: float
    atl: float
    start_state: str
    weekly_target: float
    monday: date
    training_days: list[bool] = field(default_factory=lambda: [False] * 7)
    units: list[dict] = field(default_factory=list)
    day_type_field: str = "TagesTyp"
    decoupling_field: str = "Decoupling"
    pdc_field: str = "PDC"


WeekWriter = Callable[[WeekProjection], Awaitable[None]]


def day_weights(
    training_days: list[bool],
    defaults: PlanningDefaults = DEFAULT_PLANNING,
) -> list[float]:
    """Weight per weekday; falls back to Mo/Mi/Fr/So when nothing is selected."""
    days = list(training_days) if training_days and any(training_days) else list(defaults.fallback_training_days)
    return [1.0 if selected else 0.0 for selected in days]


def daily_loads(weekly_target: float, weights: list[float]) -> list[float]:
    """Distribute a weekly target over the days by weight."""
    total = sum(weights)
    if total <= 0:
        return [0.0] * len(weights)
    return [weekly_target * (w / total) for w in weights]


def project_weeks(
    inp: SimulationInput,
    horizon: int,
    defaults: PlanningDefaults = DEFAULT_PLANNING,
) -> Iterator[WeekProjection]:
    """Project future weeks without side effects.

    Each week is simulated day by day at the previous target, classified
    with the week-over-week CTL delta as ramp rate, and the next target is
    derived from the state/ramp multiplier table.

    Args:
        inp: Starting point
        horizon: Number of weeks to project
        defaults: Fallback policy values

    Yields:
        WeekProjection for week offsets 1..horizon
    """
    weights = day_weights(inp.training_days, defaults)
    markers = compute_markers(inp.units, inp.day_type_field, inp.decoupling_field, inp.pdc_field)
    anchor = get_week_start(inp.monday)

    ctl = max(0.0, inp.ctl)
    atl = max(0.0, inp.atl)
    target = max(0.0, inp.weekly_target)

    for offset in range(1, horizon + 1):
        ctl_start = ctl
        ctl, atl = simulate_days(ctl, atl, daily_loads(target, weights))
        ramp_rate = ctl - ctl_start

        state = classify_week(ctl, atl, ramp_rate)["state"]
        target = next_weekly_target(target, load_multiplier(state, ramp_rate))

        yield WeekProjection(
            week_offset=offset,
            monday=iso(anchor + timedelta(days=7 * offset)),
            weekly_target=target,
            state=state,
            phase=recommend_phase(markers, state, defaults),
            ctl=ctl,
            atl=atl,
            ramp_rate=ramp_rate,
        )


async def simulate_future_weeks(
    inp: SimulationInput,
    writer: WeekWriter | None,
    horizon: int | None = None,
    defaults: PlanningDefaults = DEFAULT_PLANNING,
) -> list[WeekProjection]:
    """Project future weeks and write each one back, in week order.

    A failed write is logged and recorded on its week; later weeks are
    still projected and written.

    Returns:
        Full projected sequence
    """
    horizon = defaults.horizon_weeks if horizon is None else horizon
    logger.debug(
        f"Simulating {horizon} weeks from CTL={inp.ctl:.1f} ATL={inp.atl:.1f} "
        f"state={inp.start_state} target={inp.weekly_target}"
    )

    progression = []
    for week in project_weeks(inp, horizon, defaults):
        if writer is not None:
            try:
                await writer(week)
                week.written = True
            except Exception as e:
                week.error = str(e) or e.__class__.__name__
                logger.warning(f"Could not write week +{week.week_offset} ({week.monday}): {week.error}")
        progression.append(week)

    return progression


def summarize_progression(progression: list[WeekProjection]) -> str:
    """One-line preview, e.g. "W1: Normal → 455, W2: Tired → 365"."""
    return ", ".join(f"W{p.week_offset}: {p.state} → {p.weekly_target}" for p in progression)
