"""Target run orchestration: fetch wellness, compute targets, write back."""

from dataclasses import dataclass
from datetime import date, timedelta

import httpx
from loguru import logger

from metrics.calendar import get_week_start, iso, parse_date, parse_training_days
from metrics.markers import compute_markers, recommend_phase
from metrics.simulation import (
    SimulationInput,
    WeekProjection,
    simulate_future_weeks,
    summarize_progression,
)
from metrics.targets import compute_daily_target
from metrics.week import classify_week
from web.config import TargetConfig
from web.services.intervals import IntervalsAPIError, IntervalsClient


@dataclass
class RunResult:
    """Outcome of a run, shaped like an HTTP response."""

    status_code: int
    body: dict

    @property
    def ok(self) -> bool:
        return self.status_code == 200


async def run_targets(
    config: TargetConfig,
    client: IntervalsClient | None = None,
    today: str | date | None = None,
    weeks: int | None = None,
) -> RunResult:
    """Run the full target computation once.

    Args:
        config: Credentials, field names and planning defaults
        client: Client to use (created from config when None)
        today: Date to compute for (default: today, UTC)
        weeks: Projection horizon (default: config.planning.horizon_weeks)

    Returns:
        RunResult with status 200 (report or empty data) or 500 (error)
    """
    missing = config.missing()
    if missing:
        logger.error(f"Missing config: {', '.join(missing)}")
        return RunResult(500, {"error": "Missing config", "missing": missing})

    try:
        if client is None:
            async with IntervalsClient(config.api_key, config.athlete_id, config.base_url) as own_client:
                return await _run(config, own_client, parse_date(today), weeks)
        return await _run(config, client, parse_date(today), weeks)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return RunResult(500, {"error": "Unexpected error", "detail": str(e)})


async def _run(
    config: TargetConfig,
    client: IntervalsClient,
    day: date,
    weeks: int | None,
) -> RunResult:
    today_str = iso(day)
    fields = config.fields

    # 1) Today's wellness
    try:
        wellness = await client.get_wellness(today_str)
    except IntervalsAPIError as e:
        logger.error(f"Wellness GET failed: {e.status_code} {e.body}")
        return RunResult(
            500,
            {"error": "Failed to fetch wellness", "status": e.status_code, "detail": e.body},
        )

    ctl = wellness.get("ctl")
    atl = wellness.get("atl")
    if ctl is None or atl is None:
        logger.info(f"{today_str}: no ctl/atl data")
        return RunResult(200, {"message": "No ctl/atl data", "date": today_str})

    ramp_rate = wellness.get("rampRate") or 0.0

    # 2) Today's target and state
    daily_target = compute_daily_target(ctl, atl)
    today_week = classify_week(ctl, atl, ramp_rate)

    # 3) Weekly target and day plan
    monday = get_week_start(day)
    weekly_target, plan_text = await _fetch_week_plan(client, config, monday, daily_target)
    training_days = parse_training_days(plan_text)

    # 4) Previous week's units
    units = await _fetch_units(client, config, monday)
    markers = compute_markers(units, fields.day_type, fields.decoupling, fields.pdc)

    # 5) Projection, one PUT per week
    progression = await simulate_future_weeks(
        SimulationInput(
            ctl=ctl,
            atl=atl,
            start_state=today_week["state"],
            weekly_target=weekly_target,
            monday=monday,
            training_days=training_days,
            units=units,
            day_type_field=fields.day_type,
            decoupling_field=fields.decoupling,
            pdc_field=fields.pdc,
        ),
        writer=_week_writer(client, config),
        horizon=config.planning.horizon_weeks if weeks is None else weeks,
        defaults=config.planning,
    )

    phase = recommend_phase(markers, today_week["state"], config.planning)
    failed = [p for p in progression if not p.written]
    summary = summarize_progression(progression)

    # 6) Today's target and status comment
    daily_written = None
    if config.write_daily_target:
        comment = build_status_comment(phase, weekly_target, progression)
        daily_written = await _write_daily_target(client, config, today_str, daily_target, comment)

    logger.info(
        f"{today_str}: CTL={ctl}, ATL={atl}, daily target={daily_target}, "
        f"state={today_week['state']}, weekly target={weekly_target}"
    )
    if failed:
        logger.warning(f"{len(failed)}/{len(progression)} weekly writes failed")

    return RunResult(
        200,
        {
            "date": today_str,
            "ctl": ctl,
            "atl": atl,
            "ramp_rate": ramp_rate,
            "tsb": round(today_week["tsb"], 1),
            "daily_target": daily_target,
            "daily_target_written": daily_written,
            "state": today_week["state"],
            "monday": iso(monday),
            "weekly_target": weekly_target,
            "training_days": training_days,
            "markers": markers,
            "phase": phase,
            "progression": [p.to_dict() for p in progression],
            "failed_writes": len(failed),
            "summary": summary,
        },
    )


def build_status_comment(phase: str, weekly_target: float, progression: list[WeekProjection]) -> str:
    """Status comment for today's record: phase, weekly target and preview."""
    return "\n".join(
        [
            f"**Phase:** {phase}",
            f"**Weekly target TSS:** {round(weekly_target)}",
            f"**Preview:** {summarize_progression(progression) or '-'}",
        ]
    )


async def _write_daily_target(
    client: IntervalsClient,
    config: TargetConfig,
    today_str: str,
    daily_target: int,
    comment: str,
) -> bool:
    try:
        await client.put_wellness(
            today_str,
            {config.fields.daily_target: daily_target, "comments": comment},
        )
        return True
    except (IntervalsAPIError, httpx.HTTPError) as e:
        logger.warning(f"Could not write daily target for {today_str}: {e}")
        return False


async def _fetch_week_plan(
    client: IntervalsClient,
    config: TargetConfig,
    monday: date,
    daily_target: int,
) -> tuple[float, str | None]:
    """Get the weekly target and plan text from the Monday record.

    Falls back to daily target x 7 and no plan.
    """
    fields = config.fields
    try:
        record = await client.get_wellness(iso(monday))
    except (IntervalsAPIError, httpx.HTTPError) as e:
        logger.warning(f"Monday wellness GET failed ({e}), using defaults")
        record = {}

    weekly_target = record.get(fields.weekly_target)
    if not isinstance(weekly_target, (int, float)) or isinstance(weekly_target, bool) or weekly_target <= 0:
        weekly_target = daily_target * config.planning.weekly_target_days

    return weekly_target, record.get(fields.plan)


async def _fetch_units(
    client: IntervalsClient,
    config: TargetConfig,
    monday: date,
) -> list[dict]:
    fields = config.fields
    try:
        return await client.get_wellness_range(
            oldest=iso(monday - timedelta(days=7)),
            newest=iso(monday - timedelta(days=1)),
            cols=[fields.day_type, fields.decoupling, fields.pdc],
        )
    except (IntervalsAPIError, httpx.HTTPError) as e:
        logger.warning(f"Wellness history GET failed ({e}), no markers")
        return []


def _week_writer(client: IntervalsClient, config: TargetConfig):
    async def write(week: WeekProjection) -> None:
        await client.put_wellness(
            week.monday,
            {
                config.fields.weekly_target: week.weekly_target,
                "comments": (
                    f"Projected week +{week.week_offset}: {week.state}, "
                    f"phase {week.phase}, target {week.weekly_target} TSS"
                ),
            },
        )

    return write
