"""Last-week markers and training phase recommendation."""

from metrics.config import (
    DECOUPLING_BASE_MIN,
    DEFAULT_PLANNING,
    PDC_INTENSITY_MAX,
    PHASE_BASE,
    PHASE_BUILD,
    PHASE_INTENSITY,
    PHASE_RECOVERY,
    PlanningDefaults,
    QUALIFYING_DAY_TYPE,
    STATE_TIRED,
)


def _as_float(value) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def is_qualifying_unit(unit: dict, day_type_field: str) -> bool:
    """Whether a unit counts towards the markers (low-intensity GA1 days)."""
    day_type = unit.get(day_type_field)
    if not isinstance(day_type, str):
        return False
    return QUALIFYING_DAY_TYPE.lower() in day_type.lower()


def compute_markers(
    units: list[dict],
    day_type_field: str,
    decoupling_field: str,
    pdc_field: str,
) -> dict:
    """Average decoupling and PDC over qualifying units.

    Args:
        units: Wellness records of the previous week
        day_type_field: Field holding the day type (e.g. "GA1")
        decoupling_field: Field holding aerobic decoupling in percent
        pdc_field: Field holding the PDC value

    Returns:
        Dict with decoupling, pdc (None when no unit carries a value)
        and the number of qualifying units
    """
    qualifying = [u for u in units if is_qualifying_unit(u, day_type_field)]

    decouplings = [v for v in (_as_float(u.get(decoupling_field)) for u in qualifying) if v is not None]
    pdcs = [v for v in (_as_float(u.get(pdc_field)) for u in qualifying) if v is not None]

    return {
        "decoupling": round(sum(decouplings) / len(decouplings), 2) if decouplings else None,
        "pdc": round(sum(pdcs) / len(pdcs), 3) if pdcs else None,
        "units": len(qualifying),
    }


def recommend_phase(
    markers: dict | None,
    state: str,
    defaults: PlanningDefaults = DEFAULT_PLANNING,
) -> str:
    """Recommend a training phase from last-week markers and the week state.

    High decoupling keeps the athlete in base training, a low PDC calls for
    intensity work, otherwise build. A tired week always means recovery.

    Note: the decoupling marker is read under the key "decupling", which
    compute_markers() never produces, so it always falls back to the
    missing-decoupling default.
    """
    markers = markers or {}

    decoupling = markers.get("decupling")
    if decoupling is None:
        decoupling = defaults.missing_decoupling
    pdc = markers.get("pdc")
    if pdc is None:
        pdc = defaults.missing_pdc

    if decoupling > DECOUPLING_BASE_MIN:
        phase = PHASE_BASE
    elif pdc < PDC_INTENSITY_MAX:
        phase = PHASE_INTENSITY
    else:
        phase = PHASE_BUILD

    if state == STATE_TIRED:
        phase = PHASE_RECOVERY

    return phase
