"""
Sustainability score, goal status and advisory tips for an estimate.

All functions are pure; thresholds come from ``ecotrip.constants`` so the
tips and the goal status can never disagree about the target.
"""

import math
from dataclasses import dataclass

from ..constants import GOAL_G_PER_KM, SCORE_CEILING_G_PER_KM
from ..models.vehicles import VehicleProfile


TIP_SWITCH_FUEL = "Consider switching to CNG, hybrid, or EV to reduce emissions."
TIP_SMALLER_ENGINE = "Smaller engine sizes (e.g., 1.2-1.5 L) can significantly cut emissions."
TIP_MAINTENANCE = "Regular maintenance and tire pressure checks improve efficiency in older vehicles."
TIP_REDUCE_LOAD = "Reduce cargo weight or consolidate trips to lower fuel consumption."
TIP_GENTLE_GRADIENT = "Plan routes with gentler gradients when possible."
TIP_OFF_PEAK = "Avoid peak hours or use public transit in dense urban areas."
TIP_CARPOOL = "Carpooling or micro-mobility options help in high-density areas."
TIP_CLIMATE_CONTROL = "Moderate AC/heating usage to reduce extra load on the engine."
TIP_KEEP_GOING = "Great setup! Keep optimizing routes and maintenance for continued gains."


@dataclass(frozen=True)
class Advisory:
    """Score and tips for one estimate."""
    score: int
    tips: tuple[str, ...]


def _round_half_up(value: float) -> int:
    # round() sends halves to even (round(32.5) == 32); percentages round .5 up
    if not math.isfinite(value):
        # floor() rejects infinities; callers clamp to 0-100 anyway
        return 0 if value < 0 else 100
    return math.floor(value + 0.5)


def _clamp_percent(value: int) -> int:
    return max(0, min(100, value))


def sustainability_score(emissions: float) -> int:
    """100 at 0 g/km falling linearly to 0 at the 300 g/km ceiling."""
    return _clamp_percent(_round_half_up(100 * (1 - emissions / SCORE_CEILING_G_PER_KM)))


def goal_progress(emissions: float) -> int:
    """
    Percentage of the 150 g/km goal left unused (0-100).

    Drives the progress ring. Deliberately distinct from the sustainability
    score, which is measured against the 300 g/km ceiling.
    """
    return _clamp_percent(_round_half_up(100 * (1 - emissions / GOAL_G_PER_KM)))


def meets_goal(emissions: float) -> bool:
    """True when emissions are at or under the goal."""
    return emissions <= GOAL_G_PER_KM


def summary_message(emissions: float) -> str:
    """One-line status for the goal banner."""
    if meets_goal(emissions):
        return f"You're aligned with the sustainability target (≤ {GOAL_G_PER_KM} g/km). Keep it up!"
    return f"Above target. Try the tips below to bring emissions closer to ≤ {GOAL_G_PER_KM} g/km."


def generate_tips(profile: VehicleProfile, emissions: float) -> list[str]:
    """
    Advisory tips in fixed rule order.

    Each rule is checked independently against the raw profile fields
    (missing numbers never trigger). Returns a single encouragement when
    nothing triggers, so the list is never empty.
    """
    tips = []

    if emissions > GOAL_G_PER_KM:
        tips.append(TIP_SWITCH_FUEL)
    if (profile.engine_size or 0) > 2.0:
        tips.append(TIP_SMALLER_ENGINE)
    if (profile.vehicle_age or 0) > 8:
        tips.append(TIP_MAINTENANCE)
    if profile.load == "heavy":
        tips.append(TIP_REDUCE_LOAD)
    if (profile.gradient or 0) > 4:
        tips.append(TIP_GENTLE_GRADIENT)
    if profile.network == "urban_dense":
        tips.append(TIP_OFF_PEAK)
    if (profile.pop_density or 0) > 10000:
        tips.append(TIP_CARPOOL)
    if profile.temp is not None and (profile.temp > 32 or profile.temp < 10):
        tips.append(TIP_CLIMATE_CONTROL)

    if not tips:
        tips.append(TIP_KEEP_GOING)
    return tips


def evaluate(profile: VehicleProfile, emissions: float) -> Advisory:
    """Score and tips for an estimate of ``profile``."""
    return Advisory(
        score=sustainability_score(emissions),
        tips=tuple(generate_tips(profile, emissions)),
    )
