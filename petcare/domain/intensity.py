"""Activity intensity resolution.

Intensity is computed by an ordered pipeline. Each step receives the result of
the previous step and may override it, so later steps win:

1. baseline from age
2. underweight bump
3. forced LOW for overweight, joint risk and chronic senior conditions
4. MEDIUM cap for sensitive digestion/skin, taken from the age baseline
5. forced LOW for seniors
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from .classifier import is_juvenile, is_senior
from .constants import ADULT_BELOW_AGE
from .entities import HealthStatus, IntensityLevel


@dataclass(frozen=True)
class IntensityContext:
    """Inputs every pipeline step may consult."""

    age_years: float
    health: HealthStatus
    baseline: IntensityLevel


IntensityStep = Callable[[IntensityLevel, IntensityContext], IntensityLevel]

LOW_FORCING_HEALTH: Final = frozenset(
    {
        HealthStatus.OVERWEIGHT,
        HealthStatus.JOINT_RISK,
        HealthStatus.SENIOR_CHRONIC,
    }
)
SENSITIVE_HEALTH: Final = frozenset(
    {HealthStatus.SENSITIVE_DIGESTION, HealthStatus.SENSITIVE_SKIN}
)


def baseline_intensity(age_years: float) -> IntensityLevel:
    """Age-only intensity: juveniles and older adults LOW, others MEDIUM."""
    if is_juvenile(age_years):
        return IntensityLevel.LOW
    if age_years < ADULT_BELOW_AGE:
        return IntensityLevel.MEDIUM
    return IntensityLevel.LOW


def _underweight_bump(current: IntensityLevel, ctx: IntensityContext) -> IntensityLevel:
    if ctx.health is not HealthStatus.UNDERWEIGHT:
        return current
    return ctx.baseline.bumped()


def _force_low_for_condition(
    current: IntensityLevel, ctx: IntensityContext
) -> IntensityLevel:
    if ctx.health in LOW_FORCING_HEALTH:
        return IntensityLevel.LOW
    return current


def _cap_for_sensitivity(
    current: IntensityLevel, ctx: IntensityContext
) -> IntensityLevel:
    if ctx.health not in SENSITIVE_HEALTH:
        return current
    # Capped from the age baseline, not from the running value
    return min(ctx.baseline, IntensityLevel.MEDIUM)


def _force_low_for_senior(
    current: IntensityLevel, ctx: IntensityContext
) -> IntensityLevel:
    if is_senior(ctx.age_years):
        return IntensityLevel.LOW
    return current


INTENSITY_PIPELINE: Final[tuple[IntensityStep, ...]] = (
    _underweight_bump,
    _force_low_for_condition,
    _cap_for_sensitivity,
    _force_low_for_senior,
)


def resolve_intensity(age_years: float, health: HealthStatus) -> IntensityLevel:
    """Run the intensity pipeline for a subject."""
    baseline = baseline_intensity(age_years)
    ctx = IntensityContext(age_years=age_years, health=health, baseline=baseline)

    intensity = baseline
    for step in INTENSITY_PIPELINE:
        intensity = step(intensity, ctx)
    return intensity
