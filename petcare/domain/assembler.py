"""Recommendation assembly: turns classified inputs into a Plan."""

from . import advice
from .constants import NOTES_ECHO_LENGTH
from .entities import (
    Classification,
    HealthStatus,
    IntensityLevel,
    Plan,
    PlanMeta,
    PlanRequest,
)


def _needs_joint_care(health: HealthStatus, classification: Classification) -> bool:
    return health is HealthStatus.JOINT_RISK or classification.is_senior


def build_feeding(
    request: PlanRequest, classification: Classification
) -> tuple[str, ...]:
    feeding = list(advice.FEEDING_BASELINE[classification.category])

    if classification.is_juvenile:
        feeding.append(advice.FEEDING_JUVENILE)
    if request.health is HealthStatus.SENSITIVE_DIGESTION:
        feeding.append(advice.FEEDING_SENSITIVE_DIGESTION)
    if request.health is HealthStatus.OVERWEIGHT:
        feeding.append(advice.FEEDING_OVERWEIGHT)
    if request.health is HealthStatus.UNDERWEIGHT:
        feeding.append(advice.FEEDING_UNDERWEIGHT)
    if request.health is HealthStatus.SENIOR_CHRONIC:
        feeding.append(advice.FEEDING_SENIOR_CHRONIC)

    return tuple(feeding)


def build_exercise(
    request: PlanRequest,
    classification: Classification,
    intensity: IntensityLevel,
) -> tuple[str, ...]:
    """Intensity banner first, then category baseline, then condition notes."""
    exercise = [advice.EXERCISE_BANNER[intensity]]
    exercise.extend(advice.EXERCISE_BASELINE[classification.category])

    if _needs_joint_care(request.health, classification):
        exercise.append(advice.EXERCISE_JOINT_CARE)
    if request.health is HealthStatus.OVERWEIGHT:
        exercise.append(advice.EXERCISE_OVERWEIGHT)

    return tuple(exercise)


def build_care(request: PlanRequest, classification: Classification) -> tuple[str, ...]:
    care = list(advice.CARE_BASELINE)

    if _needs_joint_care(request.health, classification):
        care.append(advice.CARE_JOINT_CARE)
    if request.health is HealthStatus.SENSITIVE_SKIN:
        care.append(advice.CARE_SENSITIVE_SKIN)
    if request.health is HealthStatus.SENSITIVE_DIGESTION:
        care.append(advice.CARE_SENSITIVE_DIGESTION)
    if classification.is_juvenile:
        care.append(advice.CARE_JUVENILE)

    return tuple(care)


def build_safety(request: PlanRequest) -> tuple[str, ...]:
    safety = list(advice.SAFETY_BASELINE)

    note = request.notes.strip()
    if note:
        safety.append(f"{advice.NOTES_LABEL}{note[:NOTES_ECHO_LENGTH]}")

    return tuple(safety)


def assemble_plan(
    request: PlanRequest,
    classification: Classification,
    intensity: IntensityLevel,
) -> Plan:
    """Compose the four advisory lists into an immutable Plan.

    Total over all normalized inputs: every category has baseline text and
    every list starts from at least three baseline entries.
    """
    return Plan(
        meta=PlanMeta(
            species=request.species,
            age_years=request.age_years,
            health=request.health,
            intensity=intensity,
            season_hint=classification.season_hint,
        ),
        feeding=build_feeding(request, classification),
        exercise=build_exercise(request, classification, intensity),
        care=build_care(request, classification),
        safety=build_safety(request),
    )
