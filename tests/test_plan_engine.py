"""Engine-level tests: build_plan over normalized requests."""

from datetime import date

import pytest

from petcare.application.plan_service import build_plan
from petcare.domain import advice
from petcare.domain.classifier import WINTER_HINT
from petcare.domain.entities import (
    HealthStatus,
    IntensityLevel,
    PlanRequest,
    SubjectCategory,
)

TODAY = date(2024, 10, 15)


def _plan(species="英短", age_years=2.0, health=HealthStatus.HEALTHY, notes=""):
    return build_plan(
        PlanRequest(species=species, age_years=age_years, health=health, notes=notes),
        TODAY,
    )


@pytest.mark.parametrize("species", ["英短", "金毛", "兔子"])
@pytest.mark.parametrize("age_years", [0.0, 0.5, 3.0, 7.0, 8.0, 40.0])
@pytest.mark.parametrize("health", list(HealthStatus))
def test_every_list_is_non_empty(species, age_years, health):
    plan = _plan(species, age_years, health)
    assert len(plan.feeding) >= 3
    assert len(plan.exercise) >= 4
    assert len(plan.care) >= 3
    assert len(plan.safety) >= 3


def test_identical_input_gives_identical_plan():
    first = _plan("金毛", 3.0, HealthStatus.OVERWEIGHT, "最近换粮")
    second = _plan("金毛", 3.0, HealthStatus.OVERWEIGHT, "最近换粮")
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_meta_echoes_inputs_and_computed_values():
    plan = build_plan(
        PlanRequest(species="柯基", age_years=9.0, health=HealthStatus.UNDERWEIGHT),
        date(2025, 1, 3),
    )
    assert plan.meta.species == "柯基"
    assert plan.meta.age_years == 9.0
    assert plan.meta.health is HealthStatus.UNDERWEIGHT
    assert plan.meta.intensity is IntensityLevel.LOW
    assert plan.meta.season_hint == WINTER_HINT


@pytest.mark.parametrize(
    ("species", "category"),
    [
        ("英短", SubjectCategory.FELINE),
        ("金毛", SubjectCategory.CANINE),
        ("兔子", SubjectCategory.OTHER),
    ],
)
def test_baselines_follow_category(species, category):
    plan = _plan(species, 3.0)
    assert plan.feeding[:3] == advice.FEEDING_BASELINE[category]
    assert plan.exercise[1:4] == advice.EXERCISE_BASELINE[category]


@pytest.mark.parametrize("species", ["英短", "金毛", "兔子"])
def test_high_intensity_banner_comes_first(species):
    plan = _plan(species, 3.0, HealthStatus.UNDERWEIGHT)
    assert plan.meta.intensity is IntensityLevel.HIGH
    assert plan.exercise[0] == advice.EXERCISE_BANNER[IntensityLevel.HIGH]


def test_banner_matches_intensity():
    assert _plan(age_years=3.0).exercise[0] == advice.EXERCISE_BANNER[
        IntensityLevel.MEDIUM
    ]
    assert _plan(age_years=0.5).exercise[0] == advice.EXERCISE_BANNER[
        IntensityLevel.LOW
    ]


def test_healthy_adult_has_only_baselines():
    plan = _plan("金毛", 3.0)
    assert len(plan.feeding) == 3
    assert len(plan.exercise) == 4
    assert plan.care == advice.CARE_BASELINE
    assert plan.safety == advice.SAFETY_BASELINE


def test_feeding_conditions_append_in_fixed_order():
    juvenile_sensitive = _plan(age_years=0.5, health=HealthStatus.SENSITIVE_DIGESTION)
    assert juvenile_sensitive.feeding[3:] == (
        advice.FEEDING_JUVENILE,
        advice.FEEDING_SENSITIVE_DIGESTION,
    )

    assert _plan(health=HealthStatus.OVERWEIGHT).feeding[3:] == (
        advice.FEEDING_OVERWEIGHT,
    )
    assert _plan(health=HealthStatus.UNDERWEIGHT).feeding[3:] == (
        advice.FEEDING_UNDERWEIGHT,
    )
    assert _plan(age_years=0.5, health=HealthStatus.SENIOR_CHRONIC).feeding[3:] == (
        advice.FEEDING_JUVENILE,
        advice.FEEDING_SENIOR_CHRONIC,
    )


def test_joint_risk_adds_exercise_and_care_entries():
    """Joint care touches both the exercise and the care list."""
    plan = _plan("金毛", 3.0, HealthStatus.JOINT_RISK)
    assert advice.EXERCISE_JOINT_CARE in plan.exercise
    assert advice.CARE_JOINT_CARE in plan.care
    assert plan.exercise[-1] == advice.EXERCISE_JOINT_CARE
    assert plan.care[:3] == advice.CARE_BASELINE


def test_senior_gets_joint_care_without_joint_risk():
    plan = _plan("英短", 8.0)
    assert advice.EXERCISE_JOINT_CARE in plan.exercise
    assert advice.CARE_JOINT_CARE in plan.care


def test_overweight_senior_exercise_order():
    plan = _plan("金毛", 10.0, HealthStatus.OVERWEIGHT)
    assert plan.exercise[0] == advice.EXERCISE_BANNER[IntensityLevel.LOW]
    assert plan.exercise[-2:] == (
        advice.EXERCISE_JOINT_CARE,
        advice.EXERCISE_OVERWEIGHT,
    )


def test_care_conditions():
    assert _plan(health=HealthStatus.SENSITIVE_SKIN).care[3:] == (
        advice.CARE_SENSITIVE_SKIN,
    )
    assert _plan(age_years=0.5, health=HealthStatus.SENSITIVE_DIGESTION).care[3:] == (
        advice.CARE_SENSITIVE_DIGESTION,
        advice.CARE_JUVENILE,
    )


def test_notes_echo_is_truncated_to_120_characters():
    plan = _plan(notes="x" * 150)
    assert len(plan.safety) == 4
    assert plan.safety[-1] == advice.NOTES_LABEL + "x" * 120


def test_blank_notes_add_nothing():
    assert _plan(notes="").safety == advice.SAFETY_BASELINE
    assert _plan(notes="   ").safety == advice.SAFETY_BASELINE
