import json
from datetime import date

import pytest

from petcare.application.plan_service import build_plan
from petcare.domain.entities import (
    HealthStatus,
    IntensityLevel,
    Plan,
    PlanMeta,
    PlanRequest,
)


def test_health_status_labels_are_unique():
    labels = [member.label for member in HealthStatus]
    assert len(labels) == len(set(labels)) == 7


def test_health_status_parse_falls_back_to_healthy():
    assert HealthStatus.parse(None) is HealthStatus.HEALTHY
    assert HealthStatus.parse("???") is HealthStatus.HEALTHY
    assert HealthStatus.parse("皮肤敏感") is HealthStatus.SENSITIVE_SKIN


def test_plan_is_immutable():
    plan = build_plan(PlanRequest(species="英短", age_years=2.0), date(2024, 4, 1))
    with pytest.raises(AttributeError):
        plan.feeding = ()  # type: ignore[misc]
    assert isinstance(plan.feeding, tuple)


def test_plan_wire_format_keys():
    plan = build_plan(PlanRequest(species="英短", age_years=2.0), date(2024, 4, 1))
    data = plan.to_dict()
    assert list(data) == ["meta", "feeding", "exercise", "care", "safety"]
    assert data["meta"] == {
        "species": "英短",
        "ageYears": 2.0,
        "health": "Healthy",
        "intensity": "Medium",
        "seasonHint": plan.meta.season_hint,
    }


@pytest.mark.parametrize(
    "request_",
    [
        PlanRequest(species="英短", age_years=0.5, notes="怕生"),
        PlanRequest(species="金毛", age_years=9, health=HealthStatus.JOINT_RISK),
        PlanRequest(species="兔子", age_years=3, health=HealthStatus.UNDERWEIGHT),
    ],
)
def test_plan_survives_json_round_trip(request_: PlanRequest):
    plan = build_plan(request_, date(2024, 8, 20))
    wire = json.dumps(plan.to_dict(), ensure_ascii=False)
    parsed = Plan.from_dict(json.loads(wire))
    assert parsed == plan
    assert parsed.exercise == plan.exercise


def test_plan_meta_from_dict_parses_enums():
    meta = PlanMeta.from_dict(
        {
            "species": "柯基",
            "ageYears": 3,
            "health": "Overweight",
            "intensity": "Low",
            "seasonHint": "hint",
        }
    )
    assert meta.health is HealthStatus.OVERWEIGHT
    assert meta.intensity is IntensityLevel.LOW
    assert meta.age_years == 3.0
