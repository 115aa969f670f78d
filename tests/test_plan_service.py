from datetime import UTC, date, datetime

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from petcare import telemetry
from petcare.application.plan_service import PlanService, evaluate, system_clock
from petcare.application.validation import normalize_plan_request
from petcare.domain.classifier import AUTUMN_HINT, SUMMER_HINT
from petcare.domain.entities import HealthStatus, IntensityLevel, SubjectCategory
from petcare.domain.exceptions import InvalidRangeError, MissingFieldError


def test_generate_normalizes_and_builds(service: PlanService):
    plan = service.generate(" 金毛 ", "3", "偏瘦", None)

    assert plan.meta.species == "金毛"
    assert plan.meta.age_years == 3.0
    assert plan.meta.health is HealthStatus.UNDERWEIGHT
    assert plan.meta.intensity is IntensityLevel.HIGH
    assert plan.meta.season_hint == AUTUMN_HINT


def test_generate_uses_clock_date():
    service = PlanService(lambda: datetime(2024, 7, 1, tzinfo=UTC))
    assert service.generate("英短", 2).meta.season_hint == SUMMER_HINT


def test_generate_rejects_invalid_input(service: PlanService):
    with pytest.raises(MissingFieldError):
        service.generate("  ", 2)
    with pytest.raises(InvalidRangeError):
        service.generate("英短", 99)


def test_system_clock_is_timezone_aware():
    now = system_clock("Asia/Shanghai")()
    assert now.tzinfo is not None
    assert now.utcoffset() is not None


def test_evaluate_returns_classification_used_for_plan():
    request = normalize_plan_request("英短", 9, "Healthy")
    classification, plan = evaluate(request, date(2024, 1, 10))

    assert classification.category is SubjectCategory.FELINE
    assert classification.is_senior
    assert not classification.is_juvenile
    assert classification.season_hint == plan.meta.season_hint
    assert plan.meta.intensity is IntensityLevel.LOW


def test_generate_records_plan_span(service: PlanService, monkeypatch):
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(telemetry, "tracer", provider.get_tracer("test"))

    service.generate("金毛", 3, "偏瘦")

    spans = exporter.get_finished_spans()
    assert [span.name for span in spans] == ["plan.generate"]
    attributes = spans[0].attributes
    assert attributes["plan.health"] == "Underweight"
    assert attributes["plan.category"] == "Canine"
    assert attributes["plan.intensity"] == "High"


def test_rejected_request_records_no_plan_span(service: PlanService, monkeypatch):
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(telemetry, "tracer", provider.get_tracer("test"))

    with pytest.raises(MissingFieldError):
        service.generate("", 3)

    assert exporter.get_finished_spans() == ()
