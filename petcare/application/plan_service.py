"""Application layer - plan generation use case."""

from collections.abc import Callable
from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from ..domain.assembler import assemble_plan
from ..domain.classifier import classify
from ..domain.entities import Classification, Plan, PlanRequest
from ..domain.intensity import resolve_intensity
from ..logging_utils import log_plan_generated
from ..metrics import record_plan_generated
from ..telemetry import plan_span
from .validation import normalize_plan_request

Clock = Callable[[], datetime]


def system_clock(tz_name: str = "UTC") -> Clock:
    """Clock returning the current time in the given IANA time zone."""
    tz = ZoneInfo(tz_name)

    def now() -> datetime:
        return datetime.now(tz)

    return now


def evaluate(request: PlanRequest, today: date) -> tuple[Classification, Plan]:
    """Classify, resolve intensity and assemble, keeping the classification."""
    classification = classify(request.species, request.age_years, today)
    intensity = resolve_intensity(request.age_years, request.health)
    return classification, assemble_plan(request, classification, intensity)


def build_plan(request: PlanRequest, today: date) -> Plan:
    """Pure engine entry point."""
    _, plan = evaluate(request, today)
    return plan


class PlanService:
    """Application service for care plan generation."""

    def __init__(self, clock: Clock):
        self.clock = clock

    def generate(
        self,
        species: Any,
        age_years: Any,
        health: Any = None,
        notes: Any = None,
    ) -> Plan:
        """Normalize raw fields and build a plan for the clock's current date.

        Raises:
            MissingFieldError: If species is absent or blank
            InvalidRangeError: If age is not a finite number in [0, 40]
        """
        request = normalize_plan_request(species, age_years, health, notes)
        today = self.clock().date()

        with plan_span(request.health.value) as span:
            classification, plan = evaluate(request, today)
            category = classification.category.value
            span.set_attribute("plan.category", category)
            span.set_attribute("plan.intensity", plan.meta.intensity.value)

        log_plan_generated(
            category=category,
            intensity=plan.meta.intensity.value,
            health=request.health.value,
            has_notes=bool(request.notes),
        )
        record_plan_generated(category, plan.meta.intensity.value)
        return plan
