from typing import Any, Final

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, ConfigDict, Field

from ..application.plan_service import Clock, PlanService, system_clock
from ..config import settings
from ..domain.classifier import suggest_default_age
from ..domain.entities import HealthStatus

api_router: Final = APIRouter(
    prefix="/api",
    tags=["plans"],
    responses={
        400: {"description": "Bad Request - Invalid input data"},
        405: {"description": "Method Not Allowed"},
    },
)


# Request Models
class PlanRequestBody(BaseModel):
    """Raw plan request. Fields are coerced and validated by the service."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    species: Any = Field(
        None,
        description="Species or breed text (required, non-empty after trim)",
        examples=["英短", "金毛", "兔子"],
    )
    age_years: Any = Field(
        None,
        alias="ageYears",
        description="Age in years (required, finite, 0 to 40)",
        examples=[2, 0.5, 9],
    )
    health: Any = Field(
        None,
        description="Health status value or label; unknown values become Healthy",
        examples=["Healthy", "关节风险"],
    )
    notes: Any = Field(
        None,
        description="Optional note, at most 200 characters are kept",
        examples=["易紧张、最近换粮"],
    )


# Response Models
class PlanMetaResponse(BaseModel):
    """Echoed inputs plus computed values."""

    model_config = ConfigDict(populate_by_name=True)

    species: str = Field(description="Normalized species text")
    age_years: float = Field(alias="ageYears", description="Age in years")
    health: HealthStatus = Field(description="Normalized health status")
    intensity: str = Field(description="Activity intensity: Low, Medium or High")
    season_hint: str = Field(alias="seasonHint", description="Seasonal advisory")


class PlanResponse(BaseModel):
    """Daily care plan."""

    meta: PlanMetaResponse
    feeding: list[str] = Field(description="Feeding advice, in order")
    exercise: list[str] = Field(description="Exercise advice; intensity banner first")
    care: list[str] = Field(description="Grooming and care advice")
    safety: list[str] = Field(description="Observation and safety advice")


class HealthOption(BaseModel):
    value: str = Field(description="Value to send as `health`")
    label: str = Field(description="Display label")


class PlanOptionsResponse(BaseModel):
    """Form options for building a plan request."""

    model_config = ConfigDict(populate_by_name=True)

    health_options: list[HealthOption] = Field(alias="healthOptions")
    default_age_years: float = Field(alias="defaultAgeYears")


# Dependencies
def get_clock() -> Clock:
    """Clock used to pick the season hint."""
    return system_clock(settings.season_timezone)


def get_plan_service(clock: Clock = Depends(get_clock)) -> PlanService:
    return PlanService(clock)


@api_router.post(
    "/plan",
    response_model=PlanResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate a daily care plan",
)
def create_plan(
    body: PlanRequestBody,
    service: PlanService = Depends(get_plan_service),
) -> dict[str, Any]:
    """Generate feeding, exercise, care and safety advice for a pet.

    Missing species or an invalid age is rejected with a 400 Problem Details
    response; an unknown health value is treated as Healthy.
    """
    plan = service.generate(
        species=body.species,
        age_years=body.age_years,
        health=body.health,
        notes=body.notes,
    )
    return plan.to_dict()


@api_router.get(
    "/plan/options",
    response_model=PlanOptionsResponse,
    summary="List request form options",
)
def get_plan_options(
    species: str = Query(
        "", max_length=100, description="Species to suggest an age for"
    ),
) -> dict[str, Any]:
    """Health options and a suggested default age for the given species."""
    return {
        "healthOptions": [
            {"value": member.value, "label": member.label} for member in HealthStatus
        ],
        "defaultAgeYears": suggest_default_age(species),
    }
