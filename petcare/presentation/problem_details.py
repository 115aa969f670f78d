"""RFC 7807 Problem Details models for API error responses."""

from typing import Any, Final

from fastapi import status
from pydantic import BaseModel, Field

PROBLEM_TYPE_BASE: Final = "https://petcare-plan.local/problems"


class ErrorCodes:
    """Machine-readable codes used in field-level errors."""

    VALIDATION_FAILED: Final = "validation_failed"
    FIELD_REQUIRED: Final = "field_required"
    FIELD_OUT_OF_RANGE: Final = "field_out_of_range"
    FIELD_INVALID_VALUE: Final = "field_invalid_value"
    INTERNAL_ERROR: Final = "internal_error"


class ProblemDetail(BaseModel):
    """Base problem description as defined by RFC 7807."""

    type: str = Field(description="URI identifying the problem type")
    title: str = Field(description="Short, human-readable summary")
    status: int = Field(description="HTTP status code")
    detail: str | None = Field(None, description="Explanation of this occurrence")
    instance: str | None = Field(None, description="Request path that failed")


class ValidationProblemDetail(ProblemDetail):
    """Problem detail carrying per-field validation errors."""

    errors: list[dict[str, Any]] | None = Field(
        None, description="Field-level errors with field, code and message"
    )


class ProblemDetailFactory:
    """Builds the problem documents returned by the API."""

    @staticmethod
    def validation_failed(
        detail: str,
        instance: str | None = None,
        field_errors: list[dict[str, Any]] | None = None,
    ) -> ValidationProblemDetail:
        return ValidationProblemDetail(
            type=f"{PROBLEM_TYPE_BASE}/validation-failed",
            title="Validation Failed",
            status=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            instance=instance,
            errors=field_errors or [],
        )

    @staticmethod
    def internal_server_error(
        detail: str, instance: str | None = None
    ) -> ProblemDetail:
        return ProblemDetail(
            type=f"{PROBLEM_TYPE_BASE}/internal-error",
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            instance=instance,
        )
