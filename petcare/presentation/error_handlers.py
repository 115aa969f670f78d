"""Centralized error handling for the presentation layer."""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from ..domain.constants import MAX_AGE_YEARS
from ..domain.exceptions import (
    DomainError,
    InvalidRangeError,
    MissingFieldError,
    ValidationError,
)
from .problem_details import ErrorCodes, ProblemDetailFactory


class ErrorFormatter:
    """Formats errors for consistent user experience."""

    @staticmethod
    def format_user_friendly_message(error: Exception) -> str:
        """Convert technical errors to user-friendly messages."""
        if isinstance(error, MissingFieldError):
            return "请填写宠物品种/类型"
        elif isinstance(error, InvalidRangeError):
            return f"年龄需为 0–{MAX_AGE_YEARS:g} 之间的数字"
        elif isinstance(error, ValidationError):
            return str(error)
        return "生成失败，请稍后再试"


def handle_domain_error(error: DomainError, request: Request) -> JSONResponse:
    """Convert domain errors to RFC 7807 Problem Details responses."""
    user_message = ErrorFormatter.format_user_friendly_message(error)

    if isinstance(error, ValidationError):
        problem = ProblemDetailFactory.validation_failed(
            detail=user_message,
            instance=str(request.url.path),
            field_errors=_extract_field_errors(error),
        )
    else:
        problem = ProblemDetailFactory.internal_server_error(
            detail=user_message,
            instance=str(request.url.path),
        )

    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
    )


def handle_request_validation_error(
    errors: list[dict[str, Any]], request: Request
) -> JSONResponse:
    """Convert framework body-parsing errors to a validation problem."""
    field_errors = []
    for error in errors:
        field_name = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        field_errors.append(
            {
                "field": field_name or "body",
                "code": ErrorCodes.FIELD_INVALID_VALUE,
                "message": error["msg"],
            }
        )

    problem = ProblemDetailFactory.validation_failed(
        detail="Request validation failed",
        instance=str(request.url.path),
        field_errors=field_errors,
    )
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
    )


def handle_unexpected_error(request: Request) -> JSONResponse:
    problem = ProblemDetailFactory.internal_server_error(
        detail="An unexpected error occurred. Please try again.",
        instance=str(request.url.path),
    )
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
    )


def _extract_field_errors(error: ValidationError) -> list[dict[str, str]]:
    """Extract field-specific errors from a ValidationError."""
    if isinstance(error, MissingFieldError):
        return [
            {
                "field": error.field,
                "code": ErrorCodes.FIELD_REQUIRED,
                "message": str(error),
            }
        ]
    if isinstance(error, InvalidRangeError):
        return [
            {
                "field": error.field,
                "code": ErrorCodes.FIELD_OUT_OF_RANGE,
                "message": str(error),
            }
        ]
    return [
        {
            "field": error.field,
            "code": ErrorCodes.FIELD_INVALID_VALUE,
            "message": str(error),
        }
    ]
