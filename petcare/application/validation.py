"""Request normalization for the application layer.

Turns raw request fields into a canonical PlanRequest. Species and age are
strict; health and notes are lenient and silently corrected.
"""

import math
from typing import Any

from ..domain.constants import MAX_AGE_YEARS, MAX_NOTES_LENGTH
from ..domain.entities import HealthStatus, PlanRequest
from ..domain.exceptions import InvalidRangeError, MissingFieldError, ValidationError
from ..logging_config import get_logger
from ..logging_utils import log_validation_error
from ..metrics import record_plan_rejected

logger = get_logger(__name__)


def normalize_species(raw: Any) -> str:
    """Trim species text.

    Raises:
        MissingFieldError: If species is absent, not a string or blank
    """
    species = raw.strip() if isinstance(raw, str) else ""
    if not species:
        raise MissingFieldError("species is required", field="species")
    return species


def normalize_age(raw: Any) -> float:
    """Coerce age to a finite float in [0, MAX_AGE_YEARS].

    Raises:
        InvalidRangeError: If age is not numeric, not finite or out of range
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidRangeError("ageYears is invalid", field="ageYears")

    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise InvalidRangeError("ageYears is invalid", field="ageYears")

    try:
        age = float(raw)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidRangeError("ageYears is invalid", field="ageYears") from e

    if not math.isfinite(age) or age < 0 or age > MAX_AGE_YEARS:
        raise InvalidRangeError("ageYears is invalid", field="ageYears")
    return age


def normalize_health(raw: Any) -> HealthStatus:
    """Map raw health input to a HealthStatus, defaulting to HEALTHY."""
    health = HealthStatus.parse(raw)
    if raw is not None and health is HealthStatus.HEALTHY:
        text = str(raw).strip()
        if text and text.lower() != health.value.lower() and text != health.label:
            logger.debug("Unknown health status corrected", attempted=repr(text)[:50])
    return health


def normalize_notes(raw: Any) -> str:
    """Trim notes and cap them at MAX_NOTES_LENGTH characters."""
    if raw is None:
        return ""
    return str(raw).strip()[:MAX_NOTES_LENGTH]


def normalize_plan_request(
    species: Any,
    age_years: Any,
    health: Any = None,
    notes: Any = None,
) -> PlanRequest:
    """Normalize raw request fields into a PlanRequest.

    Args:
        species: Species or breed text
        age_years: Age in years, numeric or numeric string
        health: Health status value or display label (optional)
        notes: Free-text note (optional)

    Returns:
        Canonical PlanRequest

    Raises:
        MissingFieldError: If species is absent or blank
        InvalidRangeError: If age is not a finite number in [0, 40]
    """
    try:
        return PlanRequest(
            species=normalize_species(species),
            age_years=normalize_age(age_years),
            health=normalize_health(health),
            notes=normalize_notes(notes),
        )
    except ValidationError as e:
        value = species if e.field == "species" else age_years
        log_validation_error(e.field, repr(value), str(e))
        record_plan_rejected(e.field)
        raise
