"""Subject classification: species category, life stage and season hint."""

from datetime import date
from typing import Final

from .constants import JUVENILE_BELOW_AGE, SENIOR_FROM_AGE
from .entities import Classification, SubjectCategory
from .keywords import DEFAULT_AGE_KEYWORDS, FALLBACK_DEFAULT_AGE, SPECIES_KEYWORDS

WINTER_HINT: Final = "冬季：注意保暖与关节热身"
SPRING_HINT: Final = "春季：注意换毛与寄生虫"
SUMMER_HINT: Final = "夏季：注意补水与防中暑"
AUTUMN_HINT: Final = "秋季：注意皮肤与运动回归"

_SEASON_BY_MONTH: Final[dict[int, str]] = {
    12: WINTER_HINT,
    1: WINTER_HINT,
    2: WINTER_HINT,
    3: SPRING_HINT,
    4: SPRING_HINT,
    5: SPRING_HINT,
    6: SUMMER_HINT,
    7: SUMMER_HINT,
    8: SUMMER_HINT,
    9: AUTUMN_HINT,
    10: AUTUMN_HINT,
    11: AUTUMN_HINT,
}


def classify_species(species: str) -> SubjectCategory:
    """Return the category whose keywords appear in the species text."""
    text = species.lower()
    for category, keywords in SPECIES_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return SubjectCategory.OTHER


def season_hint_for(today: date) -> str:
    """Pick the seasonal advisory string for the calendar month of `today`."""
    return _SEASON_BY_MONTH[today.month]


def is_juvenile(age_years: float) -> bool:
    return age_years < JUVENILE_BELOW_AGE


def is_senior(age_years: float) -> bool:
    return age_years >= SENIOR_FROM_AGE


def classify(species: str, age_years: float, today: date) -> Classification:
    """Derive category, life-stage flags and season hint.

    Args:
        species: Normalized species/breed text
        age_years: Normalized age in years
        today: Evaluation date; only its month is used

    Returns:
        Classification for the plan subject
    """
    return Classification(
        category=classify_species(species),
        is_juvenile=is_juvenile(age_years),
        is_senior=is_senior(age_years),
        season_hint=season_hint_for(today),
    )


def suggest_default_age(species: str) -> float:
    """Suggested starting age for a species, used to prefill request forms."""
    text = species.strip().lower()
    for keywords, age in DEFAULT_AGE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return age
    return FALLBACK_DEFAULT_AGE
