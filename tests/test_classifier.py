from datetime import date

import pytest

from petcare.domain.classifier import (
    AUTUMN_HINT,
    SPRING_HINT,
    SUMMER_HINT,
    WINTER_HINT,
    classify,
    classify_species,
    season_hint_for,
    suggest_default_age,
)
from petcare.domain.entities import SubjectCategory


@pytest.mark.parametrize(
    ("species", "expected"),
    [
        ("英短", SubjectCategory.FELINE),
        ("布偶猫", SubjectCategory.FELINE),
        ("Siamese CAT", SubjectCategory.FELINE),
        ("暹罗", SubjectCategory.FELINE),
        ("金毛", SubjectCategory.CANINE),
        ("柯基犬", SubjectCategory.CANINE),
        ("Labrador Dog", SubjectCategory.CANINE),
        ("拉布拉多", SubjectCategory.CANINE),
        ("兔子", SubjectCategory.OTHER),
        ("hamster", SubjectCategory.OTHER),
    ],
)
def test_classify_species(species: str, expected: SubjectCategory):
    assert classify_species(species) is expected


@pytest.mark.parametrize(
    ("month", "expected"),
    [
        (12, WINTER_HINT),
        (1, WINTER_HINT),
        (2, WINTER_HINT),
        (3, SPRING_HINT),
        (5, SPRING_HINT),
        (6, SUMMER_HINT),
        (8, SUMMER_HINT),
        (9, AUTUMN_HINT),
        (11, AUTUMN_HINT),
    ],
)
def test_season_hint_depends_only_on_month(month: int, expected: str):
    assert season_hint_for(date(2024, month, 1)) == expected
    assert season_hint_for(date(2031, month, 28)) == expected


def test_classify_life_stage_flags():
    today = date(2024, 7, 1)

    kitten = classify("英短", 0.5, today)
    assert kitten.is_juvenile is True
    assert kitten.is_senior is False
    assert kitten.season_hint == SUMMER_HINT

    adult = classify("金毛", 1.0, today)
    assert adult.is_juvenile is False
    assert adult.is_senior is False

    senior = classify("金毛", 8.0, today)
    assert senior.is_juvenile is False
    assert senior.is_senior is True


@pytest.mark.parametrize(
    ("species", "expected"),
    [
        ("英短猫", 2.0),
        ("Dog", 3.0),
        ("垂耳兔", 1.0),
        ("鹦鹉", 2.0),
    ],
)
def test_suggest_default_age(species: str, expected: float):
    assert suggest_default_age(species) == expected
