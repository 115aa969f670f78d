"""Static keyword tables for species classification.

Keywords are matched as lower-case substrings of the species text. Add new
breeds here; the classifier itself has no per-breed branching.
"""

from typing import Final

from .entities import SubjectCategory

# Checked in order; the first category with a matching keyword wins.
SPECIES_KEYWORDS: Final[tuple[tuple[SubjectCategory, tuple[str, ...]], ...]] = (
    (SubjectCategory.FELINE, ("猫", "cat", "英短", "布偶", "暹罗")),
    (SubjectCategory.CANINE, ("狗", "犬", "dog", "金毛", "柯基", "拉布拉多")),
)

# Suggested starting age for the request form, by species keyword.
DEFAULT_AGE_KEYWORDS: Final[tuple[tuple[tuple[str, ...], float], ...]] = (
    (("猫", "cat"), 2.0),
    (("犬", "狗", "dog"), 3.0),
    (("兔", "rabbit"), 1.0),
)
FALLBACK_DEFAULT_AGE: Final = 2.0
