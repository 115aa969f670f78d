"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class HealthStatus(str, Enum):
    """Closed set of health categories a plan can be built for."""

    HEALTHY = "Healthy"
    OVERWEIGHT = "Overweight"
    UNDERWEIGHT = "Underweight"
    SENSITIVE_DIGESTION = "SensitiveDigestion"
    SENSITIVE_SKIN = "SensitiveSkin"
    JOINT_RISK = "JointRisk"
    SENIOR_CHRONIC = "SeniorChronic"

    @property
    def label(self) -> str:
        """Display label shown to pet owners."""
        return _HEALTH_LABELS[self]

    @classmethod
    def parse(cls, raw: Any) -> "HealthStatus":
        """Map a raw value to a member, falling back to HEALTHY.

        Accepts the member value (case-insensitive) or the display label.
        """
        text = "" if raw is None else str(raw).strip()
        if not text:
            return cls.HEALTHY
        for member in cls:
            if text.lower() == member.value.lower() or text == member.label:
                return member
        return cls.HEALTHY


_HEALTH_LABELS: dict[HealthStatus, str] = {
    HealthStatus.HEALTHY: "健康",
    HealthStatus.OVERWEIGHT: "偏胖",
    HealthStatus.UNDERWEIGHT: "偏瘦",
    HealthStatus.SENSITIVE_DIGESTION: "肠胃敏感",
    HealthStatus.SENSITIVE_SKIN: "皮肤敏感",
    HealthStatus.JOINT_RISK: "关节风险",
    HealthStatus.SENIOR_CHRONIC: "老年慢病",
}


class SubjectCategory(str, Enum):
    """Coarse species grouping used to pick baseline advice."""

    FELINE = "Feline"
    CANINE = "Canine"
    OTHER = "Other"


class IntensityLevel(str, Enum):
    """Ordinal activity load: LOW < MEDIUM < HIGH."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        return _INTENSITY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IntensityLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, IntensityLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, IntensityLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, IntensityLevel):
            return NotImplemented
        return self.rank >= other.rank

    def bumped(self) -> "IntensityLevel":
        """One step up, saturating at HIGH."""
        return _INTENSITY_ORDER[min(self.rank + 1, len(_INTENSITY_ORDER) - 1)]


_INTENSITY_ORDER: tuple[IntensityLevel, ...] = (
    IntensityLevel.LOW,
    IntensityLevel.MEDIUM,
    IntensityLevel.HIGH,
)


@dataclass(frozen=True)
class PlanRequest:
    """Canonical, already-normalized input to the recommendation engine."""

    species: str
    age_years: float
    health: HealthStatus = HealthStatus.HEALTHY
    notes: str = ""


@dataclass(frozen=True)
class Classification:
    """Derived facts about the subject of a plan."""

    category: SubjectCategory
    is_juvenile: bool
    is_senior: bool
    season_hint: str


@dataclass(frozen=True)
class PlanMeta:
    """Echo of the inputs plus computed intensity and season hint."""

    species: str
    age_years: float
    health: HealthStatus
    intensity: IntensityLevel
    season_hint: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "species": self.species,
            "ageYears": self.age_years,
            "health": self.health.value,
            "intensity": self.intensity.value,
            "seasonHint": self.season_hint,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlanMeta":
        return cls(
            species=data["species"],
            age_years=float(data["ageYears"]),
            health=HealthStatus(data["health"]),
            intensity=IntensityLevel(data["intensity"]),
            season_hint=data["seasonHint"],
        )


@dataclass(frozen=True)
class Plan:
    """Daily care plan. Immutable once assembled."""

    meta: PlanMeta
    feeding: tuple[str, ...]
    exercise: tuple[str, ...]
    care: tuple[str, ...]
    safety: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Render the wire representation."""
        return {
            "meta": self.meta.to_dict(),
            "feeding": list(self.feeding),
            "exercise": list(self.exercise),
            "care": list(self.care),
            "safety": list(self.safety),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Plan":
        """Parse the wire representation produced by to_dict()."""
        return cls(
            meta=PlanMeta.from_dict(data["meta"]),
            feeding=tuple(data["feeding"]),
            exercise=tuple(data["exercise"]),
            care=tuple(data["care"]),
            safety=tuple(data["safety"]),
        )
