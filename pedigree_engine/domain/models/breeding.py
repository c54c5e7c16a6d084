from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from pedigree_engine.domain.models.individual import Individual
from pedigree_engine.domain.value_objects.coi_tier import CoiTier
from pedigree_engine.domain.value_objects.relationship import Relationship
from pedigree_engine.domain.value_objects.warning_level import WarningLevel


@dataclass(frozen=True, slots=True)
class MatchWarning:
    level: WarningLevel
    key: str
    message: str


@dataclass(frozen=True, slots=True)
class PredictedTrait:
    label: str
    probability: float


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    breed: float = 0.0
    age: float = 0.0
    location: float = 0.0
    coi: float = 0.0

    @property
    def total(self) -> float:
        return self.breed + self.age + self.location + self.coi


@dataclass(slots=True)
class BreedingCandidate:
    individual: Individual
    score: float
    coi: float
    tier: CoiTier
    relationship: Relationship
    breakdown: ScoreBreakdown
    warnings: list[MatchWarning] = field(default_factory=list)
    predicted_traits: list[PredictedTrait] | None = None

    @property
    def has_critical(self) -> bool:
        return any(w.level is WarningLevel.CRITICAL for w in self.warnings)

    def sort_key(self) -> tuple[float, float, str]:
        return (-self.score, self.coi, self.individual.id)


@dataclass(frozen=True, slots=True)
class MatchOptions:
    limit: int = 10
    max_coi: float = 0.125
    min_age_years: int = 1
    max_age_years: int = 8
    require_same_breed: bool = True
    max_depth: int = 3
    include_traits: bool = True
    locale: str = "en"
    as_of: date | None = None


@dataclass(slots=True)
class BreedingAnalysis:
    focal: Individual
    status: CoiTier
    candidates: list[BreedingCandidate]
    summary: str
    evaluated: int = 0


@dataclass(slots=True)
class PairAnalysis:
    candidate: BreedingCandidate
    compatible: bool
    recommendation: str
