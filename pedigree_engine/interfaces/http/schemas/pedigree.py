from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from pedigree_engine.config.settings import Settings
from pedigree_engine.domain.models.breeding import MatchOptions
from pedigree_engine.domain.value_objects.ancestry_role import AncestryRole
from pedigree_engine.domain.value_objects.coi_tier import CoiTier
from pedigree_engine.domain.value_objects.ownership_status import OwnershipStatus
from pedigree_engine.domain.value_objects.relationship import Relationship
from pedigree_engine.domain.value_objects.sex import Sex
from pedigree_engine.domain.value_objects.verification_status import VerificationStatus
from pedigree_engine.domain.value_objects.warning_level import WarningLevel


class IndividualResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    sex: Sex
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    color: str | None = None
    location: str | None = None
    verification_status: VerificationStatus
    ownership_status: OwnershipStatus
    available_for_breeding: bool


class AncestryNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    role: AncestryRole
    depth: int
    individual_id: str | None = None
    individual: IndividualResponse | None = None
    flags: list[str] = Field(default_factory=list)
    sire: AncestryNodeResponse | None = None
    dam: AncestryNodeResponse | None = None


AncestryNodeResponse.model_rebuild()


class DiagnosticResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: str
    code: str
    individual_id: str
    message: str


class AncestryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    max_depth: int
    root: AncestryNodeResponse
    diagnostics: list[DiagnosticResponse]


class CoiResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    individual_a: str
    individual_b: str
    max_depth: int
    coefficient: float
    tier: CoiTier
    relationship: Relationship
    shared_ancestors: list[str]
    diagnostics: list[DiagnosticResponse]


class WarningResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: WarningLevel
    key: str
    message: str


class PredictedTraitResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    probability: float


class ScoreBreakdownResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    breed: float
    age: float
    location: float
    coi: float
    total: float


class BreedingCandidateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    individual: IndividualResponse
    score: float
    coi: float
    tier: CoiTier
    relationship: Relationship
    breakdown: ScoreBreakdownResponse
    warnings: list[WarningResponse]
    predicted_traits: list[PredictedTraitResponse] | None = None


class BreedingAnalysisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    focal: IndividualResponse
    status: CoiTier
    summary: str
    evaluated: int
    candidates: list[BreedingCandidateResponse]


class PairAnalysisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    compatible: bool
    recommendation: str
    candidate: BreedingCandidateResponse


class MatchRequest(BaseModel):
    """Options for a match query; omitted fields fall back to server settings."""

    candidate_ids: list[str] | None = Field(
        None, description="Restrict matching to these ids; omit to let the store list candidates"
    )
    limit: int | None = Field(None, ge=1, le=100)
    max_coi: float | None = Field(None, ge=0.0, le=1.0)
    min_age_years: int | None = Field(None, ge=0)
    max_age_years: int | None = Field(None, ge=0)
    require_same_breed: bool = True
    max_depth: int | None = Field(None, ge=1)
    include_traits: bool = True
    locale: str | None = None
    as_of: date | None = None

    def to_options(self, settings: Settings) -> MatchOptions:
        return MatchOptions(
            limit=self.limit if self.limit is not None else settings.match_default_limit,
            max_coi=self.max_coi if self.max_coi is not None else settings.match_max_coi,
            min_age_years=self.min_age_years
            if self.min_age_years is not None
            else settings.match_min_age_years,
            max_age_years=self.max_age_years
            if self.max_age_years is not None
            else settings.match_max_age_years,
            require_same_breed=self.require_same_breed,
            max_depth=self.max_depth if self.max_depth is not None else settings.default_max_depth,
            include_traits=self.include_traits,
            locale=self.locale or settings.default_locale,
            as_of=self.as_of,
        )
