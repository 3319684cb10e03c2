"""Scoring request and result models."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from score_engine.models.enums import (
    BandStatus,
    Confidence,
    FeatureKey,
    LeverKey,
    PillarKey,
    Presentation,
    StylePreference,
    Timeline,
    TraitKey,
    Variant,
)
from score_engine.models.measurement import AppearanceProfile, Measurements, TraitOverride
from score_engine.models.quality import PhotoQualityAssessment


class ScoringRequest(BaseModel):
    """Everything one scoring run consumes."""

    measurements: Measurements
    photo_quality: PhotoQualityAssessment
    side_provided: bool = False
    appearance_profile: Optional[AppearanceProfile] = Field(
        None, description="Inferred presentation; only trusted above the confidence threshold."
    )
    presentation_override: Optional[Presentation] = Field(
        None, description="Explicit user choice, takes precedence over the inferred profile."
    )
    external_overrides: dict[TraitKey, TraitOverride] = Field(
        default_factory=dict,
        description="Trait scores from the external analysis service, used to fill unmeasured traits.",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "measurements": {
                        "ratios": [
                            {
                                "key": "eye_spacing_ratio",
                                "value": 0.31,
                                "ideal_min": 0.28,
                                "ideal_max": 0.35,
                                "confidence": "high",
                            },
                            {
                                "key": "face_width_to_height",
                                "value": 0.66,
                                "ideal_min": 0.62,
                                "ideal_max": 0.72,
                                "confidence": "medium",
                            },
                        ],
                        "symmetry": {"overall": 0.82, "confidence": "medium"},
                    },
                    "photo_quality": {
                        "score": 0.9,
                        "issues": ["side_missing"],
                        "warnings": ["Side photo would improve jaw/chin analysis"],
                        "can_proceed": True,
                    },
                    "side_provided": False,
                    "appearance_profile": {"presentation": "female_presenting", "confidence": 0.8},
                    "external_overrides": {"skin_quality": {"score": 6.0, "confidence": "medium"}},
                }
            ]
        },
    }


class TraitScore(BaseModel):
    trait_key: TraitKey
    raw_score: float = Field(..., ge=0.0, le=10.0)
    damped_score: float = Field(..., ge=0.0, le=10.0)
    confidence: Confidence
    weight: float = Field(1.0, ge=0.0, le=1.0)
    notes: list[str] = Field(default_factory=list)


class PillarScore(BaseModel):
    pillar_key: PillarKey
    score: float = Field(..., ge=0.0, le=10.0)
    weight: float = Field(..., ge=0.0, le=1.0, description="Effective normalized weight.")
    confidence: Confidence
    contributing_trait_keys: list[TraitKey] = Field(default_factory=list)


class TopLever(BaseModel):
    lever_key: LeverKey
    label: str
    delta_min: float = Field(..., ge=0.0)
    delta_max: float = Field(..., ge=0.0)
    timeline: Timeline
    priority: int = Field(..., ge=1, le=3)
    impact: float = Field(..., ge=0.0)
    why: str
    actions: list[str] = Field(default_factory=list)


class PotentialRange(BaseModel):
    min: float = Field(..., ge=0.0, le=10.0)
    max: float = Field(..., ge=0.0, le=10.0)
    assumptions: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def ensure_ordered(self) -> "PotentialRange":
        if self.min > self.max:
            raise ValueError("potential min must be <= max")
        return self


class OverallScore(BaseModel):
    current: float = Field(..., ge=0.0, le=10.0)
    potential: PotentialRange
    confidence: Confidence
    summary: str


class HarmonyComponent(BaseModel):
    score: float = Field(..., ge=0.0, le=10.0)
    deviation_pct: float
    note: str


class RatioSignal(BaseModel):
    component_key: str = Field(..., description="Stable key of the proportion check, e.g. eye_spacing.")
    trait_key: TraitKey
    label: str
    value: float
    band: tuple[float, float]
    status: BandStatus
    confidence: Confidence


class HarmonyIndex(BaseModel):
    score: float = Field(..., ge=0.0, le=10.0)
    confidence: Confidence
    components: dict[str, HarmonyComponent] = Field(default_factory=dict)
    ratio_signals: list[RatioSignal] = Field(default_factory=list)


class FeatureBreakdown(BaseModel):
    feature_key: FeatureKey
    label: str
    rating: float = Field(..., ge=0.0, le=10.0)
    confidence: Confidence
    summary: str
    contributing_trait_keys: list[TraitKey] = Field(default_factory=list)


class ScoringOutput(BaseModel):
    """Response assembled by the scoring pipeline."""

    variant: Variant
    style_preference: StylePreference
    trait_scores: list[TraitScore]
    pillar_scores: list[PillarScore]
    overall: OverallScore
    overall_current: float = Field(..., ge=0.0, le=10.0)
    overall_potential: PotentialRange
    top_levers: list[TopLever] = Field(default_factory=list, max_length=3)
    harmony_index: Optional[HarmonyIndex] = None
    features: list[FeatureBreakdown] = Field(default_factory=list)
    calibration_applied: bool
