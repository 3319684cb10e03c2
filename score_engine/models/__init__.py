"""Models package for the Aesthetic Score Engine.

This package organizes models by domain:
- enums: closed vocabularies (traits, pillars, levers, issues, ...)
- measurement: inbound ratios, symmetry, appearance profile, trait overrides
- quality: capture signals and photo quality assessment
- scoring: scoring request and every result record
"""

from score_engine.models.enums import (
    BandStatus,
    ClothingFit,
    Confidence,
    FeatureKey,
    IssueKind,
    LeverKey,
    PillarKey,
    Presentation,
    StylePreference,
    Timeline,
    TraitKey,
    Variant,
)
from score_engine.models.measurement import (
    AppearanceProfile,
    Measurements,
    RatioMeasurement,
    SymmetryScore,
    TraitOverride,
)
from score_engine.models.quality import (
    BodyCaptureSignals,
    FaceCaptureSignals,
    PhotoQualityAssessment,
)
from score_engine.models.scoring import (
    FeatureBreakdown,
    HarmonyComponent,
    HarmonyIndex,
    OverallScore,
    PillarScore,
    PotentialRange,
    RatioSignal,
    ScoringOutput,
    ScoringRequest,
    TopLever,
    TraitScore,
)

__all__ = [
    # Enums
    "BandStatus",
    "ClothingFit",
    "Confidence",
    "FeatureKey",
    "IssueKind",
    "LeverKey",
    "PillarKey",
    "Presentation",
    "StylePreference",
    "Timeline",
    "TraitKey",
    "Variant",
    # Measurements
    "AppearanceProfile",
    "Measurements",
    "RatioMeasurement",
    "SymmetryScore",
    "TraitOverride",
    # Quality
    "BodyCaptureSignals",
    "FaceCaptureSignals",
    "PhotoQualityAssessment",
    # Scoring
    "FeatureBreakdown",
    "HarmonyComponent",
    "HarmonyIndex",
    "OverallScore",
    "PillarScore",
    "PotentialRange",
    "RatioSignal",
    "ScoringOutput",
    "ScoringRequest",
    "TopLever",
    "TraitScore",
]
