"""Scoring configuration tables for the face and body variants.

Each variant is one immutable ``ScoringConfig`` holding every table the
pipeline reads: confidence factors, quality damping tiers, population
reference statistics, the trait -> pillar map, style-dependent pillar
weights, lever definitions, harmony bands and feature groupings.

Different presentations weight pillars differently:
- Neutral: balanced default, also used when the appearance profile is not trusted
- Masculine-leaning: structure weighs more
- Feminine-leaning: features and presentation weigh more
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Annotated, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer, model_validator

from score_engine import constants
from score_engine.models.enums import (
    Confidence,
    FeatureKey,
    LeverKey,
    PillarKey,
    StylePreference,
    Timeline,
    TraitKey,
    Variant,
)

_FROZEN = {"frozen": True}

MapT = TypeVar("MapT")


def _freeze(value):
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value


def _thaw(value):
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    return value


# Nested mappings are wrapped read-only; dumps give back plain dicts.
ReadOnlyMap = Annotated[MapT, AfterValidator(_freeze), PlainSerializer(_thaw)]


class ReferenceStat(BaseModel):
    """Population mean/std of a ratio for one presentation."""

    mean: float
    std: float = Field(..., ge=0.0)

    model_config = _FROZEN


class LeverDefinition(BaseModel):
    """Static improvement lever. Not derived per request."""

    lever_key: LeverKey
    label: str
    min_delta: float = Field(..., ge=0.0)
    max_delta: float = Field(..., ge=0.0)
    timeline: Timeline
    related_trait_keys: tuple[TraitKey, ...] = ()
    actions: tuple[str, ...] = ()
    side_dependent: bool = False

    model_config = _FROZEN

    @model_validator(mode="after")
    def ensure_delta_ordered(self) -> "LeverDefinition":
        if self.min_delta > self.max_delta:
            raise ValueError(f"{self.lever_key.value}: min_delta must be <= max_delta")
        return self


class HarmonyBand(BaseModel):
    """One good/ok/off proportion check of the harmony index."""

    component_key: str
    label: str
    trait_keys: tuple[TraitKey, ...] = Field(..., min_length=1)
    ideal_min: float
    ideal_max: float
    center: float
    ok_tolerance: float = Field(..., ge=0.0)
    good_score: float = Field(7.0, ge=0.0, le=10.0)

    model_config = _FROZEN


class FeatureDefinition(BaseModel):
    feature_key: FeatureKey
    label: str
    trait_keys: tuple[TraitKey, ...] = Field(..., min_length=1)
    side_dependent: bool = False
    summary_high: str
    summary_mid: str
    summary_low: str

    model_config = _FROZEN


class ScoringConfig(BaseModel):
    """Every table one scoring variant needs. Immutable once built."""

    variant: Variant
    target_mean: float = constants.TARGET_MEAN
    score_min: float = constants.SCORE_MIN
    score_max: float = constants.SCORE_MAX

    # Calibration
    confidence_factors: ReadOnlyMap[dict[Confidence, float]]
    quality_tiers: tuple[tuple[float, float], ...] = Field(
        ..., min_length=1, description="(quality_below, factor) pairs in ascending threshold order."
    )

    # Photo quality
    quality_block_threshold: float

    # Traits & pillars
    reference_stats: ReadOnlyMap[dict[TraitKey, dict[StylePreference, ReferenceStat]]]
    trait_pillars: ReadOnlyMap[dict[TraitKey, PillarKey]]
    side_dependent_traits: frozenset[TraitKey] = frozenset()
    pillar_weights: ReadOnlyMap[dict[StylePreference, dict[PillarKey, float]]]
    side_dependent_pillars: frozenset[PillarKey] = frozenset()
    side_missing_weight_penalty: float = constants.SIDE_MISSING_WEIGHT_PENALTY
    appearance_confidence_threshold: float = constants.APPEARANCE_CONFIDENCE_THRESHOLD

    # Levers & potential
    levers: tuple[LeverDefinition, ...]
    baseline_boosts: ReadOnlyMap[dict[LeverKey, tuple[float, str]]] = Field(
        default_factory=dict,
        validate_default=True,
        description="Impact always added to a lever, with the reason shown to the user.",
    )
    photo_lever: Optional[LeverKey] = LeverKey.PHOTO_OPTIMIZATION
    photo_lever_boost: float = constants.PHOTO_LEVER_QUALITY_BOOST
    side_missing_lever_penalty: float = constants.SIDE_MISSING_LEVER_PENALTY
    max_top_levers: int = Field(constants.MAX_TOP_LEVERS, ge=0, le=3)
    low_quality_delta_below: float = constants.QUALITY_MEDIUM_DAMPEN_BELOW
    low_quality_delta_scale: float = constants.LOW_QUALITY_DELTA_SCALE
    max_total_delta: float = constants.MAX_TOTAL_DELTA
    potential_min_scale: float = constants.POTENTIAL_MIN_SCALE
    potential_max_scale: float = constants.POTENTIAL_MAX_SCALE
    potential_min_cap: float = constants.POTENTIAL_MIN_CAP
    potential_max_cap: float = constants.POTENTIAL_MAX_CAP

    # Harmony
    harmony_bands: tuple[HarmonyBand, ...] = ()
    symmetry_component: str = "facial_symmetry"
    golden_ratio_trait: Optional[TraitKey] = None

    # Features & summaries
    features: tuple[FeatureDefinition, ...] = ()
    summary_tiers: tuple[tuple[float, str], ...] = Field(
        ..., description="(min_score, sentence) pairs in descending threshold order."
    )
    summary_floor: str

    model_config = _FROZEN

    @model_validator(mode="after")
    def ensure_tables_consistent(self) -> "ScoringConfig":
        """Every referenced trait must map to a pillar, every pillar must be weighted."""
        pillars = set(self.trait_pillars.values())
        for style in StylePreference:
            weights = self.pillar_weights.get(style)
            if weights is None:
                raise ValueError(f"missing pillar weights for style '{style.value}'")
            if set(weights) != pillars:
                raise ValueError(f"pillar weights for '{style.value}' do not cover {sorted(p.value for p in pillars)}")
            if sum(weights.values()) <= 0:
                raise ValueError(f"pillar weights for '{style.value}' sum to zero")

        referenced: set[TraitKey] = set(self.reference_stats) | set(self.side_dependent_traits)
        for lever in self.levers:
            referenced.update(lever.related_trait_keys)
        for feature in self.features:
            referenced.update(feature.trait_keys)
        unmapped = sorted(key.value for key in referenced if key not in self.trait_pillars)
        if unmapped:
            raise ValueError(f"traits without a pillar: {unmapped}")

        for trait, by_style in self.reference_stats.items():
            missing = [s.value for s in StylePreference if s not in by_style]
            if missing:
                raise ValueError(f"reference stats for '{trait.value}' missing styles {missing}")

        lever_keys = [lever.lever_key for lever in self.levers]
        if len(set(lever_keys)) != len(lever_keys):
            raise ValueError("duplicate lever definitions")
        boosted = set(self.baseline_boosts)
        if self.photo_lever is not None:
            boosted.add(self.photo_lever)
        unknown = sorted(key.value for key in boosted if key not in lever_keys)
        if unknown:
            raise ValueError(f"boosts reference undefined levers: {unknown}")

        if set(self.confidence_factors) != set(Confidence):
            raise ValueError("confidence_factors must cover low, medium and high")
        thresholds = [threshold for threshold, _ in self.quality_tiers]
        if thresholds != sorted(thresholds):
            raise ValueError("quality_tiers must be in ascending threshold order")
        return self

    @property
    def no_damping_quality(self) -> float:
        """Quality at or above which no quality damping applies."""
        return self.quality_tiers[-1][0]

    @property
    def heavy_damping_quality(self) -> float:
        """Quality below which reported confidence drops to low."""
        return self.quality_tiers[0][0]


# ============================================================================
# SHARED TABLES
# ============================================================================

CONFIDENCE_FACTORS = {
    Confidence.HIGH: constants.CONFIDENCE_FACTOR_HIGH,
    Confidence.MEDIUM: constants.CONFIDENCE_FACTOR_MEDIUM,
    Confidence.LOW: constants.CONFIDENCE_FACTOR_LOW,
}

QUALITY_TIERS = (
    (constants.QUALITY_HEAVY_DAMPEN_BELOW, constants.QUALITY_FACTOR_HEAVY),
    (constants.QUALITY_MEDIUM_DAMPEN_BELOW, constants.QUALITY_FACTOR_MEDIUM),
    (constants.QUALITY_LIGHT_DAMPEN_BELOW, constants.QUALITY_FACTOR_LIGHT),
)


def _stats(male: tuple[float, float], female: tuple[float, float]) -> dict[StylePreference, ReferenceStat]:
    """Build per-style stats; neutral is the midpoint of both presentations."""
    return {
        StylePreference.MASCULINE_LEANING: ReferenceStat(mean=male[0], std=male[1]),
        StylePreference.FEMININE_LEANING: ReferenceStat(mean=female[0], std=female[1]),
        StylePreference.NEUTRAL: ReferenceStat(
            mean=(male[0] + female[0]) / 2, std=(male[1] + female[1]) / 2
        ),
    }


# ============================================================================
# FACE
# ============================================================================

FACE_REFERENCE_STATS = {
    TraitKey.EYE_SPACING_RATIO: _stats((0.32, 0.03), (0.31, 0.03)),
    TraitKey.NOSE_WIDTH_RATIO: _stats((0.26, 0.025), (0.24, 0.025)),
    TraitKey.MOUTH_WIDTH_RATIO: _stats((0.42, 0.035), (0.40, 0.035)),
    TraitKey.JAW_TO_FACE_WIDTH_RATIO: _stats((0.78, 0.05), (0.72, 0.05)),
    TraitKey.JAW_TO_CHEEK_RATIO: _stats((0.84, 0.05), (0.80, 0.05)),
    TraitKey.FACE_WIDTH_TO_HEIGHT: _stats((0.68, 0.05), (0.66, 0.05)),
}

FACE_TRAIT_PILLARS = {
    TraitKey.FACE_WIDTH_TO_HEIGHT: PillarKey.STRUCTURE,
    TraitKey.JAW_TO_FACE_WIDTH_RATIO: PillarKey.STRUCTURE,
    TraitKey.JAW_TO_CHEEK_RATIO: PillarKey.STRUCTURE,
    TraitKey.JAW_DEFINITION: PillarKey.STRUCTURE,
    TraitKey.CHIN_PROJECTION: PillarKey.STRUCTURE,
    TraitKey.EYE_SPACING_RATIO: PillarKey.FEATURES,
    TraitKey.NOSE_WIDTH_RATIO: PillarKey.FEATURES,
    TraitKey.MOUTH_WIDTH_RATIO: PillarKey.FEATURES,
    TraitKey.BROW_SHAPE: PillarKey.FEATURES,
    TraitKey.SKIN_QUALITY: PillarKey.PRESENTATION,
    TraitKey.UNDER_EYE: PillarKey.PRESENTATION,
    TraitKey.HAIR_FRAMING: PillarKey.PRESENTATION,
    TraitKey.SYMMETRY: PillarKey.HARMONY,
}

FACE_PILLAR_WEIGHTS = {
    StylePreference.NEUTRAL: {
        PillarKey.STRUCTURE: 0.35,
        PillarKey.FEATURES: 0.30,
        PillarKey.PRESENTATION: 0.20,
        PillarKey.HARMONY: 0.15,
    },
    StylePreference.MASCULINE_LEANING: {
        PillarKey.STRUCTURE: 0.42,  # ⬆️ Jaw and facial structure
        PillarKey.FEATURES: 0.28,
        PillarKey.PRESENTATION: 0.17,
        PillarKey.HARMONY: 0.13,
    },
    StylePreference.FEMININE_LEANING: {
        PillarKey.STRUCTURE: 0.30,
        PillarKey.FEATURES: 0.35,  # ⬆️ Eyes, lips, brows
        PillarKey.PRESENTATION: 0.22,
        PillarKey.HARMONY: 0.13,
    },
}

FACE_LEVERS = (
    LeverDefinition(
        lever_key=LeverKey.HAIR_STYLING,
        label="Hair Styling",
        min_delta=0.2,
        max_delta=0.8,
        timeline=Timeline.TODAY,
        related_trait_keys=(TraitKey.FACE_WIDTH_TO_HEIGHT, TraitKey.HAIR_FRAMING),
        actions=(
            "Get a cut suited to your face shape",
            "Add volume where needed",
            "Frame face appropriately",
        ),
    ),
    LeverDefinition(
        lever_key=LeverKey.SKIN_ROUTINE,
        label="Skincare Routine",
        min_delta=0.2,
        max_delta=1.0,
        timeline=Timeline.WEEKS_2_4,
        related_trait_keys=(TraitKey.SKIN_QUALITY,),
        actions=("AM: Cleanser, moisturizer, SPF", "PM: Cleanser, moisturizer", "Stay hydrated"),
    ),
    LeverDefinition(
        lever_key=LeverKey.BROW_GROOMING,
        label="Brow Grooming",
        min_delta=0.1,
        max_delta=0.5,
        timeline=Timeline.TODAY,
        related_trait_keys=(TraitKey.EYE_SPACING_RATIO, TraitKey.BROW_SHAPE),
        actions=("Clean up stray hairs", "Define natural shape", "Avoid over-plucking"),
    ),
    LeverDefinition(
        lever_key=LeverKey.UNDER_EYE_CARE,
        label="Under-Eye Care",
        min_delta=0.1,
        max_delta=0.6,
        timeline=Timeline.WEEKS_2_4,
        related_trait_keys=(TraitKey.UNDER_EYE,),
        actions=(
            "7-9 hours consistent sleep",
            "Reduce sodium",
            "Stay hydrated",
            "Cold compress for puffiness",
        ),
    ),
    LeverDefinition(
        lever_key=LeverKey.POSTURE_CORRECTION,
        label="Posture Improvement",
        min_delta=0.1,
        max_delta=0.5,
        timeline=Timeline.WEEKS_2_4,
        related_trait_keys=(
            TraitKey.SYMMETRY,
            TraitKey.JAW_TO_FACE_WIDTH_RATIO,
            TraitKey.JAW_DEFINITION,
            TraitKey.CHIN_PROJECTION,
        ),
        actions=(
            "Chin tucks: 2 sets of 10 daily",
            "Reduce forward head position",
            "Ergonomic workspace",
        ),
        side_dependent=True,
    ),
    LeverDefinition(
        lever_key=LeverKey.PHOTO_OPTIMIZATION,
        label="Photo Technique",
        min_delta=0.1,
        max_delta=0.4,
        timeline=Timeline.TODAY,
        related_trait_keys=(
            TraitKey.SYMMETRY,
            TraitKey.EYE_SPACING_RATIO,
            TraitKey.NOSE_WIDTH_RATIO,
        ),
        actions=("Face natural light source", "Use back camera", "Step back to reduce distortion"),
    ),
    LeverDefinition(
        lever_key=LeverKey.FACIAL_HAIR,
        label="Facial Hair Styling",
        min_delta=0.1,
        max_delta=0.5,
        timeline=Timeline.TODAY,
        related_trait_keys=(
            TraitKey.JAW_TO_FACE_WIDTH_RATIO,
            TraitKey.JAW_TO_CHEEK_RATIO,
            TraitKey.CHIN_PROJECTION,
        ),
        actions=("Style to complement face shape", "Maintain clean lines", "Regular trimming"),
    ),
    LeverDefinition(
        lever_key=LeverKey.LIP_CARE,
        label="Lip Care",
        min_delta=0.05,
        max_delta=0.2,
        timeline=Timeline.TODAY,
        related_trait_keys=(TraitKey.MOUTH_WIDTH_RATIO,),
        actions=("Keep lips hydrated", "Use lip balm regularly"),
    ),
    LeverDefinition(
        lever_key=LeverKey.BODY_COMPOSITION,
        label="Body Composition",
        min_delta=0.2,
        max_delta=0.8,
        timeline=Timeline.WEEKS_8_12,
        related_trait_keys=(TraitKey.JAW_TO_FACE_WIDTH_RATIO, TraitKey.JAW_DEFINITION),
        actions=(
            "Caloric awareness",
            "Regular exercise",
            "Adequate protein",
            "Patience - 8-12 weeks minimum",
        ),
    ),
)

FACE_HARMONY_BANDS = (
    HarmonyBand(
        component_key="eye_spacing",
        label="Eye Spacing",
        trait_keys=(TraitKey.EYE_SPACING_RATIO,),
        ideal_min=0.28,
        ideal_max=0.35,
        center=0.315,
        ok_tolerance=0.05,
        good_score=7.5,
    ),
    HarmonyBand(
        component_key="nose_width",
        label="Nose Width",
        trait_keys=(TraitKey.NOSE_WIDTH_RATIO,),
        ideal_min=0.22,
        ideal_max=0.30,
        center=0.26,
        ok_tolerance=0.04,
    ),
    HarmonyBand(
        component_key="mouth_width",
        label="Mouth Width",
        trait_keys=(TraitKey.MOUTH_WIDTH_RATIO,),
        ideal_min=0.38,
        ideal_max=0.50,
        center=0.44,
        ok_tolerance=0.06,
    ),
    HarmonyBand(
        component_key="jaw_ratio",
        label="Jaw Proportion",
        trait_keys=(TraitKey.JAW_TO_FACE_WIDTH_RATIO, TraitKey.JAW_TO_CHEEK_RATIO),
        ideal_min=0.75,
        ideal_max=0.90,
        center=0.82,
        ok_tolerance=0.08,
    ),
)

FACE_FEATURES = (
    FeatureDefinition(
        feature_key=FeatureKey.EYES,
        label="Eyes",
        trait_keys=(TraitKey.EYE_SPACING_RATIO,),
        summary_high="Well-proportioned eyes with good spacing and shape.",
        summary_mid="Average eye proportions with minor variations.",
        summary_low="Eye measurements outside typical ranges.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.BROWS,
        label="Brows",
        trait_keys=(TraitKey.BROW_SHAPE,),
        summary_high="Well-groomed brows that complement your face.",
        summary_mid="Average brow shape and positioning.",
        summary_low="Brows could benefit from grooming and shaping.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.NOSE,
        label="Nose",
        trait_keys=(TraitKey.NOSE_WIDTH_RATIO,),
        summary_high="Nose proportions harmonize well with facial width.",
        summary_mid="Average nose proportions.",
        summary_low="Nose measurements slightly outside ideal range.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.LIPS,
        label="Lips",
        trait_keys=(TraitKey.MOUTH_WIDTH_RATIO,),
        summary_high="Well-proportioned lips relative to face.",
        summary_mid="Average lip proportions.",
        summary_low="Lip proportions could be enhanced with care.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.JAWLINE,
        label="Jawline",
        trait_keys=(
            TraitKey.JAW_TO_FACE_WIDTH_RATIO,
            TraitKey.JAW_TO_CHEEK_RATIO,
            TraitKey.JAW_DEFINITION,
            TraitKey.CHIN_PROJECTION,
        ),
        side_dependent=True,
        summary_high="Strong jawline definition.",
        summary_mid="Average jaw proportions.",
        summary_low="Jaw definition assessment limited; try side photo.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.SKIN,
        label="Skin",
        trait_keys=(TraitKey.SKIN_QUALITY, TraitKey.UNDER_EYE),
        summary_high="Skin appears healthy and clear.",
        summary_mid="Average skin presentation.",
        summary_low="Skin could benefit from a consistent routine.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.HAIR,
        label="Hair",
        trait_keys=(TraitKey.HAIR_FRAMING,),
        summary_high="Hair complements face shape well.",
        summary_mid="Average hair-face harmony.",
        summary_low="Hair styling could better complement your face.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.HARMONY,
        label="Harmony",
        trait_keys=(TraitKey.SYMMETRY, TraitKey.FACE_WIDTH_TO_HEIGHT),
        summary_high="Excellent facial harmony and symmetry.",
        summary_mid="Average facial harmony.",
        summary_low="Some asymmetry detected; may be photo angle.",
    ),
)

FACE_SUMMARY_TIERS = (
    (7.5, "Well above average facial harmony with strong features."),
    (6.5, "Above average with good proportions and clear strengths."),
    (5.5, "Average proportions with room for enhancement through presentation."),
    (4.5, "Slightly below average with identifiable areas for improvement."),
)
FACE_SUMMARY_FLOOR = "Below average with multiple opportunities for presentation improvements."


# ============================================================================
# BODY
# ============================================================================

BODY_REFERENCE_STATS = {
    TraitKey.SHOULDER_TO_WAIST: _stats((1.52, 0.10), (1.42, 0.09)),
    TraitKey.WAIST_TO_HIP: _stats((0.90, 0.05), (0.70, 0.05)),
    TraitKey.CHEST_TO_WAIST: _stats((1.22, 0.07), (1.18, 0.07)),
    TraitKey.HIP_TO_WAIST: _stats((1.10, 0.08), (1.35, 0.10)),
    TraitKey.LEG_TO_TORSO: _stats((1.05, 0.08), (1.08, 0.08)),
    TraitKey.ARM_LENGTH_PROPORTIONALITY: _stats((1.00, 0.05), (1.00, 0.05)),
    TraitKey.SHOULDER_TO_HEAD_WIDTH: _stats((2.75, 0.20), (2.55, 0.20)),
}

BODY_TRAIT_PILLARS = {
    TraitKey.SHOULDER_TO_WAIST: PillarKey.PROPORTIONS,
    TraitKey.WAIST_TO_HIP: PillarKey.PROPORTIONS,
    TraitKey.CHEST_TO_WAIST: PillarKey.PROPORTIONS,
    TraitKey.HIP_TO_WAIST: PillarKey.PROPORTIONS,
    TraitKey.LEG_TO_TORSO: PillarKey.PROPORTIONS,
    TraitKey.ARM_LENGTH_PROPORTIONALITY: PillarKey.PROPORTIONS,
    TraitKey.SHOULDER_TO_HEAD_WIDTH: PillarKey.PROPORTIONS,
    TraitKey.BODY_COMPOSITION: PillarKey.COMPOSITION,
    TraitKey.MUSCLE_BALANCE: PillarKey.COMPOSITION,
    TraitKey.POSTURE: PillarKey.POSTURE,
    TraitKey.SYMMETRY: PillarKey.SYMMETRY,
}

BODY_PILLAR_WEIGHTS = {
    StylePreference.NEUTRAL: {
        PillarKey.PROPORTIONS: 0.35,
        PillarKey.COMPOSITION: 0.30,
        PillarKey.POSTURE: 0.20,
        PillarKey.SYMMETRY: 0.15,
    },
    StylePreference.MASCULINE_LEANING: {
        PillarKey.PROPORTIONS: 0.40,  # ⬆️ V-taper
        PillarKey.COMPOSITION: 0.30,
        PillarKey.POSTURE: 0.18,
        PillarKey.SYMMETRY: 0.12,
    },
    StylePreference.FEMININE_LEANING: {
        PillarKey.PROPORTIONS: 0.33,
        PillarKey.COMPOSITION: 0.32,  # ⬆️ Waist definition
        PillarKey.POSTURE: 0.20,
        PillarKey.SYMMETRY: 0.15,
    },
}

BODY_LEVERS = (
    LeverDefinition(
        lever_key=LeverKey.BODY_COMPOSITION,
        label="Body Composition",
        min_delta=0.4,
        max_delta=1.2,
        timeline=Timeline.WEEKS_10_14,
        related_trait_keys=(
            TraitKey.BODY_COMPOSITION,
            TraitKey.WAIST_TO_HIP,
            TraitKey.SHOULDER_TO_WAIST,
        ),
        actions=(
            "Moderate caloric deficit (300-500 kcal)",
            "Protein at 0.7-1g per lb bodyweight",
            "Strength training 3-4x per week",
        ),
    ),
    LeverDefinition(
        lever_key=LeverKey.V_TAPER_TRAINING,
        label="V-Taper Development",
        min_delta=0.3,
        max_delta=1.0,
        timeline=Timeline.WEEKS_8_12,
        related_trait_keys=(
            TraitKey.SHOULDER_TO_WAIST,
            TraitKey.CHEST_TO_WAIST,
            TraitKey.SHOULDER_TO_HEAD_WIDTH,
        ),
        actions=("Lateral raises 3x per week", "Pull-ups or lat pulldowns", "Overhead pressing"),
    ),
    LeverDefinition(
        lever_key=LeverKey.LOWER_BODY_TRAINING,
        label="Lower Body Development",
        min_delta=0.2,
        max_delta=0.6,
        timeline=Timeline.WEEKS_8_12,
        related_trait_keys=(TraitKey.HIP_TO_WAIST, TraitKey.MUSCLE_BALANCE),
        actions=("Hip thrusts and squats 2x per week", "Progressive overload", "Balance upper and lower volume"),
    ),
    LeverDefinition(
        lever_key=LeverKey.POSTURE_CORRECTION,
        label="Posture Correction",
        min_delta=0.2,
        max_delta=0.5,
        timeline=Timeline.WEEKS_4_8,
        related_trait_keys=(TraitKey.POSTURE, TraitKey.SYMMETRY),
        actions=("Chin tucks and wall angels daily", "Strengthen upper back", "Stretch hip flexors"),
        side_dependent=True,
    ),
    LeverDefinition(
        lever_key=LeverKey.STYLE_TAILORING,
        label="Fit & Tailoring",
        min_delta=0.2,
        max_delta=0.6,
        timeline=Timeline.TODAY,
        related_trait_keys=(TraitKey.LEG_TO_TORSO, TraitKey.ARM_LENGTH_PROPORTIONALITY),
        actions=("Wear fitted cuts at the shoulder", "Match rise to torso length", "Tailor sleeve and hem length"),
    ),
    LeverDefinition(
        lever_key=LeverKey.PHOTO_OPTIMIZATION,
        label="Photo Technique",
        min_delta=0.1,
        max_delta=0.4,
        timeline=Timeline.TODAY,
        related_trait_keys=(TraitKey.SYMMETRY,),
        actions=("Shoot at hip height", "Stand square to the camera", "Avoid mirror selfies"),
    ),
)

BODY_HARMONY_BANDS = (
    HarmonyBand(
        component_key="shoulder_waist",
        label="Shoulder to Waist",
        trait_keys=(TraitKey.SHOULDER_TO_WAIST,),
        ideal_min=1.35,
        ideal_max=1.60,
        center=1.47,
        ok_tolerance=0.15,
    ),
    HarmonyBand(
        component_key="waist_hip",
        label="Waist to Hip",
        trait_keys=(TraitKey.WAIST_TO_HIP,),
        ideal_min=0.65,
        ideal_max=0.95,
        center=0.80,
        ok_tolerance=0.20,
    ),
    HarmonyBand(
        component_key="leg_torso",
        label="Leg to Torso",
        trait_keys=(TraitKey.LEG_TO_TORSO,),
        ideal_min=1.0,
        ideal_max=1.15,
        center=1.07,
        ok_tolerance=0.12,
    ),
    HarmonyBand(
        component_key="shoulder_head",
        label="Shoulder to Head Width",
        trait_keys=(TraitKey.SHOULDER_TO_HEAD_WIDTH,),
        ideal_min=2.3,
        ideal_max=3.0,
        center=2.65,
        ok_tolerance=0.5,
    ),
)

BODY_FEATURES = (
    FeatureDefinition(
        feature_key=FeatureKey.V_TAPER,
        label="V-Taper / Silhouette",
        trait_keys=(TraitKey.SHOULDER_TO_WAIST, TraitKey.CHEST_TO_WAIST, TraitKey.SHOULDER_TO_HEAD_WIDTH),
        summary_high="Strong shoulder-to-waist taper.",
        summary_mid="Average upper body taper.",
        summary_low="Shoulder width and waist offer the most room to build a V shape.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.WAIST_DEFINITION,
        label="Waist Definition",
        trait_keys=(TraitKey.WAIST_TO_HIP,),
        summary_high="Well-defined waist relative to hips.",
        summary_mid="Average waist definition.",
        summary_low="Waist definition could improve with composition work.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.HIP_PROPORTION,
        label="Hip Proportion",
        trait_keys=(TraitKey.HIP_TO_WAIST,),
        summary_high="Hips balance the waist and shoulders well.",
        summary_mid="Average hip proportion.",
        summary_low="Hip proportion sits outside the typical range.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.LEG_PROPORTION,
        label="Leg Proportion",
        trait_keys=(TraitKey.LEG_TO_TORSO, TraitKey.ARM_LENGTH_PROPORTIONALITY),
        summary_high="Long, balanced limb proportions.",
        summary_mid="Average limb proportions.",
        summary_low="Tailoring can balance limb-to-torso proportions.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.POSTURE,
        label="Posture & Alignment",
        trait_keys=(TraitKey.POSTURE,),
        side_dependent=True,
        summary_high="Upright, well-aligned posture.",
        summary_mid="Average posture with minor deviations.",
        summary_low="Posture deviations detected; a side photo refines this.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.SYMMETRY,
        label="Body Symmetry",
        trait_keys=(TraitKey.SYMMETRY,),
        summary_high="Good left-right balance.",
        summary_mid="Normal left-right variation.",
        summary_low="Some asymmetry detected; may be stance or angle.",
    ),
    FeatureDefinition(
        feature_key=FeatureKey.BODY_COMPOSITION,
        label="Body Composition",
        trait_keys=(TraitKey.BODY_COMPOSITION, TraitKey.MUSCLE_BALANCE),
        summary_high="Lean with visible muscle definition.",
        summary_mid="Average composition and definition.",
        summary_low="Composition offers the largest room for change.",
    ),
)

BODY_SUMMARY_TIERS = (
    (8.0, "Well above average physique (top 15%)."),
    (7.0, "Above average physique (top 30%)."),
    (6.0, "Slightly above average with clear strengths."),
    (5.0, "Average physique with room for targeted improvement."),
    (4.0, "Slightly below average with identifiable areas to build."),
)
BODY_SUMMARY_FLOOR = "Below average with several high-impact opportunities."


def default_face_config() -> ScoringConfig:
    """Build the face variant configuration."""
    return ScoringConfig(
        variant=Variant.FACE,
        confidence_factors=CONFIDENCE_FACTORS,
        quality_tiers=QUALITY_TIERS,
        quality_block_threshold=constants.FACE_QUALITY_BLOCK_BELOW,
        reference_stats=FACE_REFERENCE_STATS,
        trait_pillars=FACE_TRAIT_PILLARS,
        side_dependent_traits=frozenset({TraitKey.JAW_DEFINITION, TraitKey.CHIN_PROJECTION}),
        pillar_weights=FACE_PILLAR_WEIGHTS,
        side_dependent_pillars=frozenset({PillarKey.STRUCTURE}),
        levers=FACE_LEVERS,
        baseline_boosts={
            LeverKey.HAIR_STYLING: (1.5, "High-impact quick change"),
            LeverKey.SKIN_ROUTINE: (1.0, "Improves overall presentation"),
        },
        harmony_bands=FACE_HARMONY_BANDS,
        golden_ratio_trait=TraitKey.FACE_WIDTH_TO_HEIGHT,
        features=FACE_FEATURES,
        summary_tiers=FACE_SUMMARY_TIERS,
        summary_floor=FACE_SUMMARY_FLOOR,
    )


def default_body_config() -> ScoringConfig:
    """Build the body variant configuration."""
    return ScoringConfig(
        variant=Variant.BODY,
        confidence_factors=CONFIDENCE_FACTORS,
        quality_tiers=QUALITY_TIERS,
        quality_block_threshold=constants.BODY_QUALITY_BLOCK_BELOW,
        reference_stats=BODY_REFERENCE_STATS,
        trait_pillars=BODY_TRAIT_PILLARS,
        side_dependent_traits=frozenset({TraitKey.POSTURE}),
        pillar_weights=BODY_PILLAR_WEIGHTS,
        side_dependent_pillars=frozenset({PillarKey.POSTURE}),
        levers=BODY_LEVERS,
        baseline_boosts={
            LeverKey.STYLE_TAILORING: (1.5, "Fit changes how proportions read immediately"),
            LeverKey.BODY_COMPOSITION: (1.0, "Largest long-term lever for physique"),
        },
        harmony_bands=BODY_HARMONY_BANDS,
        symmetry_component="body_symmetry",
        golden_ratio_trait=None,
        features=BODY_FEATURES,
        summary_tiers=BODY_SUMMARY_TIERS,
        summary_floor=BODY_SUMMARY_FLOOR,
    )


@lru_cache(maxsize=None)
def get_config(variant: Variant) -> ScoringConfig:
    """Process-wide, read-only configuration for ``variant``."""
    if variant is Variant.FACE:
        return default_face_config()
    return default_body_config()
