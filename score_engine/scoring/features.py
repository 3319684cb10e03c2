"""Per-feature breakdown grouped from trait scores."""

import numpy as np

from score_engine import constants
from score_engine.models.enums import Confidence
from score_engine.models.scoring import FeatureBreakdown, TraitScore
from score_engine.scoring.calibration import confidence_factor
from score_engine.scoring.config import FeatureDefinition, ScoringConfig


def _feature_confidence(
    feature: FeatureDefinition,
    traits: list[TraitScore],
    quality: float,
    side_provided: bool,
    config: ScoringConfig,
) -> Confidence:
    mean_factor = float(np.mean([confidence_factor(trait.confidence, config) for trait in traits]))
    if mean_factor > constants.FEATURE_CONFIDENCE_HIGH_ABOVE:
        confidence = Confidence.HIGH
    elif mean_factor > constants.FEATURE_CONFIDENCE_MEDIUM_ABOVE:
        confidence = Confidence.MEDIUM
    else:
        confidence = Confidence.LOW

    if confidence is Confidence.HIGH and quality < config.low_quality_delta_below:
        confidence = Confidence.MEDIUM
    if feature.side_dependent and not side_provided:
        confidence = Confidence.LOW
    return confidence


def _summary(feature: FeatureDefinition, rating: float) -> str:
    if rating >= constants.FEATURE_HIGH_AT:
        return feature.summary_high
    if rating >= constants.FEATURE_MID_AT:
        return feature.summary_mid
    return feature.summary_low


def build_feature_breakdowns(
    trait_scores: list[TraitScore],
    quality: float,
    side_provided: bool,
    config: ScoringConfig,
) -> list[FeatureBreakdown]:
    """Rate every configured feature that has at least one scored trait."""
    by_key = {score.trait_key: score for score in trait_scores}
    breakdowns = []

    for feature in config.features:
        traits = [by_key[key] for key in feature.trait_keys if key in by_key]
        if not traits:
            continue
        rating = float(np.mean([trait.damped_score for trait in traits]))
        breakdowns.append(
            FeatureBreakdown(
                feature_key=feature.feature_key,
                label=feature.label,
                rating=round(rating, 1),
                confidence=_feature_confidence(feature, traits, quality, side_provided, config),
                summary=_summary(feature, rating),
                contributing_trait_keys=[trait.trait_key for trait in traits],
            )
        )
    return breakdowns
