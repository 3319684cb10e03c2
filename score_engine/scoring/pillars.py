"""Pillar aggregation and the overall current score."""

import logging
from typing import Optional

import numpy as np

from score_engine.models.enums import Confidence, PillarKey, Presentation, StylePreference
from score_engine.models.measurement import AppearanceProfile
from score_engine.models.scoring import PillarScore, TraitScore
from score_engine.scoring.calibration import calibrate_for_quality
from score_engine.scoring.config import ScoringConfig

logger = logging.getLogger(__name__)

PRESENTATION_STYLES = {
    Presentation.MALE_PRESENTING: StylePreference.MASCULINE_LEANING,
    Presentation.FEMALE_PRESENTING: StylePreference.FEMININE_LEANING,
}


def resolve_style_preference(
    presentation_override: Optional[Presentation],
    appearance_profile: Optional[AppearanceProfile],
    config: ScoringConfig,
) -> StylePreference:
    """
    Pick the weight table to use.

    A manual override always wins. An inferred profile is only trusted when
    its confidence reaches the configured threshold; otherwise neutral.
    """
    if presentation_override is not None:
        return PRESENTATION_STYLES[presentation_override]
    if appearance_profile is not None and appearance_profile.confidence >= config.appearance_confidence_threshold:
        return PRESENTATION_STYLES[appearance_profile.presentation]
    return StylePreference.NEUTRAL


def _pillar_confidence(confidences: list[Confidence]) -> Confidence:
    if not confidences:
        return Confidence.LOW
    low_count = sum(1 for confidence in confidences if confidence is Confidence.LOW)
    if low_count > len(confidences) / 2:
        return Confidence.LOW
    if low_count > 0:
        return Confidence.MEDIUM
    return Confidence.HIGH


def pillar_weights(style: StylePreference, side_provided: bool, config: ScoringConfig) -> dict[PillarKey, float]:
    """Style weights with the side-photo penalty applied, normalized to sum to 1."""
    weights = dict(config.pillar_weights[style])
    if not side_provided:
        for pillar_key in config.side_dependent_pillars:
            if pillar_key in weights:
                weights[pillar_key] *= config.side_missing_weight_penalty

    total = sum(weights.values())
    return {key: value / total for key, value in weights.items()}


def aggregate_pillars(
    trait_scores: list[TraitScore],
    style: StylePreference,
    side_provided: bool,
    config: ScoringConfig,
) -> list[PillarScore]:
    """
    Group damped trait scores into pillars.

    Pillars come out in weight-table order. A pillar with no scored traits
    defaults to the target mean with low confidence.
    """
    members: dict[PillarKey, list[TraitScore]] = {}
    for trait_score in trait_scores:
        pillar_key = config.trait_pillars.get(trait_score.trait_key)
        if pillar_key is None:
            logger.debug("Trait %s has no pillar; not aggregated", trait_score.trait_key.value)
            continue
        members.setdefault(pillar_key, []).append(trait_score)

    weights = pillar_weights(style, side_provided, config)
    pillars = []
    for pillar_key, weight in weights.items():
        pillar_traits = members.get(pillar_key, [])
        if pillar_traits:
            score = float(np.mean([trait.damped_score for trait in pillar_traits]))
        else:
            score = config.target_mean
        pillars.append(
            PillarScore(
                pillar_key=pillar_key,
                score=score,
                weight=weight,
                confidence=_pillar_confidence([trait.confidence for trait in pillar_traits]),
                contributing_trait_keys=[trait.trait_key for trait in pillar_traits],
            )
        )
    return pillars


def compute_overall_score(pillars: list[PillarScore], quality: float, config: ScoringConfig) -> float:
    """Weighted mean of pillar scores, calibrated against photo quality."""
    if not pillars:
        return config.target_mean
    scores = np.array([pillar.score for pillar in pillars])
    weights = np.array([pillar.weight for pillar in pillars])
    if weights.sum() <= 0:
        weighted = float(np.mean(scores))
    else:
        weighted = float(np.average(scores, weights=weights))
    return calibrate_for_quality(weighted, quality, config)


def overall_confidence(pillars: list[PillarScore], quality: float, config: ScoringConfig) -> Confidence:
    low_pillars = sum(1 for pillar in pillars if pillar.confidence is Confidence.LOW)
    if quality < config.heavy_damping_quality or low_pillars >= 2:
        return Confidence.LOW
    if quality < config.no_damping_quality or low_pillars >= 1:
        return Confidence.MEDIUM
    return Confidence.HIGH


def summarize(score: float, config: ScoringConfig) -> str:
    for min_score, sentence in config.summary_tiers:
        if score >= min_score:
            return sentence
    return config.summary_floor
