"""Calibration toward the population mean.

A single law is used for every score the engine reports: a linear pull
toward the target mean, first by measurement confidence and then by photo
quality. Neither step can move a value away from the mean.
"""

from score_engine.models.enums import Confidence
from score_engine.scoring.config import ScoringConfig


def confidence_factor(confidence: Confidence, config: ScoringConfig) -> float:
    return config.confidence_factors[confidence]


def quality_factor(quality: float, config: ScoringConfig) -> float:
    """Return the quality damping factor; 1.0 means no damping."""
    for below, factor in config.quality_tiers:
        if quality < below:
            return factor
    return 1.0


def _clamp(value: float, config: ScoringConfig) -> float:
    return max(config.score_min, min(config.score_max, value))


def calibrate(
    raw: float,
    confidence: Confidence,
    quality: float,
    config: ScoringConfig,
) -> float:
    """
    Pull ``raw`` toward the target mean by confidence, then by photo quality.

    Args:
        raw: Raw score on the 0-10 scale
        confidence: Confidence of the measurement behind the score
        quality: Photo quality score [0, 1]
        config: Active scoring configuration

    Returns:
        Calibrated score clamped to [0, 10]
    """
    mean = config.target_mean
    damped = mean + (raw - mean) * confidence_factor(confidence, config)
    damped = mean + (damped - mean) * quality_factor(quality, config)
    return _clamp(damped, config)


def calibrate_for_quality(raw: float, quality: float, config: ScoringConfig) -> float:
    """Quality-only calibration used for aggregate scores."""
    return calibrate(raw, Confidence.HIGH, quality, config)


def downgrade_confidence(confidence: Confidence, quality: float, config: ScoringConfig) -> Confidence:
    """Lower a reported confidence when the photo is poor."""
    if quality < config.heavy_damping_quality:
        return Confidence.LOW
    if quality < config.no_damping_quality and confidence is Confidence.HIGH:
        return Confidence.MEDIUM
    return confidence
