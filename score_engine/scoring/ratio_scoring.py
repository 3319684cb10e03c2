"""Raw 0-10 trait scores from measured ratios, symmetry and external overrides."""

import logging

from score_engine import constants
from score_engine.models.enums import Confidence, IssueKind, StylePreference, TraitKey
from score_engine.models.measurement import RatioMeasurement, SymmetryScore
from score_engine.models.scoring import ScoringRequest, TraitScore
from score_engine.scoring.calibration import calibrate, downgrade_confidence
from score_engine.scoring.config import ReferenceStat, ScoringConfig

logger = logging.getLogger(__name__)

NOTE_WITHIN = "Within ideal range"
NOTE_BELOW = "Below typical range"
NOTE_ABOVE = "Above typical range"
NOTE_OVERRIDE = "Scored by external image analysis"


def score_ratio(measurement: RatioMeasurement, stat: ReferenceStat) -> tuple[float, str]:
    """
    Score one ratio against its ideal band.

    Inside the band the score runs from 7 at either edge to 10 at the center.
    Outside it drops 2 points per population standard deviation of distance
    from the nearest edge, floored at 2.

    Args:
        measurement: Measured ratio with its ideal band
        stat: Population statistics for the active style preference

    Returns:
        (raw score in [2, 10], note)
    """
    value = measurement.value
    low, high = measurement.ideal_min, measurement.ideal_max

    if low <= value <= high:
        half_width = (high - low) / 2
        if half_width == 0:
            return constants.SCORE_MAX, NOTE_WITHIN
        center = (low + high) / 2
        closeness = 1 - abs(value - center) / half_width
        return constants.IN_BAND_FLOOR + constants.IN_BAND_SPAN * closeness, NOTE_WITHIN

    distance = low - value if value < low else value - high
    note = NOTE_BELOW if value < low else NOTE_ABOVE
    if stat.std == 0:
        return constants.IN_BAND_FLOOR, note
    penalty = constants.OUT_OF_BAND_PENALTY_PER_STD * distance / stat.std
    return max(constants.OUT_OF_BAND_FLOOR, constants.IN_BAND_FLOOR - penalty), note


def score_symmetry(symmetry: SymmetryScore) -> float:
    return symmetry.overall * 10


def _weight(trait_key: TraitKey, side_provided: bool, config: ScoringConfig) -> float:
    if not side_provided and trait_key in config.side_dependent_traits:
        return config.side_missing_weight_penalty
    return 1.0


def score_traits(
    request: ScoringRequest,
    style: StylePreference,
    config: ScoringConfig,
) -> list[TraitScore]:
    """
    Produce raw and calibrated scores for every scoreable trait.

    Ratios without reference statistics in ``config`` are skipped. External
    overrides only fill traits that no measurement produced.
    """
    quality = request.photo_quality.score
    scores: list[TraitScore] = []
    scored: set[TraitKey] = set()

    for measurement in request.measurements.ratios:
        by_style = config.reference_stats.get(measurement.key)
        if by_style is None:
            logger.debug("Skipping %s: no reference statistics for %s", measurement.key.value, config.variant.value)
            continue
        if measurement.key in scored:
            logger.debug("Skipping duplicate measurement for %s", measurement.key.value)
            continue

        raw, note = score_ratio(measurement, by_style[style])
        notes = [note] if measurement.note is None else [note, measurement.note]
        scores.append(
            TraitScore(
                trait_key=measurement.key,
                raw_score=raw,
                damped_score=calibrate(raw, measurement.confidence, quality, config),
                confidence=downgrade_confidence(measurement.confidence, quality, config),
                weight=_weight(measurement.key, request.side_provided, config),
                notes=notes,
            )
        )
        scored.add(measurement.key)

    symmetry = request.measurements.symmetry
    if symmetry is not None and TraitKey.SYMMETRY in config.trait_pillars:
        raw = score_symmetry(symmetry)
        if request.photo_quality.has_issue(IssueKind.HEAD_TILT):
            reported = Confidence.LOW
        else:
            reported = downgrade_confidence(symmetry.confidence, quality, config)
        scores.append(
            TraitScore(
                trait_key=TraitKey.SYMMETRY,
                raw_score=raw,
                damped_score=calibrate(raw, symmetry.confidence, quality, config),
                confidence=reported,
                weight=_weight(TraitKey.SYMMETRY, request.side_provided, config),
                notes=list(symmetry.notes),
            )
        )
        scored.add(TraitKey.SYMMETRY)

    for trait_key, override in request.external_overrides.items():
        if trait_key in scored:
            logger.debug("Ignoring override for measured trait %s", trait_key.value)
            continue
        if trait_key not in config.trait_pillars:
            logger.debug("Ignoring override for %s: not a %s trait", trait_key.value, config.variant.value)
            continue
        scores.append(
            TraitScore(
                trait_key=trait_key,
                raw_score=override.score,
                damped_score=calibrate(override.score, override.confidence, quality, config),
                confidence=downgrade_confidence(override.confidence, quality, config),
                weight=_weight(trait_key, request.side_provided, config),
                notes=[NOTE_OVERRIDE],
            )
        )
        scored.add(trait_key)

    logger.debug("Scored %d traits for %s", len(scores), config.variant.value)
    return scores
