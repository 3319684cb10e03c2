"""Harmony index computed independently from pillar aggregation.

Combines bilateral symmetry, a handful of good/ok/off proportion checks and,
for faces, proximity of the width/height ratio to the golden ratio.
"""

import logging

import numpy as np

from score_engine import constants
from score_engine.models.enums import BandStatus, Confidence
from score_engine.models.measurement import Measurements, SymmetryScore
from score_engine.models.scoring import HarmonyComponent, HarmonyIndex, RatioSignal
from score_engine.scoring.calibration import calibrate_for_quality
from score_engine.scoring.config import HarmonyBand, ScoringConfig

logger = logging.getLogger(__name__)

GOLDEN_RATIO_COMPONENT = "golden_ratio_proximity"


def classify_band(value: float, band: HarmonyBand) -> tuple[BandStatus, float]:
    """Good inside the ideal band, ok within tolerance of its center, off otherwise."""
    if band.ideal_min <= value <= band.ideal_max:
        return BandStatus.GOOD, band.good_score
    if abs(value - band.center) < band.ok_tolerance:
        return BandStatus.OK, constants.HARMONY_OK_SCORE
    return BandStatus.OFF, constants.HARMONY_OFF_SCORE


def golden_ratio_score(value: float) -> tuple[float, float]:
    """
    Score proximity of a width/height ratio to 1/phi.

    Returns:
        (score, absolute deviation from 1/phi)
    """
    deviation = abs(value - 1 / constants.GOLDEN_RATIO)
    for max_deviation, score in constants.GOLDEN_RATIO_TIERS:
        if deviation < max_deviation:
            return score, deviation
    return constants.GOLDEN_RATIO_FALLBACK_SCORE, deviation


def _symmetry_component(symmetry: SymmetryScore) -> HarmonyComponent:
    score = symmetry.overall * 10
    if score >= 7:
        note = "Good bilateral symmetry"
    elif score >= 5:
        note = "Normal asymmetry levels"
    else:
        note = "Some asymmetry detected (may be photo angle)"
    return HarmonyComponent(
        score=round(score, 1),
        deviation_pct=round((1 - symmetry.overall) * 100, 1),
        note=note,
    )


def _golden_ratio_component(value: float) -> HarmonyComponent:
    score, deviation = golden_ratio_score(value)
    if score >= 7:
        note = "Close to golden ratio proportions"
    elif score >= 5:
        note = "Within normal proportional range"
    else:
        note = "Proportions deviate from classical ideals"
    return HarmonyComponent(score=score, deviation_pct=round(deviation * 100, 1), note=note)


def _harmony_confidence(quality: float, low_signals: int, config: ScoringConfig) -> Confidence:
    if quality < config.heavy_damping_quality or low_signals > constants.HARMONY_LOW_SIGNALS_FOR_LOW:
        return Confidence.LOW
    if quality < config.no_damping_quality or low_signals > 0:
        return Confidence.MEDIUM
    return Confidence.HIGH


def compute_harmony_index(
    measurements: Measurements,
    quality: float,
    config: ScoringConfig,
) -> HarmonyIndex:
    """
    Build the harmony index from raw measurements.

    Args:
        measurements: Ratios and symmetry for the photo
        quality: Photo quality score [0, 1]
        config: Active scoring configuration

    Returns:
        HarmonyIndex whose score is the quality-calibrated mean of all sub-scores
    """
    components: dict[str, HarmonyComponent] = {}
    signals: list[RatioSignal] = []
    sub_scores: list[float] = []

    if measurements.symmetry is not None:
        component = _symmetry_component(measurements.symmetry)
        components[config.symmetry_component] = component
        sub_scores.append(measurements.symmetry.overall * 10)

    for band in config.harmony_bands:
        measurement = measurements.find(*band.trait_keys)
        if measurement is None:
            continue
        status, score = classify_band(measurement.value, band)
        signals.append(
            RatioSignal(
                component_key=band.component_key,
                trait_key=measurement.key,
                label=band.label,
                value=round(measurement.value, 3),
                band=(band.ideal_min, band.ideal_max),
                status=status,
                confidence=measurement.confidence,
            )
        )
        sub_scores.append(score)

    if config.golden_ratio_trait is not None:
        measurement = measurements.find(config.golden_ratio_trait)
        if measurement is not None:
            component = _golden_ratio_component(measurement.value)
            components[GOLDEN_RATIO_COMPONENT] = component
            sub_scores.append(component.score)

    raw = float(np.mean(sub_scores)) if sub_scores else config.target_mean
    low_signals = sum(1 for signal in signals if signal.confidence is Confidence.LOW)
    logger.debug("Harmony raw %.2f from %d sub-scores", raw, len(sub_scores))

    return HarmonyIndex(
        score=round(calibrate_for_quality(raw, quality, config), 1),
        confidence=_harmony_confidence(quality, low_signals, config),
        components=components,
        ratio_signals=signals,
    )
