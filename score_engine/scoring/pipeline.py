"""Scoring pipeline orchestration.

Flow (one direction only):
    photo quality gate -> trait scores -> pillar scores -> overall score
    -> top levers -> potential range
The harmony index and feature breakdown are computed alongside from the
same measurements and trait scores.
"""

import logging

from score_engine import constants
from score_engine.models.enums import Variant
from score_engine.models.scoring import (
    OverallScore,
    PillarScore,
    ScoringOutput,
    ScoringRequest,
    TraitScore,
)
from score_engine.scoring.config import ScoringConfig, get_config
from score_engine.scoring.errors import (
    InconsistentPhotoQualityError,
    MissingMeasurementError,
    PhotoQualityBlockedError,
)
from score_engine.scoring.features import build_feature_breakdowns
from score_engine.scoring.harmony import compute_harmony_index
from score_engine.scoring.levers import estimate_potential, select_top_levers
from score_engine.scoring.pillars import (
    aggregate_pillars,
    compute_overall_score,
    overall_confidence,
    resolve_style_preference,
    summarize,
)
from score_engine.scoring.ratio_scoring import score_traits

logger = logging.getLogger(__name__)


def _round(value: float) -> float:
    return round(value, constants.SCORE_DECIMALS)


def _rounded_trait(trait: TraitScore) -> TraitScore:
    return trait.model_copy(
        update={"raw_score": _round(trait.raw_score), "damped_score": _round(trait.damped_score)}
    )


def _rounded_pillar(pillar: PillarScore) -> PillarScore:
    return pillar.model_copy(update={"score": _round(pillar.score), "weight": round(pillar.weight, 3)})


class ScoringPipeline:
    """Runs every scoring stage for one variant's configuration."""

    def __init__(self, config: ScoringConfig):
        self.config = config

    def run(self, request: ScoringRequest) -> ScoringOutput:
        """
        Score one request.

        Raises:
            MissingMeasurementError: symmetry was not measured
            PhotoQualityBlockedError: photo quality is below the block threshold
            InconsistentPhotoQualityError: can_proceed contradicts the score
        """
        config = self.config
        quality = request.photo_quality

        if request.measurements.symmetry is None:
            raise MissingMeasurementError("Symmetry measurement is required for scoring")
        if quality.score < config.quality_block_threshold:
            raise PhotoQualityBlockedError(
                quality.score,
                config.quality_block_threshold,
                [issue.value for issue in quality.issues],
            )
        # score passes but the flag blocks
        if not quality.can_proceed:
            raise InconsistentPhotoQualityError(
                quality.score, config.quality_block_threshold, quality.can_proceed
            )

        style = resolve_style_preference(request.presentation_override, request.appearance_profile, config)
        trait_scores = score_traits(request, style, config)
        pillars = aggregate_pillars(trait_scores, style, request.side_provided, config)

        current = _round(compute_overall_score(pillars, quality.score, config))
        top_levers = select_top_levers(trait_scores, quality.score, request.side_provided, config)
        potential = estimate_potential(current, top_levers, quality.score, config)

        harmony = compute_harmony_index(request.measurements, quality.score, config)
        features = build_feature_breakdowns(trait_scores, quality.score, request.side_provided, config)

        calibration_applied = quality.score < config.no_damping_quality or any(
            trait.raw_score != trait.damped_score for trait in trait_scores
        )

        overall = OverallScore(
            current=current,
            potential=potential,
            confidence=overall_confidence(pillars, quality.score, config),
            summary=summarize(current, config),
        )

        logger.info(
            "Scored %s request: current=%.1f potential=%.1f-%.1f style=%s levers=%s",
            config.variant.value,
            current,
            potential.min,
            potential.max,
            style.value,
            [lever.lever_key.value for lever in top_levers],
        )

        return ScoringOutput(
            variant=config.variant,
            style_preference=style,
            trait_scores=[_rounded_trait(trait) for trait in trait_scores],
            pillar_scores=[_rounded_pillar(pillar) for pillar in pillars],
            overall=overall,
            overall_current=current,
            overall_potential=potential,
            top_levers=top_levers,
            harmony_index=harmony,
            features=features,
            calibration_applied=calibration_applied,
        )


def run_scoring_pipeline(request: ScoringRequest, variant: Variant = Variant.FACE) -> ScoringOutput:
    """Score ``request`` with the default configuration for ``variant``."""
    return ScoringPipeline(get_config(variant)).run(request)
