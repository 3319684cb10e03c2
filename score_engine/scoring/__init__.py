"""Scoring components for the face and body variants.

- photo_quality: capture signals -> PhotoQualityAssessment
- ratio_scoring: measurements -> raw and calibrated trait scores
- calibration: the single pull-toward-mean law
- pillars: trait scores -> pillar scores -> overall score
- levers: top improvement levers and the potential range
- harmony: independent harmony index
- features: per-feature breakdown
- pipeline: orchestration of all of the above
"""

from score_engine.scoring.calibration import calibrate, confidence_factor, quality_factor
from score_engine.scoring.config import (
    ScoringConfig,
    default_body_config,
    default_face_config,
    get_config,
)
from score_engine.scoring.errors import (
    InconsistentPhotoQualityError,
    MissingMeasurementError,
    PhotoQualityBlockedError,
    ScoringError,
)
from score_engine.scoring.features import build_feature_breakdowns
from score_engine.scoring.harmony import classify_band, compute_harmony_index, golden_ratio_score
from score_engine.scoring.levers import estimate_potential, score_lever_impacts, select_top_levers
from score_engine.scoring.photo_quality import assess_body_photo_quality, assess_face_photo_quality
from score_engine.scoring.pillars import aggregate_pillars, compute_overall_score, resolve_style_preference
from score_engine.scoring.pipeline import ScoringPipeline, run_scoring_pipeline
from score_engine.scoring.ratio_scoring import score_ratio, score_symmetry, score_traits

__all__ = [
    # Configuration
    "ScoringConfig",
    "default_body_config",
    "default_face_config",
    "get_config",
    # Errors
    "InconsistentPhotoQualityError",
    "MissingMeasurementError",
    "PhotoQualityBlockedError",
    "ScoringError",
    # Components
    "aggregate_pillars",
    "assess_body_photo_quality",
    "assess_face_photo_quality",
    "build_feature_breakdowns",
    "calibrate",
    "classify_band",
    "compute_harmony_index",
    "compute_overall_score",
    "confidence_factor",
    "estimate_potential",
    "golden_ratio_score",
    "quality_factor",
    "resolve_style_preference",
    "score_lever_impacts",
    "score_ratio",
    "score_symmetry",
    "score_traits",
    "select_top_levers",
    # Pipeline
    "ScoringPipeline",
    "run_scoring_pipeline",
]
