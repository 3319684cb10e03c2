import pytest

from score_engine.models import (
    Confidence,
    IssueKind,
    Measurements,
    PhotoQualityAssessment,
    RatioMeasurement,
    ScoringRequest,
    SymmetryScore,
    TraitKey,
    TraitScore,
)
from score_engine.scoring import default_body_config, default_face_config


@pytest.fixture
def face_config():
    return default_face_config()


@pytest.fixture
def body_config():
    return default_body_config()


@pytest.fixture
def make_quality():
    def _make(score: float = 0.9, issues: tuple[IssueKind, ...] = (), can_proceed: bool = True):
        return PhotoQualityAssessment(score=score, issues=list(issues), can_proceed=can_proceed)

    return _make


@pytest.fixture
def make_trait():
    def _make(
        key: TraitKey,
        damped: float,
        confidence: Confidence = Confidence.HIGH,
        raw: float | None = None,
    ) -> TraitScore:
        return TraitScore(
            trait_key=key,
            raw_score=damped if raw is None else raw,
            damped_score=damped,
            confidence=confidence,
        )

    return _make


@pytest.fixture
def face_measurements():
    return Measurements(
        ratios=[
            RatioMeasurement(
                key=TraitKey.EYE_SPACING_RATIO,
                value=0.30,
                ideal_min=0.28,
                ideal_max=0.35,
                confidence=Confidence.HIGH,
            ),
            RatioMeasurement(
                key=TraitKey.NOSE_WIDTH_RATIO,
                value=0.27,
                ideal_min=0.22,
                ideal_max=0.30,
                confidence=Confidence.HIGH,
            ),
            RatioMeasurement(
                key=TraitKey.MOUTH_WIDTH_RATIO,
                value=0.36,
                ideal_min=0.38,
                ideal_max=0.50,
                confidence=Confidence.HIGH,
            ),
            RatioMeasurement(
                key=TraitKey.JAW_TO_FACE_WIDTH_RATIO,
                value=0.80,
                ideal_min=0.75,
                ideal_max=0.90,
                confidence=Confidence.HIGH,
            ),
            RatioMeasurement(
                key=TraitKey.FACE_WIDTH_TO_HEIGHT,
                value=0.62,
                ideal_min=0.62,
                ideal_max=0.72,
                confidence=Confidence.HIGH,
            ),
        ],
        symmetry=SymmetryScore(overall=0.82, confidence=Confidence.HIGH),
    )


@pytest.fixture
def body_measurements():
    return Measurements(
        ratios=[
            RatioMeasurement(
                key=TraitKey.SHOULDER_TO_WAIST,
                value=1.40,
                ideal_min=1.35,
                ideal_max=1.60,
                confidence=Confidence.MEDIUM,
            ),
            RatioMeasurement(
                key=TraitKey.WAIST_TO_HIP,
                value=0.88,
                ideal_min=0.85,
                ideal_max=0.95,
                confidence=Confidence.MEDIUM,
            ),
            RatioMeasurement(
                key=TraitKey.LEG_TO_TORSO,
                value=0.92,
                ideal_min=1.00,
                ideal_max=1.15,
                confidence=Confidence.LOW,
            ),
        ],
        symmetry=SymmetryScore(overall=0.9, confidence=Confidence.MEDIUM),
    )


@pytest.fixture
def face_request(face_measurements, make_quality):
    return ScoringRequest(
        measurements=face_measurements,
        photo_quality=make_quality(0.9),
        side_provided=True,
    )
